from __future__ import annotations

import unittest
from datetime import date, datetime

from planner.schedule_window import build_schedule_window, group_by_date, sort_by_time
from tests.helpers import make_task


class TestTodayTasks(unittest.TestCase):
    def test_sorted_by_time(self) -> None:
        tasks = [
            make_task(1, "2024-06-10", "09:00", "work"),
            make_task(2, "2024-06-10", "08:00", "study"),
        ]
        window = build_schedule_window(tasks, date(2024, 6, 10))
        self.assertEqual([task.id for task in window.today_tasks], ["2", "1"])

    def test_ties_keep_input_order(self) -> None:
        tasks = [
            make_task("a", "2024-06-10", "10:00"),
            make_task("b", "2024-06-10", "07:30"),
            make_task("c", "2024-06-10", "10:00"),
        ]
        window = build_schedule_window(tasks, datetime(2024, 6, 10, 22, 15))
        self.assertEqual([task.id for task in window.today_tasks], ["b", "a", "c"])

    def test_sort_by_time_is_stable(self) -> None:
        tasks = [make_task(1, "2024-06-10", "12:00"), make_task(2, "2024-06-11", "08:00"), make_task(3, "2024-06-09", "12:00")]
        self.assertEqual([task.id for task in sort_by_time(tasks)], ["2", "1", "3"])

    def test_empty_input(self) -> None:
        window = build_schedule_window([], date(2024, 6, 10))
        self.assertEqual(window.today_tasks, [])
        self.assertEqual(window.upcoming_groups, {})
        self.assertTrue(window.is_empty)


class TestUpcomingGroups(unittest.TestCase):
    def setUp(self) -> None:
        self.tasks = [
            make_task("today", "2024-06-10", "12:00"),
            make_task("d1-late", "2024-06-11", "18:00"),
            make_task("d7", "2024-06-17", "07:00"),
            make_task("d8", "2024-06-18", "07:00"),
            make_task("d1-early", "2024-06-11", "06:00"),
            make_task("past", "2024-06-09", "06:00"),
            make_task("d3", "2024-06-13", "00:00"),
        ]

    def test_window_is_tomorrow_through_day_seven(self) -> None:
        window = build_schedule_window(self.tasks, datetime(2024, 6, 10, 23, 59))
        self.assertEqual(list(window.upcoming_groups), ["2024-06-11", "2024-06-13", "2024-06-17"])
        ids = [task.id for task in window.upcoming_tasks]
        self.assertEqual(ids, ["d1-early", "d1-late", "d3", "d7"])

    def test_today_and_day_eight_excluded(self) -> None:
        window = build_schedule_window(self.tasks, date(2024, 6, 10))
        upcoming_ids = {task.id for task in window.upcoming_tasks}
        today_ids = {task.id for task in window.today_tasks}
        self.assertNotIn("today", upcoming_ids)
        self.assertNotIn("d8", upcoming_ids | today_ids)
        self.assertFalse(upcoming_ids & today_ids)

    def test_window_crosses_month_boundary(self) -> None:
        tasks = [make_task(1, "2024-07-01"), make_task(2, "2024-07-02"), make_task(3, "2024-07-03")]
        window = build_schedule_window(tasks, date(2024, 6, 25))
        self.assertEqual(list(window.upcoming_groups), ["2024-07-01", "2024-07-02"])

    def test_upcoming_sorted_by_date_then_time(self) -> None:
        window = build_schedule_window(self.tasks, date(2024, 6, 10))
        keys = [(task.due_date, task.time) for task in window.upcoming_tasks]
        self.assertEqual(keys, sorted(keys))

    def test_upcoming_reference_anchors_week_separately(self) -> None:
        window = build_schedule_window(self.tasks, date(2024, 6, 11), upcoming_reference=date(2024, 6, 10))
        self.assertEqual([task.id for task in window.today_tasks], ["d1-early", "d1-late"])
        self.assertIn("2024-06-11", window.upcoming_groups)

    def test_input_not_mutated(self) -> None:
        snapshot = list(self.tasks)
        build_schedule_window(self.tasks, date(2024, 6, 10))
        self.assertEqual(self.tasks, snapshot)

    def test_group_by_date_keeps_first_seen_order(self) -> None:
        tasks = [make_task(1, "2024-06-12"), make_task(2, "2024-06-11"), make_task(3, "2024-06-12")]
        groups = group_by_date(tasks)
        self.assertEqual(list(groups), ["2024-06-12", "2024-06-11"])
        self.assertEqual([task.id for task in groups["2024-06-12"]], ["1", "3"])


if __name__ == "__main__":
    unittest.main(verbosity=2)
