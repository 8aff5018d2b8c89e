from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from planner.dates import add_days, date_key
from planner.models import Task

UPCOMING_DAYS = 7


@dataclass(frozen=True)
class ScheduleWindow:
    today_tasks: List[Task] = field(default_factory=list)
    upcoming_groups: Dict[str, List[Task]] = field(default_factory=dict)

    @property
    def upcoming_tasks(self) -> List[Task]:
        return [task for group in self.upcoming_groups.values() for task in group]

    @property
    def is_empty(self) -> bool:
        return not self.today_tasks and not self.upcoming_groups


def _sort_key(task: Task) -> str:
    return f"{task.due_date}T{task.time}"


def sort_by_time(tasks: Iterable[Task]) -> List[Task]:
    # Stable: equal times keep their input order.
    return sorted(tasks, key=lambda task: task.time)


def group_by_date(tasks: Iterable[Task]) -> Dict[str, List[Task]]:
    # Group order follows first appearance; callers pass date-sorted tasks.
    groups: Dict[str, List[Task]] = {}
    for task in tasks:
        groups.setdefault(task.due_date, []).append(task)
    return groups


def build_schedule_window(tasks: Iterable[Task], reference_now, upcoming_reference=None) -> ScheduleWindow:
    """Split tasks into the reference day's list and the next seven days.

    ``reference_now`` (a date or datetime) selects the day list; the upcoming
    window runs from the following local midnight through day +7 inclusive.
    ``upcoming_reference`` anchors that window elsewhere when given.
    """
    items = list(tasks)
    today_key = date_key(reference_now)
    anchor = reference_now if upcoming_reference is None else upcoming_reference
    lower = date_key(add_days(anchor, 1))
    upper = date_key(add_days(anchor, UPCOMING_DAYS))

    today_tasks = sort_by_time(task for task in items if task.due_date == today_key)
    upcoming = sorted(
        (task for task in items if lower <= task.due_date <= upper),
        key=_sort_key,
    )
    return ScheduleWindow(today_tasks=today_tasks, upcoming_groups=group_by_date(upcoming))
