from __future__ import annotations

import html
from datetime import date, timedelta

from planner.constants import STAMP_EMOJI, TAG_COLORS, TAG_EMOJI, TAG_LABELS, WEEKDAY_COLORS, WEEKDAY_LABELS
from planner.dates import add_days, date_key, parse_date_key
from planner.indexing import tasks_on
from planner.schedule_window import sort_by_time


def tag_badge_html(tag):
    color = TAG_COLORS.get(tag, TAG_COLORS["other"])
    label = html.escape(TAG_LABELS.get(tag, tag))
    return f"<span class='tag-badge' style='background:{color};'>{label}</span>"


def weekday_header_html(idx):
    color = WEEKDAY_COLORS.get(idx)
    style = f" style='color:{color};'" if color else ""
    return f"<div class='weekday-label'{style}>{WEEKDAY_LABELS[idx]}</div>"


def day_button_label(cell):
    """Button text for a calendar cell: stamp, day number, tag markers."""
    if cell.is_padding:
        return ""
    day = f"**{cell.day_of_month}**" if cell.is_today else str(cell.day_of_month)
    star = STAMP_EMOJI if cell.is_stamped else ""
    dots = "".join(TAG_EMOJI.get(tag, TAG_EMOJI["other"]) for tag in cell.tag_markers)
    return " ".join(part for part in (star, day, dots) if part)


def day_button_help(cell):
    if cell.is_padding:
        return None
    parts = [format_day_label(cell.date)]
    if cell.task_count:
        parts.append(f"タスク {cell.task_count} 件")
    return " • ".join(parts)


def format_day_label(value, with_year=True):
    """Japanese label such as ``2024年6月10日(月)``."""
    if isinstance(value, str):
        value = parse_date_key(value)
    weekday = WEEKDAY_LABELS[(value.weekday() + 1) % 7]
    prefix = f"{value.year}年" if with_year else ""
    return f"{prefix}{value.month}月{value.day}日({weekday})"


def build_week_overview_rows(index, start_day: date, days: int = 7):
    rows = []
    for offset in range(days):
        day = add_days(start_day, offset)
        items = sort_by_time(tasks_on(index, date_key(day)))
        rows.append(
            {
                "日付": format_day_label(day, with_year=False),
                "件数": len(items),
                "完了": sum(1 for task in items if task.done),
                "予定": " | ".join(f"{task.time} {task.title}" for task in items[:3]),
            }
        )
    return rows


def week_start(reference: date) -> date:
    # Weeks start on Sunday, matching the month grid.
    return reference - timedelta(days=(reference.weekday() + 1) % 7)
