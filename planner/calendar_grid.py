from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import AbstractSet, List, Mapping, Optional, Sequence, Tuple

from planner.dates import date_key, days_in_month, first_weekday, normalize_month
from planner.indexing import tasks_on
from planner.models import Task

MAX_TAG_MARKERS = 3
WEEK_LENGTH = 7


@dataclass(frozen=True)
class CalendarCell:
    date: Optional[str] = None
    day_of_month: Optional[int] = None
    is_selected: bool = False
    is_today: bool = False
    is_stamped: bool = False
    tag_markers: Tuple[str, ...] = ()
    task_count: int = 0

    @property
    def is_padding(self) -> bool:
        return self.date is None


def _as_key(value) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return date_key(value)


def tag_markers(tasks: Sequence[Task], limit: int = MAX_TAG_MARKERS) -> Tuple[str, ...]:
    seen: List[str] = []
    for task in tasks:
        if task.tag in seen:
            continue
        seen.append(task.tag)
        if len(seen) == limit:
            break
    return tuple(seen)


def build_month_grid(
    year: int,
    month0: int,
    selected_date,
    today_date,
    index: Mapping[str, Sequence[Task]],
    stamped_dates: AbstractSet[str] = frozenset(),
) -> List[CalendarCell]:
    """Lay out one month as whole weeks starting on Sunday.

    ``month0`` is 0-based and may fall outside 0..11; it is normalised with
    calendar arithmetic. The selected cell carries no tag markers.
    """
    year, month0 = normalize_month(year, month0)
    selected_key = _as_key(selected_date)
    today_key = _as_key(today_date)

    leading = first_weekday(year, month0)
    total_days = days_in_month(year, month0)

    cells: List[CalendarCell] = [CalendarCell() for _ in range(leading)]
    for day in range(1, total_days + 1):
        key = date_key(date(year, month0 + 1, day))
        day_tasks = tasks_on(index, key)
        is_selected = key == selected_key
        cells.append(
            CalendarCell(
                date=key,
                day_of_month=day,
                is_selected=is_selected,
                is_today=key == today_key,
                is_stamped=key in stamped_dates,
                tag_markers=() if is_selected else tag_markers(day_tasks),
                task_count=len(day_tasks),
            )
        )

    trailing = (WEEK_LENGTH - (leading + total_days) % WEEK_LENGTH) % WEEK_LENGTH
    cells.extend(CalendarCell() for _ in range(trailing))
    return cells


def weeks(cells: Sequence[CalendarCell]) -> List[List[CalendarCell]]:
    return [list(cells[i:i + WEEK_LENGTH]) for i in range(0, len(cells), WEEK_LENGTH)]
