from __future__ import annotations

import calendar
from datetime import MAXYEAR, MINYEAR, date, datetime, timedelta
from zoneinfo import ZoneInfo

DATE_KEY_FORMAT = "%Y-%m-%d"


def date_key(value: date | datetime) -> str:
    """Return the canonical ``YYYY-MM-DD`` key for a local calendar date.

    Every component joins tasks, calendar cells and stamps on this key, so
    nothing else in the package formats dates by hand.
    """
    if isinstance(value, datetime):
        value = value.date()
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_date_key(key: str) -> date:
    raw = str(key)
    parsed = datetime.strptime(raw, DATE_KEY_FORMAT).date()
    # strptime accepts "2024-6-1"; keys must be zero-padded.
    if date_key(parsed) != raw:
        raise ValueError(f"Date key must be zero-padded YYYY-MM-DD: {raw!r}")
    return parsed


def year_month_key(year: int, month0: int) -> str:
    year, month0 = normalize_month(year, month0)
    return f"{year:04d}-{month0 + 1:02d}"


def normalize_month(year: int, month0: int) -> tuple[int, int]:
    # Floor division keeps negative months in the previous years.
    return year + month0 // 12, month0 % 12


def shift_month(year: int, month0: int, delta: int) -> tuple[int, int]:
    return normalize_month(year, month0 + delta)


def first_weekday(year: int, month0: int) -> int:
    """Weekday of day 1 of the month, 0=Sunday .. 6=Saturday."""
    year, month0 = normalize_month(year, month0)
    return (date(year, month0 + 1, 1).weekday() + 1) % 7


def days_in_month(year: int, month0: int) -> int:
    year, month0 = normalize_month(year, month0)
    return calendar.monthrange(year, month0 + 1)[1]


def in_calendar_range(year: int, month0: int) -> bool:
    year, _ = normalize_month(year, month0)
    return MINYEAR <= year <= MAXYEAR


def add_days(value: date | datetime, days: int) -> date:
    if isinstance(value, datetime):
        value = value.date()
    return value + timedelta(days=days)


def local_now(tz_name: str | None = None) -> datetime:
    if tz_name:
        return datetime.now(ZoneInfo(tz_name)).replace(tzinfo=None)
    return datetime.now()


def today(tz_name: str | None = None) -> date:
    return local_now(tz_name).date()
