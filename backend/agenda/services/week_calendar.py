"""Calendar helpers for Monday-start work weeks and HH:MM time strings."""
from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import List

WORK_WEEK_LENGTH = 5


def parse_iso_date(value: date | datetime | str) -> date:
    """Accept a date, datetime or YYYY-MM-DD string and return a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value.strip())


def get_monday_of(day: date | str | None = None) -> date:
    """Return the Monday of the week containing ``day`` (defaults to today)."""
    target = parse_iso_date(day) if day is not None else date.today()
    return target - timedelta(days=target.weekday())


def get_current_monday() -> date:
    return get_monday_of(date.today())


def get_today() -> date:
    return date.today()


def is_monday(day: date | str) -> bool:
    return parse_iso_date(day).weekday() == 0


def get_week_days(monday: date | str) -> List[date]:
    """Return the five work days (Mon-Fri) starting at ``monday``."""
    start = parse_iso_date(monday)
    return [start + timedelta(days=offset) for offset in range(WORK_WEEK_LENGTH)]


def get_day_name(day: date | str) -> str:
    return parse_iso_date(day).strftime("%A")


def format_week_range(monday: date | str) -> str:
    """Format a work week for display, e.g. "Feb 16 – 20, 2026"."""
    start = parse_iso_date(monday)
    friday = start + timedelta(days=WORK_WEEK_LENGTH - 1)
    if (start.year, start.month) == (friday.year, friday.month):
        return f"{start.strftime('%b')} {start.day} – {friday.day}, {friday.year}"
    return f"{start.strftime('%b')} {start.day} – {friday.strftime('%b')} {friday.day}, {friday.year}"


def is_current_week(day: date | str) -> bool:
    return get_monday_of(day) == get_current_monday()


def time_to_minutes(value: str) -> int:
    """Convert "HH:MM" into minutes since midnight."""
    parts = value.strip().split(":")
    if len(parts) != 2:
        raise ValueError(f"Invalid time format: {value!r}")
    try:
        hours, minutes = int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise ValueError(f"Invalid time format: {value!r}") from exc
    if not (0 <= hours <= 24 and 0 <= minutes <= 59) or (hours == 24 and minutes):
        raise ValueError(f"Time out of range: {value!r}")
    return hours * 60 + minutes


def minutes_to_time(total_minutes: int) -> str:
    hours = total_minutes // 60
    minutes = total_minutes % 60
    return f"{hours:02d}:{minutes:02d}"
