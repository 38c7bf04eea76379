from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal
from typing import Optional, Union


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO-8601 timestamp ("2026-01-05T09:42:00")."""
    return datetime.fromisoformat(value)


def parse_hhmm(value: Union[str, time, None]) -> Optional[time]:
    """Parse "HH:MM" (or "HH:MM:SS") shift times."""
    if value is None or value == "":
        return None
    if isinstance(value, time):
        return value
    parts = str(value).strip().split(":")
    if len(parts) < 2:
        raise ValueError(f"Invalid time string: {value!r}")
    hours = int(parts[0])
    minutes = int(parts[1])
    seconds = int(parts[2]) if len(parts) >= 3 and parts[2] else 0
    return time(hour=hours, minute=minutes, second=seconds)


def as_date(value: Union[date, datetime]) -> date:
    """Calendar day of a date/datetime (holidays are matched by day, not identity)."""
    if isinstance(value, datetime):
        return value.date()
    return value


def shift_hours_between(start: time, end: time) -> Decimal:
    """Shift length in hours; an end before start is an overnight shift."""
    start_minutes = start.hour * 60 + start.minute
    end_minutes = end.hour * 60 + end.minute
    diff = end_minutes - start_minutes
    if diff < 0:
        diff += 24 * 60
    return Decimal(diff) / Decimal(60)
