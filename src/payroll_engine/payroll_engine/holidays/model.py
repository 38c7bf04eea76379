from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..core.enums import WeeklyOffPattern


@dataclass(frozen=True)
class Holiday:
    holiday_date: date
    name: Optional[str] = None


@dataclass(frozen=True)
class WeeklyOffSetting:
    """Business setting: week-off pattern plus weekdays for the custom pattern (Monday=0)."""

    pattern: WeeklyOffPattern = WeeklyOffPattern.STANDARD
    weekly_off_days: Optional[frozenset[int]] = field(default=None)
