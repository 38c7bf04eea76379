from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from ..core.enums import DayType


@dataclass(frozen=True)
class WorkingDaysInfo:
    """Day tallies for one (year, month).

    Invariant: total_days == working_days + holiday_count + week_off_count.
    """

    year: int
    month: int
    total_days: int
    working_days: int
    holiday_count: int
    week_off_count: int
    day_types: tuple[DayType, ...] = field(default=(), repr=False)

    def classify(self, day: date) -> DayType:
        if (day.year, day.month) != (self.year, self.month):
            raise ValueError(f"{day.isoformat()} is outside {self.year}-{self.month:02d}")
        return self.day_types[day.day - 1]

    def to_dict(self) -> dict:
        return {
            "totalDays": self.total_days,
            "workingDays": self.working_days,
            "holidayCount": self.holiday_count,
            "weekOffCount": self.week_off_count,
        }
