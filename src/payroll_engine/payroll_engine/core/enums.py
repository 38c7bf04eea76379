from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status as stored by the attendance subsystem."""

    PRESENT = "Present"
    ABSENT = "Absent"
    HALF_DAY = "Half Day"
    ON_LEAVE = "On Leave"
    PENDING = "Pending"
    APPROVED = "Approved"

    @classmethod
    def parse(cls, value: str) -> "AttendanceStatus":
        """Case/space-insensitive lookup ("present", " half day ")."""
        if isinstance(value, cls):
            return value
        key = str(value or "").strip().lower()
        for member in cls:
            if member.value.lower() == key:
                return member
        raise ValueError(f"Unknown attendance status: {value!r}")


class MobileAllowanceType(str, Enum):
    MONTHLY = "monthly"
    YEARLY = "yearly"


class WeeklyOffPattern(str, Enum):
    """Rule deciding which weekdays are non-working by default."""

    STANDARD = "standard"
    ODD_EVEN_SATURDAY = "oddEvenSaturday"
    CUSTOM = "custom"


class DayType(str, Enum):
    HOLIDAY = "holiday"
    WEEK_OFF = "week_off"
    WORKING = "working"


class FineCalculationType(str, Enum):
    FLAT_PER_DAY = "flat_per_day"
    PER_MINUTE = "per_minute"
    FIXED_PER_HOUR = "fixed_per_hour"
    SHIFT_BASED = "shift_based"
    TIERED = "tiered"


class FineRuleType(str, Enum):
    ONE_X_SALARY = "1x_salary"
    TWO_X_SALARY = "2x_salary"
    THREE_X_SALARY = "3x_salary"
    HALF_DAY = "half_day"
    FULL_DAY = "full_day"
    CUSTOM = "custom"


class FineApplyTo(str, Enum):
    LATE_ARRIVAL = "late_arrival"
    EARLY_EXIT = "early_exit"
    BOTH = "both"


class CustomAmountUnit(str, Enum):
    PER_MINUTE = "per_minute"
    PER_HOUR = "per_hour"
    FIXED = "fixed"
