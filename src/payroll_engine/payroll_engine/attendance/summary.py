from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Iterable

from ..common.money import ZERO
from ..core.constants import HALF_DAY_WEIGHT
from ..core.enums import AttendanceStatus
from .model import AttendanceRecord

_FULL_DAY_STATUSES = {AttendanceStatus.PRESENT, AttendanceStatus.APPROVED}


def day_weight(record: AttendanceRecord) -> Decimal:
    """1 for Present/Approved, 0.5 for a half day, 0 otherwise."""
    if record.is_half_day:
        return HALF_DAY_WEIGHT
    if record.status in _FULL_DAY_STATUSES:
        return Decimal(1)
    return ZERO


def count_present_days(records: Iterable[AttendanceRecord]) -> Decimal:
    """Weighted present days; one record per date counts (the last one wins)."""
    by_date: dict[date, AttendanceRecord] = {}
    for r in records:
        by_date[r.work_date] = r
    return sum((day_weight(r) for r in by_date.values()), ZERO)
