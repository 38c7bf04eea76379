from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_hhmm, parse_iso_date, parse_iso_datetime
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance row per staff member per date (read-only here)."""

    work_date: date
    status: AttendanceStatus
    punch_in: Optional[datetime] = None
    punch_out: Optional[datetime] = None
    shift_start: Optional[time] = None
    shift_end: Optional[time] = None
    grace_minutes: Optional[int] = None
    leave_type: Optional[str] = None
    staff_id: Optional[int] = None
    attendance_id: Optional[int] = None

    @property
    def is_half_day(self) -> bool:
        return self.status == AttendanceStatus.HALF_DAY or (self.leave_type or "").strip().lower() == "half day"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "AttendanceRecord":
        """Parse a JSON attendance row: date, status, punchIn, punchOut, shiftStart, shiftEnd, graceMinutes, leaveType."""
        try:
            raw_date = data.get("date") or data.get("workDate")
            if not raw_date:
                raise ValidationError("attendance record needs a date")
            grace = data.get("graceMinutes")
            return cls(
                work_date=parse_iso_date(str(raw_date)[:10]),
                status=AttendanceStatus.parse(data.get("status")),
                punch_in=parse_iso_datetime(data["punchIn"]) if data.get("punchIn") else None,
                punch_out=parse_iso_datetime(data["punchOut"]) if data.get("punchOut") else None,
                shift_start=parse_hhmm(data.get("shiftStart")),
                shift_end=parse_hhmm(data.get("shiftEnd")),
                grace_minutes=int(grace) if grace is not None else None,
                leave_type=data.get("leaveType"),
                staff_id=data.get("staffId"),
            )
        except (TypeError, ValueError, OverflowError) as e:
            raise ValidationError(f"Invalid attendance record: {e}") from None
