from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_for_staff_and_month(self, staff_id: int, year: int, month: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
