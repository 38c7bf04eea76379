from __future__ import annotations

from typing import Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_time
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_staff_and_month(self, staff_id: int, year: int, month: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, staff_id, work_date, status, punch_in, punch_out,
                       shift_start, shift_end, grace_minutes, leave_type
                FROM attendance_records
                WHERE staff_id=%s AND YEAR(work_date)=%s AND MONTH(work_date)=%s
                ORDER BY work_date
                """,
                (staff_id, int(year), int(month)),
            )
            rows = fetchall(cur)
            return [
                AttendanceRecord(
                    attendance_id=int(r["attendance_id"]),
                    staff_id=int(r["staff_id"]),
                    work_date=r["work_date"],
                    status=AttendanceStatus.parse(r["status"]),
                    punch_in=r.get("punch_in"),
                    punch_out=r.get("punch_out"),
                    shift_start=normalize_mysql_time(r.get("shift_start")),
                    shift_end=normalize_mysql_time(r.get("shift_end")),
                    grace_minutes=int(r["grace_minutes"]) if r.get("grace_minutes") is not None else None,
                    leave_type=r.get("leave_type"),
                )
                for r in rows
            ]
