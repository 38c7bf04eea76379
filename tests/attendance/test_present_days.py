from datetime import date, datetime

import pytest

from src.payroll_engine.payroll_engine.attendance.model import AttendanceRecord
from src.payroll_engine.payroll_engine.attendance.summary import count_present_days, day_weight
from src.payroll_engine.payroll_engine.core.enums import AttendanceStatus
from src.payroll_engine.payroll_engine.core.exceptions import ValidationError


def _rec(day, status, leave_type=None):
    return AttendanceRecord(work_date=date(2023, 2, day), status=status, leave_type=leave_type)


def test_weighted_present_days():
    records = [
        _rec(1, AttendanceStatus.PRESENT),
        _rec(2, AttendanceStatus.APPROVED),
        _rec(3, AttendanceStatus.HALF_DAY),
        _rec(6, AttendanceStatus.ABSENT),
        _rec(7, AttendanceStatus.ON_LEAVE, leave_type="Half Day"),
        _rec(8, AttendanceStatus.ON_LEAVE, leave_type="Sick"),
        _rec(9, AttendanceStatus.PENDING),
    ]

    assert count_present_days(records) == 3


def test_one_record_per_date_last_wins():
    records = [_rec(1, AttendanceStatus.ABSENT), _rec(1, AttendanceStatus.PRESENT), _rec(2, AttendanceStatus.HALF_DAY)]

    assert count_present_days(records) == 1.5


def test_day_weight_of_empty_month():
    assert count_present_days([]) == 0
    assert day_weight(_rec(1, AttendanceStatus.HALF_DAY)) == 0.5


def test_status_parse_is_case_insensitive():
    assert AttendanceStatus.parse(" half day ") is AttendanceStatus.HALF_DAY
    with pytest.raises(ValueError):
        AttendanceStatus.parse("holiday")


def test_record_from_json_payload():
    record = AttendanceRecord.from_mapping(
        {
            "date": "2023-02-01",
            "status": "present",
            "punchIn": "2023-02-01T09:42:00",
            "shiftStart": "09:30",
            "shiftEnd": "18:30",
            "graceMinutes": 5,
        }
    )

    assert record.status is AttendanceStatus.PRESENT
    assert record.punch_in == datetime(2023, 2, 1, 9, 42)
    assert record.grace_minutes == 5


@pytest.mark.parametrize(
    "payload",
    [
        {"status": "Present"},
        {"date": "2023-02-30", "status": "Present"},
        {"date": "2023-02-01", "status": "Late"},
        {"date": "2023-02-01", "status": "Present", "punchIn": "yesterday"},
    ],
)
def test_record_from_bad_payload(payload):
    with pytest.raises(ValidationError):
        AttendanceRecord.from_mapping(payload)
