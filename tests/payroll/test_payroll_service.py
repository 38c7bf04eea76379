from datetime import time
from decimal import Decimal

import pytest

from src.payroll_engine.payroll_engine.core.enums import FineCalculationType, WeeklyOffPattern
from src.payroll_engine.payroll_engine.core.exceptions import NotFoundError, ValidationError
from src.payroll_engine.payroll_engine.fines.model import LateFinePolicyConfig
from src.payroll_engine.payroll_engine.fines.policy import LateFinePolicy
from src.payroll_engine.payroll_engine.holidays.model import WeeklyOffSetting
from src.payroll_engine.payroll_engine.payroll.service import PayrollService

from .fakes import default_repos, present

NET = Decimal("17511.10625")


def _service(records=(), **kwargs):
    staff, attendance, holidays, settings = default_repos()
    attendance.records.extend(records)
    kwargs.setdefault(
        "fine_policy",
        LateFinePolicy(LateFinePolicyConfig(calculation_type=FineCalculationType.PER_MINUTE, rate_per_minute=Decimal("2"))),
    )
    return PayrollService(staff, attendance, holidays, settings, **kwargs), settings


def test_estimate_with_full_attendance():
    service, _ = _service()
    estimate = service.monthly_estimate(1, 2023, 2, present_days=19)

    # 20 weekdays in Feb 2023 minus the holiday on the 15th
    assert estimate.working_days.working_days == 19
    assert estimate.working_days.holiday_count == 1
    assert estimate.prorated.prorated_net_salary == NET
    assert estimate.final_net_salary == NET
    assert estimate.migrated_from_legacy is False


def test_present_days_come_from_attendance():
    service, _ = _service([present(1), present(2), present(3)])
    estimate = service.monthly_estimate(1, 2023, 2)

    assert estimate.present_days == 3
    assert estimate.prorated.prorated_net_salary == NET * (Decimal(3) / Decimal(19))


def test_late_fine_is_subtracted():
    service, _ = _service([present(1, 9, 40), present(2)])
    estimate = service.monthly_estimate(1, 2023, 2, present_days=19)

    assert estimate.fine.late_days == 1
    assert estimate.fine.total_fine_amount == Decimal("20")
    assert estimate.final_net_salary == NET - 20


def test_shift_based_fine_uses_daily_net():
    policy = LateFinePolicy(LateFinePolicyConfig(default_shift_start=time(9, 30), default_shift_end=time(18, 30)))
    service, _ = _service([present(1, 10, 30)], fine_policy=policy)
    estimate = service.monthly_estimate(1, 2023, 2, present_days=19)

    # one hour late at (net / working days) / 9 hours
    assert estimate.fine.total_fine_amount == NET / Decimal(19) / Decimal(9)


def test_shift_based_fine_without_shift_length_is_zero():
    service, _ = _service([present(1, 10, 30)], fine_policy=LateFinePolicy())
    estimate = service.monthly_estimate(1, 2023, 2, present_days=19)

    assert estimate.fine.late_days == 1
    assert estimate.fine.total_fine_amount == 0


def test_fine_never_drives_net_below_zero():
    policy = LateFinePolicy(
        LateFinePolicyConfig(calculation_type=FineCalculationType.FLAT_PER_DAY, flat_amount_per_day=Decimal("100000"))
    )
    service, _ = _service([present(1, 11, 0)], fine_policy=policy)

    assert service.monthly_estimate(1, 2023, 2, present_days=1).final_net_salary == 0


def test_business_weekly_off_setting_is_used():
    service, settings = _service()
    settings.settings[10] = WeeklyOffSetting(pattern=WeeklyOffPattern.ODD_EVEN_SATURDAY)

    assert service.monthly_estimate(1, 2023, 2, present_days=0).working_days.working_days == 21


def test_default_weekly_off_when_business_unknown():
    service, _ = _service(default_weekly_off=WeeklyOffSetting(WeeklyOffPattern.CUSTOM, frozenset({6})))
    estimate = service.monthly_estimate(2, 2023, 2, present_days=0)

    assert estimate.working_days.week_off_count == 4
    assert estimate.working_days.holiday_count == 0


def test_legacy_salary_is_migrated_on_read():
    service, _ = _service()
    estimate = service.monthly_estimate(2, 2023, 2, present_days=20)

    assert estimate.migrated_from_legacy is True
    assert estimate.structure.monthly.net_monthly_salary == Decimal("16000")
    assert estimate.final_net_salary == Decimal("16000")


def test_missing_staff_and_salary():
    service, _ = _service()

    with pytest.raises(NotFoundError):
        service.monthly_estimate(99, 2023, 2)
    with pytest.raises(ValidationError):
        service.monthly_estimate(3, 2023, 2)
    with pytest.raises(ValidationError):
        service.monthly_estimate(1, 2023, 0)


def test_estimate_to_dict():
    service, _ = _service([present(1, 9, 40)])
    out = service.monthly_estimate(1, 2023, 2, present_days=19).to_dict()

    assert out["workingDays"] == {"totalDays": 28, "workingDays": 19, "holidayCount": 1, "weekOffCount": 8}
    assert out["presentDays"] == 19.0
    assert out["proratedSalary"]["attendancePercentage"] == 100.0
    assert out["fineInfo"]["totalFineAmount"] == 20.0
    assert out["finalNetSalary"] == 17491.11
