from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from ..app_logger import get_logger
from ..attendance.repository import AttendanceRepository
from ..attendance.summary import count_present_days
from ..common.money import ZERO
from ..common.validators import require_month, require_non_negative, require_year
from ..core.exceptions import NotFoundError, ValidationError
from ..fines.model import FineInfo
from ..fines.policy import LateFinePolicy
from ..holidays.model import WeeklyOffSetting
from ..holidays.repository import BusinessSettingsRepository, HolidayRepository
from ..proration.engine import ProrationEngine, daily_rate
from ..proration.model import ProratedSalary
from ..salary.calculator import SalaryStructureCalculator
from ..salary.migration import is_legacy_salary, legacy_from_mapping, migrate_legacy_salary
from ..salary.model import SalaryStructureInputs
from ..staff.model import StaffMember
from ..staff.repository import StaffRepository
from ..working_days.resolver import AttendanceCalendarResolver
from .model import MonthlyPayrollEstimate

logger = get_logger(__name__)


def apply_fine(prorated: ProratedSalary, fine_info: FineInfo) -> Decimal:
    """Final net pay after the late fine; never below zero."""
    return max(ZERO, prorated.prorated_net_salary - fine_info.total_fine_amount)


class PayrollService:
    """Reads staff, calendar and attendance data, then runs the engine for one month.

    Nothing computed here is persisted; every call recomputes from current records.
    """

    def __init__(
        self,
        staff: StaffRepository,
        attendance: AttendanceRepository,
        holidays: HolidayRepository,
        business_settings: BusinessSettingsRepository,
        *,
        fine_policy: Optional[LateFinePolicy] = None,
        default_weekly_off: Optional[WeeklyOffSetting] = None,
        calculator: Optional[SalaryStructureCalculator] = None,
        resolver: Optional[AttendanceCalendarResolver] = None,
        proration: Optional[ProrationEngine] = None,
    ):
        self._staff = staff
        self._attendance = attendance
        self._holidays = holidays
        self._business_settings = business_settings
        self._fine_policy = fine_policy or LateFinePolicy()
        self._default_weekly_off = default_weekly_off or WeeklyOffSetting()
        self._calculator = calculator or SalaryStructureCalculator()
        self._resolver = resolver or AttendanceCalendarResolver()
        self._proration = proration or ProrationEngine()

    def salary_inputs_for(self, member: StaffMember) -> tuple[SalaryStructureInputs, bool]:
        """Return (inputs, migrated); legacy gross/net records are converted on read."""
        if is_legacy_salary(member.salary):
            logger.warning("staff %s has a legacy gross/net salary; estimating components", member.staff_id)
            return migrate_legacy_salary(legacy_from_mapping(member.salary)), True
        return SalaryStructureInputs.from_mapping(member.salary), False

    def weekly_off_for(self, member: StaffMember) -> WeeklyOffSetting:
        if member.business_id is None:
            return self._default_weekly_off
        return self._business_settings.get_weekly_off(member.business_id) or self._default_weekly_off

    def monthly_estimate(self, staff_id: int, year: int, month: int, present_days: Any = None) -> MonthlyPayrollEstimate:
        year = require_year(year)
        month = require_month(month)

        member = self._staff.get_by_id(staff_id)
        if not member:
            raise NotFoundError(f"Staff {staff_id} not found")
        if not member.salary:
            raise ValidationError(f"Staff {staff_id} has no salary structure")

        inputs, migrated = self.salary_inputs_for(member)
        structure = self._calculator.calculate(inputs)

        holidays = ()
        if member.business_id is not None:
            holidays = self._holidays.get_for_business_and_month(member.business_id, year, month)
        weekly_off = self.weekly_off_for(member)
        working = self._resolver.resolve(
            year,
            month,
            [h.holiday_date for h in holidays],
            weekly_off.pattern,
            weekly_off_days=weekly_off.weekly_off_days,
        )

        records = list(self._attendance.get_for_staff_and_month(staff_id, year, month))
        if present_days is None:
            present = count_present_days(records)
        else:
            present = require_non_negative(present_days, "present_days")

        prorated = self._proration.prorate(structure, working.working_days, present)

        fine = self._fine_policy.compute_fine(
            records,
            daily_salary=daily_rate(structure.monthly.net_monthly_salary, working.working_days),
        )
        final_net = apply_fine(prorated, fine)

        logger.info(
            "payroll %s-%02d staff=%s working=%s present=%s prorated=%s fine=%s final=%s",
            year, month, staff_id, working.working_days, present, prorated.prorated_net_salary,
            fine.total_fine_amount, final_net,
        )
        return MonthlyPayrollEstimate(
            staff_id=int(staff_id),
            year=year,
            month=month,
            structure=structure,
            working_days=working,
            present_days=present,
            prorated=prorated,
            fine=fine,
            final_net_salary=final_net,
            migrated_from_legacy=migrated,
        )
