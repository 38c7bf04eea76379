from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .core.enums import WeeklyOffPattern
from .database.connection import DBConfig, DatabaseConnection
from .fines.model import LateFinePolicyConfig
from .fines.policy import LateFinePolicy
from .holidays.model import WeeklyOffSetting
from .holidays.mysql_holiday_repository import MySQLBusinessSettingsRepository, MySQLHolidayRepository
from .payroll.service import PayrollService
from .proration.engine import ProrationEngine
from .salary.calculator import SalaryStructureCalculator
from .salary.rates import DefaultRatePolicy
from .staff.mysql_staff_repository import MySQLStaffRepository
from .working_days.resolver import AttendanceCalendarResolver


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    staff_repo: MySQLStaffRepository
    attendance_repo: MySQLAttendanceRepository
    holidays_repo: MySQLHolidayRepository
    business_settings_repo: MySQLBusinessSettingsRepository

    rate_policy: DefaultRatePolicy
    default_weekly_off: WeeklyOffSetting
    salary_calculator: SalaryStructureCalculator
    calendar_resolver: AttendanceCalendarResolver
    proration_engine: ProrationEngine
    fine_policy: LateFinePolicy
    payroll_service: PayrollService


def build_container(*, db_config: Mapping[str, Any], settings: Optional[Any] = None) -> Container:
    """Wire repositories and engine components; ``settings`` is a config.* module."""
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    staff_repo = MySQLStaffRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    holidays_repo = MySQLHolidayRepository(conn)
    business_settings_repo = MySQLBusinessSettingsRepository(conn)

    rate_policy = DefaultRatePolicy.from_mapping(getattr(settings, "DEFAULT_RATES", None))
    default_weekly_off = WeeklyOffSetting(
        pattern=WeeklyOffPattern(getattr(settings, "WEEKLY_OFF_PATTERN", WeeklyOffPattern.STANDARD.value)),
    )
    salary_calculator = SalaryStructureCalculator()
    calendar_resolver = AttendanceCalendarResolver()
    proration_engine = ProrationEngine()
    fine_policy = LateFinePolicy(LateFinePolicyConfig.from_mapping(getattr(settings, "LATE_FINE", None)))

    payroll_service = PayrollService(
        staff_repo,
        attendance_repo,
        holidays_repo,
        business_settings_repo,
        fine_policy=fine_policy,
        default_weekly_off=default_weekly_off,
        calculator=salary_calculator,
        resolver=calendar_resolver,
        proration=proration_engine,
    )

    return Container(
        conn=conn,
        staff_repo=staff_repo,
        attendance_repo=attendance_repo,
        holidays_repo=holidays_repo,
        business_settings_repo=business_settings_repo,
        rate_policy=rate_policy,
        default_weekly_off=default_weekly_off,
        salary_calculator=salary_calculator,
        calendar_resolver=calendar_resolver,
        proration_engine=proration_engine,
        fine_policy=fine_policy,
        payroll_service=payroll_service,
    )
