from __future__ import annotations

from typing import Any, Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import StaffMember
from .repository import StaffRepository

# staff_salaries column -> salary document key
_SALARY_COLUMNS = {
    "basic_salary": "basicSalary",
    "dearness_allowance": "dearnessAllowance",
    "house_rent_allowance": "houseRentAllowance",
    "special_allowance": "specialAllowance",
    "employer_pf_rate": "employerPFRate",
    "employer_esi_rate": "employerESIRate",
    "incentive_rate": "incentiveRate",
    "gratuity_rate": "gratuityRate",
    "statutory_bonus_rate": "statutoryBonusRate",
    "employee_pf_rate": "employeePFRate",
    "employee_esi_rate": "employeeESIRate",
    "medical_insurance_amount": "medicalInsuranceAmount",
    "mobile_allowance": "mobileAllowance",
    "mobile_allowance_type": "mobileAllowanceType",
    "legacy_gross": "gross",
    "legacy_net": "net",
    "legacy_ctc_yearly": "ctcYearly",
}


def _flag(value: Any) -> Optional[bool]:
    # TINYINT(1) NULL
    return None if value is None else bool(value)


class MySQLStaffRepository(StaffRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, staff_id: int) -> Optional[StaffMember]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT s.staff_id, s.full_name, s.business_id,
                       ss.basic_salary, ss.dearness_allowance, ss.house_rent_allowance, ss.special_allowance,
                       ss.employer_pf_rate, ss.employer_esi_rate, ss.incentive_rate, ss.gratuity_rate,
                       ss.statutory_bonus_rate, ss.employee_pf_rate, ss.employee_esi_rate,
                       ss.medical_insurance_amount, ss.mobile_allowance, ss.mobile_allowance_type,
                       ss.dearness_allowance_auto, ss.house_rent_allowance_auto,
                       ss.legacy_gross, ss.legacy_net, ss.legacy_ctc_yearly
                FROM staff s
                LEFT JOIN staff_salaries ss ON ss.staff_id = s.staff_id
                WHERE s.staff_id=%s
                """,
                (staff_id,),
            )
            r = fetchone(cur)
            if not r:
                return None

            salary = {key: r[col] for col, key in _SALARY_COLUMNS.items() if r.get(col) is not None}
            if salary:
                salary["dearnessAllowanceAuto"] = _flag(r.get("dearness_allowance_auto"))
                salary["houseRentAllowanceAuto"] = _flag(r.get("house_rent_allowance_auto"))
            return StaffMember(
                staff_id=int(r["staff_id"]),
                full_name=r["full_name"],
                business_id=int(r["business_id"]) if r.get("business_id") is not None else None,
                salary=salary,
            )
