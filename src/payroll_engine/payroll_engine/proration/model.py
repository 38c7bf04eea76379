from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ..common.money import ZERO, round_money


@dataclass(frozen=True)
class ProratedSalary:
    """Attendance-scaled monthly figures."""

    prorated_gross_salary: Decimal
    prorated_deductions: Decimal
    prorated_net_salary: Decimal
    attendance_percentage: Decimal

    @classmethod
    def zero(cls) -> "ProratedSalary":
        return cls(ZERO, ZERO, ZERO, ZERO)

    def to_dict(self) -> dict:
        return {
            "proratedGrossSalary": round_money(self.prorated_gross_salary),
            "proratedDeductions": round_money(self.prorated_deductions),
            "proratedNetSalary": round_money(self.prorated_net_salary),
            "attendancePercentage": round_money(self.attendance_percentage),
        }
