from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ..common.money import round_money
from ..fines.model import FineInfo
from ..proration.model import ProratedSalary
from ..salary.model import CalculatedSalaryStructure
from ..working_days.model import WorkingDaysInfo


@dataclass(frozen=True)
class MonthlyPayrollEstimate:
    """One staff member's month: structure -> working days -> proration -> fine."""

    staff_id: int
    year: int
    month: int
    structure: CalculatedSalaryStructure
    working_days: WorkingDaysInfo
    present_days: Decimal
    prorated: ProratedSalary
    fine: FineInfo
    final_net_salary: Decimal
    migrated_from_legacy: bool = False

    def to_dict(self) -> dict:
        return {
            "staffId": self.staff_id,
            "year": self.year,
            "month": self.month,
            "salaryStructure": self.structure.to_dict(),
            "workingDays": self.working_days.to_dict(),
            "presentDays": float(self.present_days),
            "proratedSalary": self.prorated.to_dict(),
            "fineInfo": self.fine.to_dict(),
            "finalNetSalary": round_money(self.final_net_salary),
            "migratedFromLegacy": self.migrated_from_legacy,
        }
