from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Mapping, Optional

from ..common.money import ZERO, round_money
from ..common.validators import require_non_negative
from ..core.enums import MobileAllowanceType
from ..core.exceptions import ValidationError

# attribute name -> key used by the staff record / JSON payloads
_INPUT_AMOUNT_KEYS = {
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
}

_MONTHLY_KEYS = {
    "basic_salary": "basicSalary",
    "dearness_allowance": "dearnessAllowance",
    "house_rent_allowance": "houseRentAllowance",
    "special_allowance": "specialAllowance",
    "gross_fixed_salary": "grossFixedSalary",
    "employer_pf": "employerPF",
    "employer_esi": "employerESI",
    "gross_salary": "grossSalary",
    "employee_pf": "employeePF",
    "employee_esi": "employeeESI",
    "total_monthly_deductions": "totalMonthlyDeductions",
    "net_monthly_salary": "netMonthlySalary",
}

_YEARLY_KEYS = {
    "annual_gross_salary": "annualGrossSalary",
    "annual_incentive": "annualIncentive",
    "annual_gratuity": "annualGratuity",
    "annual_statutory_bonus": "annualStatutoryBonus",
    "medical_insurance_amount": "medicalInsuranceAmount",
    "total_annual_benefits": "totalAnnualBenefits",
    "annual_mobile_allowance": "annualMobileAllowance",
    "annual_net_salary": "annualNetSalary",
}


def _optional_flag(value: Any, field_name: str) -> Optional[bool]:
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    raise ValidationError(f"{field_name} must be true, false or null")


@dataclass(frozen=True)
class SalaryStructureInputs:
    """Per-employee salary configuration owned by the staff record.

    Amounts are monthly currency values except ``medical_insurance_amount``
    (yearly). Rates are percentages. The ``*_auto`` flags record whether DA/HRA
    are derived from basic: True = always derive, False = use the stored amount
    as-is, None = unknown (stored amount if > 0, else derive).
    """

    basic_salary: Decimal = ZERO
    dearness_allowance: Decimal = ZERO
    house_rent_allowance: Decimal = ZERO
    special_allowance: Decimal = ZERO

    employer_pf_rate: Decimal = ZERO
    employer_esi_rate: Decimal = ZERO
    incentive_rate: Decimal = ZERO
    gratuity_rate: Decimal = ZERO
    statutory_bonus_rate: Decimal = ZERO
    employee_pf_rate: Decimal = ZERO
    employee_esi_rate: Decimal = ZERO

    medical_insurance_amount: Decimal = ZERO
    mobile_allowance: Decimal = ZERO
    mobile_allowance_type: MobileAllowanceType = MobileAllowanceType.MONTHLY

    dearness_allowance_auto: Optional[bool] = None
    house_rent_allowance_auto: Optional[bool] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SalaryStructureInputs":
        """Build inputs from a staff-record dict (camelCase or snake_case keys).

        Missing values default to 0; negative values raise ValidationError.
        """
        values: dict[str, Any] = {}
        for attr, key in _INPUT_AMOUNT_KEYS.items():
            raw = data.get(key, data.get(attr))
            values[attr] = require_non_negative(raw, key)

        raw_type = data.get("mobileAllowanceType", data.get("mobile_allowance_type")) or MobileAllowanceType.MONTHLY
        try:
            values["mobile_allowance_type"] = MobileAllowanceType(raw_type)
        except ValueError:
            raise ValidationError(f"mobileAllowanceType must be 'monthly' or 'yearly', got {raw_type!r}") from None

        values["dearness_allowance_auto"] = _optional_flag(
            data.get("dearnessAllowanceAuto", data.get("dearness_allowance_auto")), "dearnessAllowanceAuto"
        )
        values["house_rent_allowance_auto"] = _optional_flag(
            data.get("houseRentAllowanceAuto", data.get("house_rent_allowance_auto")), "houseRentAllowanceAuto"
        )
        return cls(**values)

    def to_dict(self) -> dict:
        out: dict[str, Any] = {key: float(getattr(self, attr)) for attr, key in _INPUT_AMOUNT_KEYS.items()}
        out["mobileAllowanceType"] = self.mobile_allowance_type.value
        out["dearnessAllowanceAuto"] = self.dearness_allowance_auto
        out["houseRentAllowanceAuto"] = self.house_rent_allowance_auto
        return out


@dataclass(frozen=True)
class MonthlySalaryBreakdown:
    basic_salary: Decimal
    dearness_allowance: Decimal
    house_rent_allowance: Decimal
    special_allowance: Decimal
    gross_fixed_salary: Decimal
    employer_pf: Decimal
    employer_esi: Decimal
    gross_salary: Decimal
    employee_pf: Decimal
    employee_esi: Decimal
    total_monthly_deductions: Decimal
    net_monthly_salary: Decimal

    def to_dict(self) -> dict:
        return {key: round_money(getattr(self, attr)) for attr, key in _MONTHLY_KEYS.items()}


@dataclass(frozen=True)
class YearlySalaryBreakdown:
    annual_gross_salary: Decimal
    annual_incentive: Decimal
    annual_gratuity: Decimal
    annual_statutory_bonus: Decimal
    medical_insurance_amount: Decimal
    total_annual_benefits: Decimal
    annual_mobile_allowance: Decimal
    annual_net_salary: Decimal

    def to_dict(self) -> dict:
        return {key: round_money(getattr(self, attr)) for attr, key in _YEARLY_KEYS.items()}


@dataclass(frozen=True)
class CalculatedSalaryStructure:
    """Pure output of SalaryStructureCalculator; recomputed, never the source of truth."""

    monthly: MonthlySalaryBreakdown
    yearly: YearlySalaryBreakdown
    total_ctc: Decimal
    # names of allowances derived from basic ("dearnessAllowance", "houseRentAllowance")
    auto_calculated: tuple[str, ...] = field(default=())

    def to_dict(self) -> dict:
        return {
            "monthly": self.monthly.to_dict(),
            "yearly": self.yearly.to_dict(),
            "totalCTC": round_money(self.total_ctc),
            "autoCalculated": list(self.auto_calculated),
        }


@dataclass(frozen=True)
class LegacySalary:
    """Old "gross/net only" salary shape found on un-migrated staff records."""

    gross: Decimal
    net: Optional[Decimal] = None
    ctc_yearly: Optional[Decimal] = None
