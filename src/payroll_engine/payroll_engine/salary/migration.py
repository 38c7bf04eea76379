from __future__ import annotations

from typing import Any, Mapping

from ..common.money import HUNDRED, ZERO
from ..common.validators import require_non_negative
from ..core.constants import LEGACY_BASIC_RATIO, LEGACY_NET_RATIO, MONTHS_PER_YEAR
from ..core.exceptions import ValidationError
from .model import LegacySalary, SalaryStructureInputs


def is_legacy_salary(data: Mapping[str, Any] | None) -> bool:
    """Old records only carry gross/net (no basicSalary)."""
    if not data:
        return False
    return not data.get("basicSalary") and bool(data.get("gross"))


def _optional_amount(data: Mapping[str, Any], key: str):
    value = data.get(key)
    return require_non_negative(value, key) if value else None


def legacy_from_mapping(data: Mapping[str, Any]) -> LegacySalary:
    return LegacySalary(
        gross=require_non_negative(data.get("gross"), "gross"),
        net=_optional_amount(data, "net"),
        ctc_yearly=_optional_amount(data, "ctcYearly"),
    )


def migrate_legacy_salary(old: LegacySalary) -> SalaryStructureInputs:
    """Convert a gross/net-only salary into component inputs, once, at read time.

    Basic is estimated at 50% of gross and the remainder becomes special
    allowance (DA/HRA pinned to explicit 0). The gap between gross and net is
    carried as an employee PF rate on basic, and a yearly CTC above 12 x gross
    as an incentive rate on annual gross, so calculating the result gives back
    the legacy gross, net and CTC. A missing net is estimated at 80% of gross;
    a missing CTC, or one not above 12 x gross, adds no incentive.
    """
    gross = old.gross
    if gross <= 0:
        raise ValidationError("legacy gross salary must be positive")

    net = old.net if old.net is not None and old.net > 0 else gross * LEGACY_NET_RATIO
    if net > gross:
        raise ValidationError("legacy net salary cannot exceed gross")

    annual_gross = gross * MONTHS_PER_YEAR
    basic = gross * LEGACY_BASIC_RATIO
    deductions = gross - net
    employee_pf_rate = deductions * HUNDRED / basic if deductions > 0 else ZERO
    ctc_gap = (old.ctc_yearly or ZERO) - annual_gross
    incentive_rate = ctc_gap * HUNDRED / annual_gross if ctc_gap > 0 else ZERO

    return SalaryStructureInputs(
        basic_salary=basic,
        dearness_allowance=ZERO,
        house_rent_allowance=ZERO,
        special_allowance=gross - basic,
        incentive_rate=incentive_rate,
        employee_pf_rate=employee_pf_rate,
        dearness_allowance_auto=False,
        house_rent_allowance_auto=False,
    )
