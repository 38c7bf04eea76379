from __future__ import annotations

from decimal import Decimal
from typing import Optional

from ..app_logger import get_logger
from ..common.money import ZERO, percent_of
from ..core.constants import DEARNESS_ALLOWANCE_RATIO, HOUSE_RENT_ALLOWANCE_RATIO, MONTHS_PER_YEAR
from ..core.enums import MobileAllowanceType
from .model import (
    CalculatedSalaryStructure,
    MonthlySalaryBreakdown,
    SalaryStructureInputs,
    YearlySalaryBreakdown,
)

logger = get_logger(__name__)

MONTHS = Decimal(MONTHS_PER_YEAR)


def _resolve_allowance(stored: Decimal, auto: Optional[bool], basic: Decimal, ratio: Decimal) -> tuple[Decimal, bool]:
    """Return (amount, derived)."""
    if auto is False:
        return stored, False
    if auto is None and stored > 0:
        return stored, False
    return (basic * ratio if basic > 0 else ZERO), True


class SalaryStructureCalculator:
    """Expands salary inputs into the monthly/yearly breakdown and CTC.

    Each step consumes only earlier results:

    - Employer PF and employee PF are on basic.
    - Employer ESI is on gross fixed salary (before employer contributions).
    - Employee ESI is on full gross salary (after employer contributions).
    - CTC = annual gross + incentive + benefits + mobile allowance; employee
      deductions are never part of CTC.

    Rates/amounts <= 0 contribute nothing; negative values are not rejected
    here (see ``SalaryStructureInputs.from_mapping``).
    """

    def calculate(self, inputs: SalaryStructureInputs) -> CalculatedSalaryStructure:
        basic = inputs.basic_salary
        auto_calculated: list[str] = []

        dearness_allowance, da_derived = _resolve_allowance(
            inputs.dearness_allowance, inputs.dearness_allowance_auto, basic, DEARNESS_ALLOWANCE_RATIO
        )
        if da_derived:
            auto_calculated.append("dearnessAllowance")
        house_rent_allowance, hra_derived = _resolve_allowance(
            inputs.house_rent_allowance, inputs.house_rent_allowance_auto, basic, HOUSE_RENT_ALLOWANCE_RATIO
        )
        if hra_derived:
            auto_calculated.append("houseRentAllowance")

        special_allowance = inputs.special_allowance
        gross_fixed_salary = basic + dearness_allowance + house_rent_allowance + special_allowance

        employer_pf = percent_of(basic, inputs.employer_pf_rate)
        employer_esi = percent_of(gross_fixed_salary, inputs.employer_esi_rate)
        gross_salary = gross_fixed_salary + employer_pf + employer_esi

        employee_pf = percent_of(basic, inputs.employee_pf_rate)
        employee_esi = percent_of(gross_salary, inputs.employee_esi_rate)
        total_monthly_deductions = employee_pf + employee_esi
        net_monthly_salary = gross_salary - total_monthly_deductions

        annual_gross_salary = gross_salary * MONTHS
        annual_incentive = percent_of(annual_gross_salary, inputs.incentive_rate)
        annual_gratuity = percent_of(basic * MONTHS, inputs.gratuity_rate)
        annual_statutory_bonus = percent_of(basic * MONTHS, inputs.statutory_bonus_rate)
        medical_insurance_amount = inputs.medical_insurance_amount
        total_annual_benefits = annual_gratuity + annual_statutory_bonus + medical_insurance_amount

        if inputs.mobile_allowance <= 0:
            annual_mobile_allowance = ZERO
        elif inputs.mobile_allowance_type == MobileAllowanceType.YEARLY:
            annual_mobile_allowance = inputs.mobile_allowance
        else:
            annual_mobile_allowance = inputs.mobile_allowance * MONTHS

        annual_net_salary = net_monthly_salary * MONTHS
        total_ctc = annual_gross_salary + annual_incentive + total_annual_benefits + annual_mobile_allowance

        logger.debug(
            "salary structure: basic=%s grossFixed=%s gross=%s deductions=%s net=%s ctc=%s auto=%s",
            basic, gross_fixed_salary, gross_salary, total_monthly_deductions, net_monthly_salary, total_ctc,
            auto_calculated,
        )

        return CalculatedSalaryStructure(
            monthly=MonthlySalaryBreakdown(
                basic_salary=basic,
                dearness_allowance=dearness_allowance,
                house_rent_allowance=house_rent_allowance,
                special_allowance=special_allowance,
                gross_fixed_salary=gross_fixed_salary,
                employer_pf=employer_pf,
                employer_esi=employer_esi,
                gross_salary=gross_salary,
                employee_pf=employee_pf,
                employee_esi=employee_esi,
                total_monthly_deductions=total_monthly_deductions,
                net_monthly_salary=net_monthly_salary,
            ),
            yearly=YearlySalaryBreakdown(
                annual_gross_salary=annual_gross_salary,
                annual_incentive=annual_incentive,
                annual_gratuity=annual_gratuity,
                annual_statutory_bonus=annual_statutory_bonus,
                medical_insurance_amount=medical_insurance_amount,
                total_annual_benefits=total_annual_benefits,
                annual_mobile_allowance=annual_mobile_allowance,
                annual_net_salary=annual_net_salary,
            ),
            total_ctc=total_ctc,
            auto_calculated=tuple(auto_calculated),
        )
