from decimal import Decimal

import pytest

from src.payroll_engine.payroll_engine.core.enums import MobileAllowanceType
from src.payroll_engine.payroll_engine.core.exceptions import ValidationError
from src.payroll_engine.payroll_engine.salary.calculator import SalaryStructureCalculator
from src.payroll_engine.payroll_engine.salary.model import SalaryStructureInputs


def _inputs(**overrides):
    values = {
        "basicSalary": 10000,
        "employerPFRate": 13,
        "employerESIRate": 3.25,
        "employeePFRate": 12,
        "employeeESIRate": 0.75,
    }
    values.update(overrides)
    return SalaryStructureInputs.from_mapping(values)


def test_calculate_standard_structure():
    result = SalaryStructureCalculator().calculate(_inputs())
    m = result.monthly

    assert m.dearness_allowance == Decimal("5000")
    assert m.house_rent_allowance == Decimal("2000")
    assert m.gross_fixed_salary == Decimal("17000")
    assert m.employer_pf == Decimal("1300")
    assert m.employer_esi == Decimal("552.5")
    assert m.gross_salary == Decimal("18852.5")
    assert m.employee_pf == Decimal("1200")
    assert m.employee_esi == Decimal("141.39375")
    assert m.net_monthly_salary == Decimal("17511.10625")

    out = result.to_dict()
    assert out["monthly"]["employeeESI"] == 141.39
    assert out["monthly"]["netMonthlySalary"] == 17511.11
    assert out["autoCalculated"] == ["dearnessAllowance", "houseRentAllowance"]


def test_yearly_figures_and_ctc():
    result = SalaryStructureCalculator().calculate(
        _inputs(incentiveRate=10, gratuityRate=4.81, statutoryBonusRate=8.33, medicalInsuranceAmount=5000)
    )
    y = result.yearly

    assert y.annual_gross_salary == Decimal("226230")
    assert y.annual_incentive == Decimal("22623")
    assert y.annual_gratuity == Decimal("5772")
    assert y.annual_statutory_bonus == Decimal("9996")
    assert y.total_annual_benefits == Decimal("20768")
    assert result.total_ctc == Decimal("226230") + Decimal("22623") + Decimal("20768")


def test_ctc_excludes_employee_deductions():
    calc = SalaryStructureCalculator()
    low = calc.calculate(_inputs(employeePFRate=0, employeeESIRate=0))
    high = calc.calculate(_inputs(employeePFRate=20, employeeESIRate=5))

    assert high.total_ctc == low.total_ctc
    assert high.monthly.net_monthly_salary < low.monthly.net_monthly_salary


def test_explicit_allowances_are_kept():
    result = SalaryStructureCalculator().calculate(_inputs(dearnessAllowance=1000, houseRentAllowance=500))

    assert result.monthly.dearness_allowance == Decimal("1000")
    assert result.monthly.house_rent_allowance == Decimal("500")
    assert result.auto_calculated == ()


def test_auto_flags_override_stored_amounts():
    calc = SalaryStructureCalculator()

    forced = calc.calculate(_inputs(dearnessAllowance=1000, dearnessAllowanceAuto=True))
    assert forced.monthly.dearness_allowance == Decimal("5000")
    assert "dearnessAllowance" in forced.auto_calculated

    pinned = calc.calculate(_inputs(houseRentAllowance=0, houseRentAllowanceAuto=False))
    assert pinned.monthly.house_rent_allowance == Decimal("0")
    assert "houseRentAllowance" not in pinned.auto_calculated


def test_zero_basic_derives_nothing():
    result = SalaryStructureCalculator().calculate(SalaryStructureInputs())

    assert result.monthly.dearness_allowance == 0
    assert result.monthly.net_monthly_salary == 0
    assert result.total_ctc == 0


@pytest.mark.parametrize(
    "allowance_type, expected",
    [(MobileAllowanceType.YEARLY, Decimal("300")), (MobileAllowanceType.MONTHLY, Decimal("3600"))],
)
def test_mobile_allowance_annualisation(allowance_type, expected):
    result = SalaryStructureCalculator().calculate(
        _inputs(mobileAllowance=300, mobileAllowanceType=allowance_type.value)
    )
    assert result.yearly.annual_mobile_allowance == expected


def test_calculate_is_repeatable():
    calc = SalaryStructureCalculator()
    inputs = _inputs(incentiveRate=7.5, mobileAllowance=250)

    assert calc.calculate(inputs) == calc.calculate(inputs)


def test_non_positive_rates_contribute_nothing():
    inputs = SalaryStructureInputs(basic_salary=Decimal("10000"), employer_pf_rate=Decimal("-5"))
    result = SalaryStructureCalculator().calculate(inputs)

    assert result.monthly.employer_pf == 0


def test_from_mapping_rejects_negative_amounts():
    with pytest.raises(ValidationError):
        SalaryStructureInputs.from_mapping({"basicSalary": -1})


def test_from_mapping_rejects_unknown_mobile_type():
    with pytest.raises(ValidationError):
        SalaryStructureInputs.from_mapping({"basicSalary": 1000, "mobileAllowanceType": "weekly"})


def test_from_mapping_accepts_snake_case_keys():
    inputs = SalaryStructureInputs.from_mapping({"basic_salary": "15000", "employee_pf_rate": 12})

    assert inputs.basic_salary == Decimal("15000")
    assert inputs.employee_pf_rate == Decimal("12")
    assert inputs.dearness_allowance_auto is None


@pytest.mark.parametrize("value", ["NaN", float("nan"), "Infinity", "-Infinity"])
def test_non_finite_amounts_are_rejected(value):
    with pytest.raises(ValidationError, match="must be a number"):
        _inputs(basicSalary=value)
