from decimal import Decimal

import pytest

from src.payroll_engine.payroll_engine.core.exceptions import ValidationError
from src.payroll_engine.payroll_engine.salary.calculator import SalaryStructureCalculator
from src.payroll_engine.payroll_engine.salary.migration import (
    is_legacy_salary,
    legacy_from_mapping,
    migrate_legacy_salary,
)
from src.payroll_engine.payroll_engine.salary.model import LegacySalary
from src.payroll_engine.payroll_engine.salary.rates import DefaultRatePolicy


def test_default_policy_fills_missing_rates():
    inputs = DefaultRatePolicy().build_inputs(10000)

    assert inputs.employer_pf_rate == Decimal("13")
    assert inputs.employer_esi_rate == Decimal("3.25")
    assert inputs.employee_pf_rate == Decimal("12")
    assert inputs.employee_esi_rate == Decimal("0.75")
    assert inputs.gratuity_rate == Decimal("4.81")
    assert inputs.statutory_bonus_rate == Decimal("8.33")
    assert inputs.incentive_rate == 0


def test_explicit_rates_win_over_policy():
    policy = DefaultRatePolicy()

    assert policy.build_inputs(10000, {"employerPFRate": 10}).employer_pf_rate == Decimal("10")
    assert policy.build_inputs(10000, {"employee_esi_rate": 0}).employee_esi_rate == 0


def test_policy_ignores_unrelated_record_keys():
    inputs = DefaultRatePolicy().build_inputs(10000, {"self": 1, "applyDefaultRates": True, "name": "A"})

    assert inputs.basic_salary == Decimal("10000")
    assert inputs.employer_pf_rate == Decimal("13")


def test_policy_from_settings_ignores_unknown_keys():
    policy = DefaultRatePolicy.from_mapping({"employer_pf_rate": 12, "not_a_rate": 99})

    assert policy.employer_pf_rate == Decimal("12")
    assert policy.gratuity_rate == Decimal("4.81")


def test_policy_from_settings_rejects_negative_rate():
    with pytest.raises(ValidationError):
        DefaultRatePolicy.from_mapping({"gratuity_rate": -1})


def test_is_legacy_salary():
    assert is_legacy_salary({"gross": 20000, "net": 16000})
    assert not is_legacy_salary({"basicSalary": 10000, "gross": 20000})
    assert not is_legacy_salary({})
    assert not is_legacy_salary(None)


def test_migration_reproduces_legacy_gross_and_net():
    inputs = migrate_legacy_salary(legacy_from_mapping({"gross": 20000, "net": 16000}))

    assert inputs.basic_salary == Decimal("10000")
    assert inputs.special_allowance == Decimal("10000")
    assert inputs.dearness_allowance_auto is False
    assert inputs.house_rent_allowance_auto is False

    result = SalaryStructureCalculator().calculate(inputs)
    assert result.monthly.gross_salary == Decimal("20000")
    assert result.monthly.net_monthly_salary == Decimal("16000")
    assert result.auto_calculated == ()


def test_migration_estimates_missing_net():
    inputs = migrate_legacy_salary(LegacySalary(gross=Decimal("30000")))
    result = SalaryStructureCalculator().calculate(inputs)

    assert result.monthly.net_monthly_salary == Decimal("24000")


def test_migration_rejects_bad_legacy_values():
    with pytest.raises(ValidationError):
        migrate_legacy_salary(LegacySalary(gross=Decimal("0")))
    with pytest.raises(ValidationError):
        migrate_legacy_salary(LegacySalary(gross=Decimal("1000"), net=Decimal("2000")))


def test_migration_carries_legacy_ctc_as_incentive():
    inputs = migrate_legacy_salary(legacy_from_mapping({"gross": 20000, "net": 16000, "ctcYearly": 264000}))

    assert inputs.incentive_rate == Decimal("10")

    result = SalaryStructureCalculator().calculate(inputs)
    assert result.yearly.annual_incentive == Decimal("24000")
    assert result.total_ctc == Decimal("264000")
    assert result.monthly.net_monthly_salary == Decimal("16000")


@pytest.mark.parametrize("ctc", [None, 0, 200000, 240000])
def test_migration_without_higher_ctc_adds_no_incentive(ctc):
    inputs = migrate_legacy_salary(legacy_from_mapping({"gross": 20000, "net": 16000, "ctcYearly": ctc}))

    assert inputs.incentive_rate == 0
    assert SalaryStructureCalculator().calculate(inputs).total_ctc == Decimal("240000")
