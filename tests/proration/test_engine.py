from decimal import Decimal

import pytest

from src.payroll_engine.payroll_engine.core.exceptions import ValidationError
from src.payroll_engine.payroll_engine.proration.engine import ProrationEngine, absent_days, daily_rate, loss_of_pay
from src.payroll_engine.payroll_engine.salary.calculator import SalaryStructureCalculator
from src.payroll_engine.payroll_engine.salary.model import SalaryStructureInputs


@pytest.fixture
def structure():
    inputs = SalaryStructureInputs.from_mapping(
        {"basicSalary": 10000, "employerPFRate": 13, "employerESIRate": 3.25, "employeePFRate": 12, "employeeESIRate": 0.75}
    )
    return SalaryStructureCalculator().calculate(inputs)


def test_full_attendance_pays_full_net(structure):
    prorated = ProrationEngine().prorate(structure, 22, 22)

    assert prorated.attendance_percentage == 100
    assert prorated.prorated_net_salary == structure.monthly.net_monthly_salary
    assert prorated.prorated_gross_salary == structure.monthly.gross_salary


def test_zero_working_days_gives_zero(structure):
    prorated = ProrationEngine().prorate(structure, 0, 5)

    assert prorated.prorated_gross_salary == 0
    assert prorated.prorated_deductions == 0
    assert prorated.prorated_net_salary == 0
    assert prorated.attendance_percentage == 0


def test_partial_attendance(structure):
    prorated = ProrationEngine().prorate(structure, 20, 15)

    assert prorated.attendance_percentage == 75
    assert prorated.prorated_net_salary == structure.monthly.net_monthly_salary * Decimal("0.75")
    assert prorated.to_dict()["proratedNetSalary"] == 13133.33


def test_half_days_are_allowed(structure):
    prorated = ProrationEngine().prorate(structure, 20, Decimal("19.5"))

    assert prorated.attendance_percentage == Decimal("97.5")


def test_present_days_are_not_clamped(structure):
    prorated = ProrationEngine().prorate(structure, 20, 22)

    assert prorated.attendance_percentage == 110


def test_prorated_net_is_monotonic(structure):
    engine = ProrationEngine()
    nets = [engine.prorate(structure, 22, p).prorated_net_salary for p in range(0, 23)]

    assert nets == sorted(nets)


def test_negative_days_are_rejected(structure):
    with pytest.raises(ValidationError):
        ProrationEngine().prorate(structure, -1, 5)
    with pytest.raises(ValidationError):
        ProrationEngine().prorate(structure, 20, -2)


def test_daily_rate_and_loss_of_pay():
    rate = daily_rate(22000, 22)

    assert rate == Decimal("1000")
    assert daily_rate(22000, 0) == 0
    assert absent_days(22, 19) == 3
    assert absent_days(22, 25) == 0
    assert loss_of_pay(rate, absent_days(22, 19)) == Decimal("3000")
