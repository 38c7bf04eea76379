from __future__ import annotations

from decimal import Decimal
from typing import Any

from ..app_logger import get_logger
from ..common.money import HUNDRED, ZERO
from ..common.validators import require_non_negative
from ..salary.model import CalculatedSalaryStructure
from .model import ProratedSalary

logger = get_logger(__name__)


def daily_rate(monthly_amount: Any, working_days: Any) -> Decimal:
    """Per-working-day share of a monthly amount; 0 when there are no working days."""
    amount = require_non_negative(monthly_amount, "monthly_amount")
    days = require_non_negative(working_days, "working_days")
    if days == 0:
        return ZERO
    return amount / days


def loss_of_pay(rate: Any, absent_days: Any) -> Decimal:
    return require_non_negative(rate, "daily_rate") * require_non_negative(absent_days, "absent_days")


def absent_days(working_days: Any, present_days: Any) -> Decimal:
    gap = require_non_negative(working_days, "working_days") - require_non_negative(present_days, "present_days")
    return max(ZERO, gap)


class ProrationEngine:
    """Scales monthly gross/deductions/net by present_days / working_days.

    present_days is not clamped to working_days: callers wanting a 100% cap
    clamp before calling. working_days == 0 yields an all-zero result.
    """

    def prorate(self, structure: CalculatedSalaryStructure, working_days: Any, present_days: Any) -> ProratedSalary:
        working = require_non_negative(working_days, "working_days")
        present = require_non_negative(present_days, "present_days")

        if working == 0:
            logger.debug("proration skipped: no working days (present=%s)", present)
            return ProratedSalary.zero()

        factor = present / working
        monthly = structure.monthly
        result = ProratedSalary(
            prorated_gross_salary=monthly.gross_salary * factor,
            prorated_deductions=monthly.total_monthly_deductions * factor,
            prorated_net_salary=monthly.net_monthly_salary * factor,
            attendance_percentage=factor * HUNDRED,
        )
        logger.debug(
            "proration: working=%s present=%s factor=%s net=%s", working, present, factor, result.prorated_net_salary
        )
        return result
