from __future__ import annotations

from decimal import Decimal

from ...common.money import ZERO
from ...core.enums import CustomAmountUnit, FineRuleType
from ..model import FineContext, FineRule
from .base import FineStrategy, hourly_rate, late_hours

_SALARY_MULTIPLES = {
    FineRuleType.ONE_X_SALARY: Decimal(1),
    FineRuleType.TWO_X_SALARY: Decimal(2),
    FineRuleType.THREE_X_SALARY: Decimal(3),
}


class RuleBasedFine(FineStrategy):
    """Applies a configured company fine rule."""

    def __init__(self, rule: FineRule):
        self._rule = rule

    @property
    def rule(self) -> FineRule:
        return self._rule

    def amount_for(self, late_minutes: int, context: FineContext) -> Decimal:
        if late_minutes <= 0:
            return ZERO

        rule = self._rule
        if rule.type in _SALARY_MULTIPLES:
            return _SALARY_MULTIPLES[rule.type] * hourly_rate(context) * late_hours(late_minutes)
        if rule.type == FineRuleType.HALF_DAY:
            return context.daily_salary / 2 if context.daily_salary is not None else ZERO
        if rule.type == FineRuleType.FULL_DAY:
            return context.daily_salary if context.daily_salary is not None else ZERO

        # custom
        if rule.custom_amount_unit == CustomAmountUnit.PER_MINUTE:
            return rule.custom_amount * late_minutes
        if rule.custom_amount_unit == CustomAmountUnit.FIXED:
            return rule.custom_amount
        return rule.custom_amount * late_hours(late_minutes)
