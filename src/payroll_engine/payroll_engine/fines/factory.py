from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import FineCalculationType
from .model import LateFinePolicyConfig
from .strategies.base import FineStrategy
from .strategies.flat_strategy import FlatPerDayFine
from .strategies.per_minute_strategy import FixedPerHourFine, PerMinuteFine, ShiftBasedFine
from .strategies.rule_strategy import RuleBasedFine
from .strategies.tiered_strategy import TieredFine


@dataclass
class FineStrategyFactory:
    """Factory Pattern: a late-arrival rule wins over the calculation type."""

    def for_config(self, config: LateFinePolicyConfig) -> FineStrategy:
        rule = config.late_arrival_rule
        if rule is not None:
            return RuleBasedFine(rule)

        calc = config.calculation_type
        if calc == FineCalculationType.FLAT_PER_DAY:
            return FlatPerDayFine(config.flat_amount_per_day)
        if calc == FineCalculationType.PER_MINUTE:
            return PerMinuteFine(config.rate_per_minute)
        if calc == FineCalculationType.FIXED_PER_HOUR:
            return FixedPerHourFine(config.fine_per_hour)
        if calc == FineCalculationType.TIERED:
            return TieredFine(config.tiers)
        return ShiftBasedFine()
