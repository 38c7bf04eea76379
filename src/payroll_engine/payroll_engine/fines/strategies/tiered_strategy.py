from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from ...common.money import ZERO
from ..model import FineContext, FineTier
from .base import FineStrategy


class TieredFine(FineStrategy):
    """Amount of the highest tier whose threshold the late minutes reach."""

    def __init__(self, tiers: Sequence[FineTier]):
        self._tiers = sorted(tiers, key=lambda t: t.min_late_minutes)

    def amount_for(self, late_minutes: int, context: FineContext) -> Decimal:
        if late_minutes <= 0:
            return ZERO
        amount = ZERO
        for tier in self._tiers:
            if late_minutes < tier.min_late_minutes:
                break
            # keep the schedule non-decreasing even if a later tier is cheaper
            amount = max(amount, tier.amount)
        return amount
