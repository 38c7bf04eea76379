from __future__ import annotations

from decimal import Decimal

from ...common.money import ZERO
from ..model import FineContext
from .base import FineStrategy


class FlatPerDayFine(FineStrategy):
    """Same amount for every late day."""

    def __init__(self, amount: Decimal):
        self._amount = amount

    def amount_for(self, late_minutes: int, context: FineContext) -> Decimal:
        return self._amount if late_minutes > 0 else ZERO
