from __future__ import annotations

from decimal import Decimal

from ...common.money import ZERO
from ..model import FineContext
from .base import FineStrategy, hourly_rate, late_hours


class PerMinuteFine(FineStrategy):
    """rate x late minutes."""

    def __init__(self, rate_per_minute: Decimal):
        self._rate = rate_per_minute

    def amount_for(self, late_minutes: int, context: FineContext) -> Decimal:
        if late_minutes <= 0:
            return ZERO
        return self._rate * late_minutes


class FixedPerHourFine(FineStrategy):
    """fine_per_hour x late hours."""

    def __init__(self, fine_per_hour: Decimal):
        self._fine_per_hour = fine_per_hour

    def amount_for(self, late_minutes: int, context: FineContext) -> Decimal:
        if late_minutes <= 0:
            return ZERO
        return self._fine_per_hour * late_hours(late_minutes)


class ShiftBasedFine(FineStrategy):
    """(daily salary / shift hours) x late hours; 0 without salary context."""

    def amount_for(self, late_minutes: int, context: FineContext) -> Decimal:
        if late_minutes <= 0:
            return ZERO
        return hourly_rate(context) * late_hours(late_minutes)
