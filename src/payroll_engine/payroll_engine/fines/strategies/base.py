from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from ..model import FineContext

MINUTES_PER_HOUR = Decimal(60)


class FineStrategy(ABC):
    """Strategy Pattern: fine charged for one late day.

    Implementations must return 0 for late_minutes <= 0 and never decrease
    as late_minutes grows.
    """

    @abstractmethod
    def amount_for(self, late_minutes: int, context: FineContext) -> Decimal:
        raise NotImplementedError


def hourly_rate(context: FineContext) -> Decimal:
    """Daily salary / shift hours, or 0 when either is unknown."""
    if context.daily_salary is None or not context.shift_hours or context.shift_hours <= 0:
        return Decimal(0)
    return context.daily_salary / context.shift_hours


def late_hours(late_minutes: int) -> Decimal:
    return Decimal(late_minutes) / MINUTES_PER_HOUR
