from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..core.enums import WeeklyOffPattern
from ..core.exceptions import ValidationError
from .patterns import SUNDAY, FixedWeekdaysOff, OddEvenSaturdayWeekOff, StandardWeekOff, WeekOffRule


@dataclass
class WeekOffRuleFactory:
    """Factory Pattern: choose the week-off rule for a business setting."""

    def for_pattern(
        self,
        pattern: WeeklyOffPattern | str,
        *,
        weekly_off_days: Optional[Iterable[int]] = None,
    ) -> WeekOffRule:
        try:
            pattern = WeeklyOffPattern(pattern)
        except ValueError:
            raise ValidationError(f"Unknown weekly off pattern: {pattern!r}") from None

        if pattern == WeeklyOffPattern.ODD_EVEN_SATURDAY:
            return OddEvenSaturdayWeekOff()
        if pattern == WeeklyOffPattern.CUSTOM:
            try:
                days = frozenset(int(d) for d in weekly_off_days) if weekly_off_days is not None else frozenset({SUNDAY})
            except (TypeError, ValueError):
                raise ValidationError("weekly off days must be weekday numbers") from None
            if any(d < 0 or d > 6 for d in days):
                raise ValidationError("weekly off days must be between 0 (Monday) and 6 (Sunday)")
            return FixedWeekdaysOff(days)
        return StandardWeekOff()
