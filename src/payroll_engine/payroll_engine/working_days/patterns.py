from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY = range(7)


class WeekOffRule(ABC):
    """Strategy Pattern: decides whether a (non-holiday) day is a weekly off."""

    @abstractmethod
    def is_week_off(self, day: date) -> bool:
        raise NotImplementedError


class StandardWeekOff(WeekOffRule):
    """Every Saturday and Sunday."""

    def is_week_off(self, day: date) -> bool:
        return day.weekday() in (SATURDAY, SUNDAY)


class OddEvenSaturdayWeekOff(WeekOffRule):
    """Every Sunday plus Saturdays falling on an even day-of-month."""

    def is_week_off(self, day: date) -> bool:
        weekday = day.weekday()
        if weekday == SUNDAY:
            return True
        return weekday == SATURDAY and day.day % 2 == 0


class FixedWeekdaysOff(WeekOffRule):
    """Business-configured weekdays (Monday=0 ... Sunday=6)."""

    def __init__(self, weekdays: frozenset[int]):
        self._weekdays = frozenset(int(d) for d in weekdays)

    @property
    def weekdays(self) -> frozenset[int]:
        return self._weekdays

    def is_week_off(self, day: date) -> bool:
        return day.weekday() in self._weekdays
