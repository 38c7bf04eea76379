from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Holiday, WeeklyOffSetting


class HolidayRepository(Protocol):
    def get_for_business_and_month(self, business_id: int, year: int, month: int) -> Sequence[Holiday]:
        raise NotImplementedError


class BusinessSettingsRepository(Protocol):
    def get_weekly_off(self, business_id: int) -> Optional[WeeklyOffSetting]:
        raise NotImplementedError
