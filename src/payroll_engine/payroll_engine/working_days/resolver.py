from __future__ import annotations

import calendar
from datetime import date, datetime
from typing import Iterable, Optional, Union

from ..app_logger import get_logger
from ..common.datetime_utils import as_date
from ..common.validators import require_month, require_year
from ..core.enums import DayType, WeeklyOffPattern
from .factory import WeekOffRuleFactory
from .model import WorkingDaysInfo

logger = get_logger(__name__)


class AttendanceCalendarResolver:
    """Counts working days, holidays and week-offs of a calendar month.

    Precedence per day: explicit holiday, then week-off, then working day. A
    holiday falling on a week-off is counted once, as a holiday. Holidays are
    matched by calendar day; dates outside the month are ignored.
    """

    def __init__(self, *, rule_factory: Optional[WeekOffRuleFactory] = None):
        self._factory = rule_factory or WeekOffRuleFactory()

    def resolve(
        self,
        year: int,
        month: int,
        holiday_dates: Iterable[Union[date, datetime]] = (),
        weekly_off_pattern: WeeklyOffPattern | str = WeeklyOffPattern.STANDARD,
        *,
        weekly_off_days: Optional[Iterable[int]] = None,
    ) -> WorkingDaysInfo:
        year = require_year(year)
        month = require_month(month)
        rule = self._factory.for_pattern(weekly_off_pattern, weekly_off_days=weekly_off_days)

        holidays = {as_date(h) for h in holiday_dates}
        total_days = calendar.monthrange(year, month)[1]

        day_types: list[DayType] = []
        for day_of_month in range(1, total_days + 1):
            current = date(year, month, day_of_month)
            if current in holidays:
                day_types.append(DayType.HOLIDAY)
            elif rule.is_week_off(current):
                day_types.append(DayType.WEEK_OFF)
            else:
                day_types.append(DayType.WORKING)

        info = WorkingDaysInfo(
            year=year,
            month=month,
            total_days=total_days,
            working_days=day_types.count(DayType.WORKING),
            holiday_count=day_types.count(DayType.HOLIDAY),
            week_off_count=day_types.count(DayType.WEEK_OFF),
            day_types=tuple(day_types),
        )
        logger.debug(
            "working days %s-%02d pattern=%s: total=%s working=%s holidays=%s weekOffs=%s",
            year, month, weekly_off_pattern, info.total_days, info.working_days, info.holiday_count,
            info.week_off_count,
        )
        return info
