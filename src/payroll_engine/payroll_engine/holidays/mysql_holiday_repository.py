from __future__ import annotations

from typing import Optional, Sequence

from ..app_logger import get_logger
from ..core.enums import WeeklyOffPattern
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Holiday, WeeklyOffSetting
from .repository import BusinessSettingsRepository, HolidayRepository

logger = get_logger(__name__)


def _weekly_off_from_row(r: dict) -> WeeklyOffSetting:
    # weekly_off_days is a comma list of weekday numbers, e.g. "5,6"
    raw_days = (r.get("weekly_off_days") or "").strip()
    days = frozenset(int(d) for d in raw_days.split(",") if d.strip()) if raw_days else None
    if days and any(d < 0 or d > 6 for d in days):
        raise ValueError(f"weekday out of range in {raw_days!r}")
    return WeeklyOffSetting(
        pattern=WeeklyOffPattern(r.get("weekly_off_pattern") or WeeklyOffPattern.STANDARD.value),
        weekly_off_days=days,
    )


class MySQLHolidayRepository(HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_business_and_month(self, business_id: int, year: int, month: int) -> Sequence[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT holiday_date, holiday_name
                FROM holidays
                WHERE business_id=%s AND is_active=1
                  AND YEAR(holiday_date)=%s AND MONTH(holiday_date)=%s
                ORDER BY holiday_date
                """,
                (business_id, int(year), int(month)),
            )
            return [Holiday(holiday_date=r["holiday_date"], name=r.get("holiday_name")) for r in fetchall(cur)]


class MySQLBusinessSettingsRepository(BusinessSettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_weekly_off(self, business_id: int) -> Optional[WeeklyOffSetting]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT weekly_off_pattern, weekly_off_days FROM businesses WHERE business_id=%s",
                (business_id,),
            )
            r = fetchone(cur)
            if not r:
                return None

        try:
            return _weekly_off_from_row(r)
        except ValueError as e:
            # caller falls back to the configured default pattern
            logger.warning("business %s has an invalid weekly off setting: %s", business_id, e)
            return None
