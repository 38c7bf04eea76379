from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Iterable, Optional

from ..app_logger import get_logger
from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import shift_hours_between
from ..common.money import ZERO
from ..common.validators import require_non_negative
from ..core.enums import AttendanceStatus
from .factory import FineStrategyFactory
from .model import FineContext, FineInfo, LateDay, LateFinePolicyConfig

logger = get_logger(__name__)

_SCORED_STATUSES = {AttendanceStatus.PRESENT, AttendanceStatus.APPROVED}


class LateFinePolicy:
    """Scores lateness over a period's attendance records and prices it.

    late minutes = max(0, punch_in - shift_start - grace), whole minutes.
    Only Present/Approved records with a punch-in and a known shift start are
    scored. The caller subtracts ``total_fine_amount`` from the prorated net
    (see ``payroll.service.apply_fine``).
    """

    def __init__(
        self,
        config: Optional[LateFinePolicyConfig] = None,
        *,
        strategy_factory: Optional[FineStrategyFactory] = None,
    ):
        self._config = config or LateFinePolicyConfig()
        self._strategy = (strategy_factory or FineStrategyFactory()).for_config(self._config)

    @property
    def config(self) -> LateFinePolicyConfig:
        return self._config

    def late_minutes(self, record: AttendanceRecord) -> int:
        if record.status not in _SCORED_STATUSES or record.punch_in is None:
            return 0
        shift_start = record.shift_start or self._config.default_shift_start
        if shift_start is None:
            return 0

        start = datetime.combine(record.work_date, shift_start, tzinfo=record.punch_in.tzinfo)
        seconds = (record.punch_in - start).total_seconds()
        if seconds <= 0:
            return 0
        elapsed = int((seconds + 30) // 60)
        grace = record.grace_minutes if record.grace_minutes is not None else self._config.grace_minutes
        return max(0, elapsed - int(grace))

    def compute_fine(
        self,
        records: Iterable[AttendanceRecord],
        *,
        daily_salary: Any = None,
        shift_hours: Any = None,
    ) -> FineInfo:
        base_context = FineContext(
            daily_salary=require_non_negative(daily_salary, "daily_salary") if daily_salary is not None else None,
            shift_hours=require_non_negative(shift_hours, "shift_hours") if shift_hours is not None else None,
        )

        total = ZERO
        total_minutes = 0
        details: list[LateDay] = []
        for record in records:
            minutes = self.late_minutes(record)
            if minutes <= 0:
                continue

            amount = self._amount_for(record, minutes, base_context)
            logger.debug(
                "late %s: %s min fine=%s (%s)", record.work_date, minutes, amount, type(self._strategy).__name__
            )
            details.append(LateDay(work_date=record.work_date, late_minutes=minutes, fine_amount=amount))
            total += amount
            total_minutes += minutes

        return FineInfo(
            total_fine_amount=total,
            late_days=len(details),
            total_late_minutes=total_minutes,
            details=tuple(details),
        )

    def _amount_for(self, record: AttendanceRecord, minutes: int, context: FineContext) -> Decimal:
        if not self._config.enabled:
            return ZERO
        if record.shift_start and record.shift_end:
            context = FineContext(
                daily_salary=context.daily_salary,
                shift_hours=shift_hours_between(record.shift_start, record.shift_end),
            )
        elif context.shift_hours is None and self._config.default_shift_hours is not None:
            context = FineContext(daily_salary=context.daily_salary, shift_hours=self._config.default_shift_hours)
        return self._strategy.amount_for(minutes, context)
