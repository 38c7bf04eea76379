from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from decimal import Decimal
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_hhmm, shift_hours_between
from ..common.money import ZERO, round_money
from ..common.validators import require_non_negative
from ..core.constants import DEFAULT_LATE_GRACE_MINUTES
from ..core.enums import CustomAmountUnit, FineApplyTo, FineCalculationType, FineRuleType
from ..core.exceptions import ValidationError


def _enum(enum_cls, value, field_name: str):
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}") from None


@dataclass(frozen=True)
class FineRule:
    """Company fine rule; the first rule applying to late arrival overrides the calculation type."""

    type: FineRuleType
    apply_to: FineApplyTo = FineApplyTo.BOTH
    custom_amount: Decimal = ZERO
    custom_amount_unit: CustomAmountUnit = CustomAmountUnit.PER_HOUR

    @property
    def applies_to_late_arrival(self) -> bool:
        return self.apply_to in (FineApplyTo.LATE_ARRIVAL, FineApplyTo.BOTH)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FineRule":
        return cls(
            type=_enum(FineRuleType, data.get("type"), "rule type"),
            apply_to=_enum(FineApplyTo, data.get("apply_to", FineApplyTo.BOTH.value), "apply_to"),
            custom_amount=require_non_negative(data.get("custom_amount"), "custom_amount"),
            custom_amount_unit=_enum(
                CustomAmountUnit,
                data.get("custom_amount_unit", CustomAmountUnit.PER_HOUR.value),
                "custom_amount_unit",
            ),
        )


@dataclass(frozen=True)
class FineTier:
    """Fine charged for a late day whose late minutes reach ``min_late_minutes``."""

    min_late_minutes: int
    amount: Decimal


@dataclass(frozen=True)
class LateFinePolicyConfig:
    """Injectable late-arrival fine schedule.

    calculation_type picks the formula:
      flat_per_day    flat_amount_per_day for each late day
      per_minute      rate_per_minute x late minutes
      fixed_per_hour  fine_per_hour x late hours
      shift_based     (daily salary / shift hours) x late hours
      tiered          amount of the highest tier reached, per late day
    """

    enabled: bool = True
    grace_minutes: int = DEFAULT_LATE_GRACE_MINUTES
    calculation_type: FineCalculationType = FineCalculationType.SHIFT_BASED
    flat_amount_per_day: Decimal = ZERO
    rate_per_minute: Decimal = ZERO
    fine_per_hour: Decimal = ZERO
    tiers: tuple[FineTier, ...] = ()
    rules: tuple[FineRule, ...] = ()
    default_shift_start: Optional[time] = None
    default_shift_end: Optional[time] = None

    def __post_init__(self):
        if self.grace_minutes < 0:
            raise ValidationError("grace_minutes must not be negative")
        ordered = tuple(sorted(self.tiers, key=lambda t: t.min_late_minutes))
        if ordered != self.tiers:
            object.__setattr__(self, "tiers", ordered)

    @property
    def default_shift_hours(self) -> Optional[Decimal]:
        if self.default_shift_start is None or self.default_shift_end is None:
            return None
        return shift_hours_between(self.default_shift_start, self.default_shift_end)

    @property
    def late_arrival_rule(self) -> Optional[FineRule]:
        return next((r for r in self.rules if r.applies_to_late_arrival), None)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "LateFinePolicyConfig":
        """Build from the LATE_FINE settings dict."""
        if not data:
            return cls()
        try:
            tiers = tuple(
                FineTier(
                    min_late_minutes=int(t["min_late_minutes"]),
                    amount=require_non_negative(t.get("amount"), "tier amount"),
                )
                for t in data.get("tiers") or ()
            )
            shift_start = parse_hhmm(data.get("default_shift_start"))
            shift_end = parse_hhmm(data.get("default_shift_end"))
            grace = int(data.get("grace_minutes", DEFAULT_LATE_GRACE_MINUTES))
        except (KeyError, TypeError, ValueError, OverflowError) as e:
            raise ValidationError(f"Invalid late fine settings: {e}") from None

        return cls(
            enabled=bool(data.get("enabled", True)),
            grace_minutes=grace,
            calculation_type=_enum(
                FineCalculationType,
                data.get("calculation_type", FineCalculationType.SHIFT_BASED.value),
                "calculation_type",
            ),
            flat_amount_per_day=require_non_negative(data.get("flat_amount_per_day"), "flat_amount_per_day"),
            rate_per_minute=require_non_negative(data.get("rate_per_minute"), "rate_per_minute"),
            fine_per_hour=require_non_negative(data.get("fine_per_hour"), "fine_per_hour"),
            tiers=tiers,
            rules=tuple(FineRule.from_mapping(r) for r in data.get("rules") or ()),
            default_shift_start=shift_start,
            default_shift_end=shift_end,
        )


@dataclass(frozen=True)
class FineContext:
    """Salary figures some formulas need; None means unknown."""

    daily_salary: Optional[Decimal] = None
    shift_hours: Optional[Decimal] = None


@dataclass(frozen=True)
class LateDay:
    work_date: date
    late_minutes: int
    fine_amount: Decimal


@dataclass(frozen=True)
class FineInfo:
    total_fine_amount: Decimal = ZERO
    late_days: int = 0
    total_late_minutes: int = 0
    details: tuple[LateDay, ...] = field(default=(), repr=False)

    def to_dict(self) -> dict:
        return {
            "totalFineAmount": round_money(self.total_fine_amount),
            "lateDays": self.late_days,
            "totalLateMinutes": self.total_late_minutes,
            "details": [
                {
                    "date": d.work_date.isoformat(),
                    "lateMinutes": d.late_minutes,
                    "fineAmount": round_money(d.fine_amount),
                }
                for d in self.details
            ],
        }
