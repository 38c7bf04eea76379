from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from ..core.constants import MONEY_PLACES

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def to_decimal(value: Any) -> Decimal:
    """Convert int/float/str/None into Decimal without binary float noise.

    Floats go through ``str`` so ``0.75`` becomes ``Decimal("0.75")``.
    """
    if value is None or value == "":
        return ZERO
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError("boolean is not a monetary value")
    if isinstance(value, (int, str)):
        try:
            return Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError(f"Invalid number: {value!r}") from None
    if isinstance(value, float):
        return Decimal(repr(value))
    raise TypeError(f"Unsupported numeric type: {type(value)!r}")


def percent_of(base: Decimal, rate: Decimal) -> Decimal:
    """``base * rate / 100``; a rate <= 0 contributes nothing."""
    if rate <= 0:
        return ZERO
    return base * rate / HUNDRED


def round_money(value: Decimal) -> float:
    """Round for presentation (JSON) only; never used mid-pipeline."""
    return float(value.quantize(MONEY_PLACES, rounding=ROUND_HALF_UP))
