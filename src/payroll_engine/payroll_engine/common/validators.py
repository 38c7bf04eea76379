from __future__ import annotations

from decimal import Decimal
from typing import Any

from ..core.exceptions import ValidationError
from .money import to_decimal


def require_non_negative(value: Any, field_name: str) -> Decimal:
    try:
        amount = to_decimal(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f"{field_name} must be a number") from None
    if not amount.is_finite():
        raise ValidationError(f"{field_name} must be a number")
    if amount < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return amount


def require_year(value: Any) -> int:
    try:
        year = int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError("year must be an integer") from None
    if year < 1 or year > 9999:
        raise ValidationError("year out of range")
    return year


def require_month(value: Any) -> int:
    """Month is 1-12 (calendar month, not a 0-based index)."""
    try:
        month = int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError("month must be an integer") from None
    if month < 1 or month > 12:
        raise ValidationError("month must be between 1 and 12")
    return month
