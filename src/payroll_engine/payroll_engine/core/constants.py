"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

MONTHS_PER_YEAR = 12

# DA / HRA derived from basic when not set explicitly.
DEARNESS_ALLOWANCE_RATIO = Decimal("0.5")
HOUSE_RENT_ALLOWANCE_RATIO = Decimal("0.2")

DEFAULT_EMPLOYER_PF_RATE = Decimal("13")
DEFAULT_EMPLOYER_ESI_RATE = Decimal("3.25")
DEFAULT_EMPLOYEE_PF_RATE = Decimal("12")
DEFAULT_EMPLOYEE_ESI_RATE = Decimal("0.75")
DEFAULT_GRATUITY_RATE = Decimal("4.81")
DEFAULT_STATUTORY_BONUS_RATE = Decimal("8.33")

# Legacy "gross/net only" salary shape.
LEGACY_BASIC_RATIO = Decimal("0.5")
LEGACY_NET_RATIO = Decimal("0.8")

HALF_DAY_WEIGHT = Decimal("0.5")

DEFAULT_LATE_GRACE_MINUTES = 0

# Presentation only.
MONEY_PLACES = Decimal("0.01")
