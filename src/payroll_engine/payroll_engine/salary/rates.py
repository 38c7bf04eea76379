from __future__ import annotations

from dataclasses import dataclass, fields
from decimal import Decimal
from typing import Any, Mapping

from ..common.validators import require_non_negative
from ..core.constants import (
    DEFAULT_EMPLOYEE_ESI_RATE,
    DEFAULT_EMPLOYEE_PF_RATE,
    DEFAULT_EMPLOYER_ESI_RATE,
    DEFAULT_EMPLOYER_PF_RATE,
    DEFAULT_GRATUITY_RATE,
    DEFAULT_STATUTORY_BONUS_RATE,
)
from ..common.money import ZERO
from .model import SalaryStructureInputs


@dataclass(frozen=True)
class DefaultRatePolicy:
    """Default contribution/benefit percentages applied when a staff salary is created.

    The calculator never applies these itself: an absent rate there means 0.
    """

    employer_pf_rate: Decimal = DEFAULT_EMPLOYER_PF_RATE
    employer_esi_rate: Decimal = DEFAULT_EMPLOYER_ESI_RATE
    employee_pf_rate: Decimal = DEFAULT_EMPLOYEE_PF_RATE
    employee_esi_rate: Decimal = DEFAULT_EMPLOYEE_ESI_RATE
    gratuity_rate: Decimal = DEFAULT_GRATUITY_RATE
    statutory_bonus_rate: Decimal = DEFAULT_STATUTORY_BONUS_RATE
    incentive_rate: Decimal = ZERO

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "DefaultRatePolicy":
        """Build from the DEFAULT_RATES settings dict; unknown keys are ignored."""
        if not data:
            return cls()
        names = {f.name for f in fields(cls)}
        overrides = {k: require_non_negative(v, k) for k, v in data.items() if k in names}
        return cls(**overrides)

    def rates(self) -> dict[str, Decimal]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def build_inputs(self, basic_salary: Any, overrides: Mapping[str, Any] | None = None) -> SalaryStructureInputs:
        """New SalaryStructureInputs with every rate not given in ``overrides`` taken from the policy.

        ``overrides`` uses the staff-record keys (camelCase or snake_case).
        """
        values: dict[str, Any] = dict(self.rates())
        values.update(overrides or {})
        values["basic_salary"] = basic_salary
        return SalaryStructureInputs.from_mapping(values)
