from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class StaffMember:
    """Domain entity: the slice of a staff record the payroll engine reads."""

    staff_id: int
    full_name: str
    business_id: Optional[int]
    # raw salary document, camelCase keys (component shape or legacy gross/net)
    salary: dict[str, Any] = field(default_factory=dict)
