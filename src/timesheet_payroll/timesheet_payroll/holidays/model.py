from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.constants import ALL_DEPARTMENTS


@dataclass(frozen=True)
class Holiday:
    """Company holiday, maintained outside this core (read-only here)."""

    holiday_id: int
    holiday_date: date
    name: str
    departments: tuple[str, ...] = (ALL_DEPARTMENTS,)
    is_recurring: bool = False

    def applies_to(self, department: str) -> bool:
        return ALL_DEPARTMENTS in self.departments or (department or "") in self.departments
