from __future__ import annotations

from typing import Optional

from ...shifts.model import ShiftDefinition
from ..model import WorkHours
from .base import WorkHoursStrategy


class OffDayStrategy(WorkHoursStrategy):
    """Leave, Holiday and Week Off: nothing worked, nothing pending."""

    def compute(
        self,
        *,
        shift: ShiftDefinition,
        check_in: Optional[str],
        lunch_in: Optional[str],
        lunch_out: Optional[str],
        check_out: Optional[str],
    ) -> WorkHours:
        return WorkHours()
