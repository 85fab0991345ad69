from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ...shifts.model import ShiftDefinition
from ..model import WorkHours


class WorkHoursStrategy(ABC):
    """Strategy Pattern: encapsulate how a day's hours are derived from its punches."""

    @abstractmethod
    def compute(
        self,
        *,
        shift: ShiftDefinition,
        check_in: Optional[str],
        lunch_in: Optional[str],
        lunch_out: Optional[str],
        check_out: Optional[str],
    ) -> WorkHours:
        raise NotImplementedError
