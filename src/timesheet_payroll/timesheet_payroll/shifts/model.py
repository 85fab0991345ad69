from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import ShiftType


@dataclass(frozen=True)
class ShiftDefinition:
    """Domain entity: a configured shift (times in decimal hours).

    ``end <= start`` means the shift wraps past midnight.
    """

    shift_type: ShiftType
    name: str
    start: float
    end: float
    target_hours: float
    lunch_start: Optional[float] = None
    lunch_end: Optional[float] = None

    @property
    def has_lunch(self) -> bool:
        return self.lunch_start is not None and self.lunch_end is not None

    @property
    def allotted_lunch(self) -> float:
        if not self.has_lunch:
            return 0.0
        return (self.lunch_end - self.lunch_start) % 24

    @property
    def wraps_midnight(self) -> bool:
        return self.end <= self.start
