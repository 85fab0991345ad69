from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Union

from ..common.datetime_utils import is_sunday
from ..common.validators import require_enum
from ..core.enums import ShiftType
from .model import ShiftDefinition

DEFAULT_SHIFTS = (
    ShiftDefinition(
        shift_type=ShiftType.DAY,
        name="Day Shift",
        start=10.0,
        end=18.5,
        target_hours=8.5,
        lunch_start=13.0,
        lunch_end=13.5,
    ),
    ShiftDefinition(
        shift_type=ShiftType.NIGHT,
        name="Night Shift",
        start=16.0,
        end=0.5,
        target_hours=8.5,
        lunch_start=20.0,
        lunch_end=20.5,
    ),
    ShiftDefinition(
        shift_type=ShiftType.SUNDAY,
        name="Sunday Shift",
        start=9.0,
        end=13.0,
        target_hours=4.0,
    ),
)


class ShiftCalendar:
    """Immutable lookup of shift definitions keyed by shift type."""

    def __init__(self, shifts: Iterable[ShiftDefinition] = DEFAULT_SHIFTS):
        self._shifts = {s.shift_type: s for s in shifts}
        missing = set(ShiftType) - set(self._shifts)
        if missing:
            names = ", ".join(sorted(m.value for m in missing))
            raise ValueError(f"Shift calendar is missing definitions for: {names}")

    def get(self, shift_type: Union[ShiftType, str]) -> ShiftDefinition:
        return self._shifts[require_enum(ShiftType, shift_type, "Shift type")]

    def default_type_for(self, day: date) -> ShiftType:
        return ShiftType.SUNDAY if is_sunday(day) else ShiftType.DAY

    def resolve(self, shift_type: Optional[Union[ShiftType, str]], day: date) -> ShiftDefinition:
        """Shift for a record, falling back to the calendar default for that day."""
        if not shift_type:
            return self.get(self.default_type_for(day))
        return self.get(shift_type)

    def all(self) -> list[ShiftDefinition]:
        return list(self._shifts.values())
