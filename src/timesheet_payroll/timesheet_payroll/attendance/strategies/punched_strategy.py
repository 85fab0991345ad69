from __future__ import annotations

from typing import Optional

from ...common.numbers import round_half_up
from ...common.time_math import parse_clock
from ...core.constants import HOURS_PRECISION
from ...core.enums import ShiftType
from ...shifts.model import ShiftDefinition
from ..model import WorkHours
from .base import WorkHoursStrategy


class PunchedDayStrategy(WorkHoursStrategy):
    """Present, Half Day and Absent: hours come from the punches.

    Only the shift's allotted lunch is free; time spent at lunch beyond it is
    deducted from the span between check-in and check-out. Missing or
    unusable punches mean the whole target is pending.
    """

    def compute(
        self,
        *,
        shift: ShiftDefinition,
        check_in: Optional[str],
        lunch_in: Optional[str],
        lunch_out: Optional[str],
        check_out: Optional[str],
    ) -> WorkHours:
        target = shift.target_hours
        start = parse_clock(check_in)
        end = parse_clock(check_out)
        if start is None or end is None:
            return self._all_pending(target)

        if shift.shift_type == ShiftType.NIGHT and end <= start:
            end += 24
        span = end - start
        if span <= 0:
            return self._all_pending(target)

        net = max(0.0, span - self._extra_lunch(shift, lunch_in, lunch_out))
        return WorkHours(
            work_hrs=self._round(min(net, target)),
            ot_hrs=0.0,
            pending_hrs=self._round(max(0.0, target - net)),
            actual_work_hrs=self._round(net),
        )

    @staticmethod
    def _extra_lunch(shift: ShiftDefinition, lunch_in: Optional[str], lunch_out: Optional[str]) -> float:
        if not shift.has_lunch:
            return 0.0
        out_at = parse_clock(lunch_in)
        back_at = parse_clock(lunch_out)
        if out_at is None or back_at is None:
            return 0.0

        if shift.shift_type == ShiftType.NIGHT and back_at <= out_at:
            back_at += 24
        taken = back_at - out_at
        if taken <= 0:
            return 0.0
        return max(0.0, taken - shift.allotted_lunch)

    @classmethod
    def _all_pending(cls, target: float) -> WorkHours:
        return WorkHours(pending_hrs=cls._round(target))

    @staticmethod
    def _round(value: float) -> float:
        return round_half_up(value, HOURS_PRECISION)
