from __future__ import annotations

from typing import Optional, Union

from ..common.validators import require_enum
from ..core.enums import DayStatus, ShiftType
from ..shifts.calendar import ShiftCalendar
from .factory import WorkHoursStrategyFactory
from .model import DailyAttendanceRecord, WorkHours


class DailyWorkCalculator:
    """Derives work/pending/actual hours for one employee-day.

    Pure: the same (status, shift type, punches) always yields the same hours.
    Overtime is never derived here; it is entered separately on the record.
    """

    def __init__(
        self,
        shifts: Optional[ShiftCalendar] = None,
        *,
        strategy_factory: Optional[WorkHoursStrategyFactory] = None,
    ):
        self._shifts = shifts or ShiftCalendar()
        self._factory = strategy_factory or WorkHoursStrategyFactory()

    @property
    def shifts(self) -> ShiftCalendar:
        return self._shifts

    def calculate(
        self,
        *,
        status: Union[DayStatus, str],
        shift_type: Union[ShiftType, str],
        check_in: Optional[str] = None,
        lunch_in: Optional[str] = None,
        lunch_out: Optional[str] = None,
        check_out: Optional[str] = None,
    ) -> WorkHours:
        status = require_enum(DayStatus, status, "Status")
        shift = self._shifts.get(shift_type)
        strategy = self._factory.for_status(status)
        return strategy.compute(
            shift=shift,
            check_in=check_in,
            lunch_in=lunch_in,
            lunch_out=lunch_out,
            check_out=check_out,
        )

    def for_record(self, record: DailyAttendanceRecord) -> WorkHours:
        return self.calculate(
            status=record.status,
            shift_type=record.shift_type,
            check_in=record.check_in,
            lunch_in=record.lunch_in,
            lunch_out=record.lunch_out,
            check_out=record.check_out,
        )
