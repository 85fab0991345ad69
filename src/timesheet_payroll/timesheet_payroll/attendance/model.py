from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import DayStatus, ShiftType


@dataclass(frozen=True)
class WorkHours:
    """Derived hours for one employee-day (4-decimal precision)."""

    work_hrs: float = 0.0
    ot_hrs: float = 0.0
    pending_hrs: float = 0.0
    actual_work_hrs: float = 0.0


@dataclass(frozen=True)
class DailyAttendanceRecord:
    """Domain entity: one employee-day, unique on (employee_id, work_date).

    work_hrs, pending_hrs and actual_work_hrs are recomputed on every save.
    ot_hrs is the manually entered overtime for the day.
    """

    employee_id: str
    work_date: date
    status: DayStatus
    shift_type: ShiftType
    check_in: str = ""
    lunch_in: str = ""
    lunch_out: str = ""
    check_out: str = ""
    work_hrs: float = 0.0
    ot_hrs: float = 0.0
    pending_hrs: float = 0.0
    actual_work_hrs: float = 0.0
    employee_name: str = ""
    notes: Optional[str] = None
    created_at: int = 0
    updated_at: int = 0

    @property
    def last_written(self) -> int:
        return self.updated_at or self.created_at
