from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import DayStatus, ShiftType


@dataclass(frozen=True)
class TimesheetDay:
    """One calendar day of an employee-month, marked or defaulted."""

    work_date: date
    status: DayStatus
    shift_type: ShiftType
    is_marked: bool
    is_sunday: bool
    check_in: str = ""
    lunch_in: str = ""
    lunch_out: str = ""
    check_out: str = ""
    work_hrs: float = 0.0
    ot_hrs: float = 0.0
    pending_hrs: float = 0.0
    actual_work_hrs: float = 0.0
    notes: Optional[str] = None

    @property
    def is_full_day(self) -> bool:
        return self.status == DayStatus.PRESENT and self.pending_hrs == 0


@dataclass(frozen=True)
class MonthlyTimesheet:
    """Every day of one employee-month plus the counts rolled up from them."""

    employee_id: str
    month: str
    days: tuple[TimesheetDay, ...]
    present_days: int
    absent_days: int
    leave_days: int
    half_days: int
    holiday_days: int
    week_off_days: int
    total_ot_hrs: float
    total_pending_hrs: float
    marked_pending_hrs: float
    total_work_hrs: float
    sunday_present_count: int
    sunday_work_hours: float
    full_days_count: int
    marked_days_count: int
    unmarked_sundays: tuple[date, ...]

    @property
    def total_days(self) -> int:
        return len(self.days)

    def marked(self) -> list[TimesheetDay]:
        return [d for d in self.days if d.is_marked]


@dataclass(frozen=True)
class MonthlySummary:
    employee_id: str
    month: str
    full_working_days: int
    sunday_present_count: int
    sunday_work_hours: float
    marked_days_count: int
    updated_at: int = 0


@dataclass(frozen=True)
class SuperSaveRecord:
    """Completeness gate for a month; required before approval submission."""

    employee_id: str
    month: str
    employee_name: str
    department: str
    marked_days: int
    total_days: int
    full_working_days: int
    sunday_present_count: int
    sunday_work_hours: float
    total_ot: float
    total_pending: float
    total_work_hrs: float
    saved_at: int


@dataclass(frozen=True)
class SuperSaveResult:
    record: SuperSaveRecord
    unmarked_sundays: tuple[date, ...] = ()

    @property
    def warnings(self) -> list[str]:
        if not self.unmarked_sundays:
            return []
        dates = ", ".join(d.isoformat() for d in self.unmarked_sundays)
        return [f"Unmarked Sundays: {dates}"]
