"""Department-aware attendance tally shared by payroll, ESI and approvals.

Sunday presence is handled differently per department: staff get it credited
as a present day, workers get the hours paid as overtime, and both count
towards "Sundays worked". Leave days are the marked Leave and Absent days
that the payslip deducts at the per-day rate.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..common.numbers import round_half_up
from ..core.constants import SUNDAY_CREDIT_DEPARTMENTS, WORKER_DEPARTMENTS
from ..core.enums import DayStatus
from ..timesheet.model import MonthlyTimesheet

LEAVE_STATUSES = frozenset({DayStatus.LEAVE, DayStatus.ABSENT})


@dataclass(frozen=True)
class AttendanceTally:
    present_days: int
    half_days: int
    sunday_worked_count: int
    ot_minutes: int
    leave_days: int = 0

    @property
    def ot_hours(self) -> float:
        return round_half_up(self.ot_minutes / 60, 4)


def tally_month(sheet: MonthlyTimesheet, *, department: str) -> AttendanceTally:
    present = half = sunday_worked = ot_minutes = leave = 0
    pays_sunday_as_ot = department in WORKER_DEPARTMENTS
    credits_sunday = department in SUNDAY_CREDIT_DEPARTMENTS

    for day in sheet.marked():
        if day.status in LEAVE_STATUSES:
            leave += 1
        if day.is_sunday:
            if day.status != DayStatus.PRESENT:
                continue
            sunday_worked += 1
            if credits_sunday:
                present += 1
            if pays_sunday_as_ot:
                ot_minutes += int(round_half_up(day.work_hrs * 60, 0))
            continue

        if day.status == DayStatus.PRESENT:
            present += 1
        elif day.status == DayStatus.HALF_DAY:
            half += 1
        if day.ot_hrs > 0:
            ot_minutes += int(round_half_up(day.ot_hrs * 60, 0))

    return AttendanceTally(
        present_days=present,
        half_days=half,
        sunday_worked_count=sunday_worked,
        ot_minutes=ot_minutes,
        leave_days=leave,
    )
