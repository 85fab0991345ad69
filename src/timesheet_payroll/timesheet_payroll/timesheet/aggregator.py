from __future__ import annotations

from typing import Iterable, Optional

from ..attendance.calculator import DailyWorkCalculator
from ..attendance.model import DailyAttendanceRecord
from ..common.datetime_utils import is_sunday, iter_month_days, month_key
from ..common.numbers import round_half_up
from ..core.constants import HOURS_PRECISION
from ..core.enums import DayStatus
from .model import MonthlyTimesheet, TimesheetDay


class MonthlyAggregator:
    """Rolls daily records into one employee-month.

    Hours are recomputed from the punches with the daily calculator so every
    view agrees with it; only ``ot_hrs`` is taken from the stored record.
    """

    def __init__(self, calculator: Optional[DailyWorkCalculator] = None):
        self._calculator = calculator or DailyWorkCalculator()

    def aggregate(
        self,
        *,
        employee_id: str,
        year: int,
        month: int,
        records: Iterable[DailyAttendanceRecord],
    ) -> MonthlyTimesheet:
        latest = self._latest_per_day(employee_id, year, month, records)
        days = tuple(
            self._marked_day(latest[d]) if d in latest else self._default_day(d)
            for d in iter_month_days(year, month)
        )

        present = absent = leave = half = holiday = week_off = 0
        sunday_present = 0
        sunday_hours = 0.0
        total_ot = total_pending = marked_pending = total_work = 0.0
        for day in days:
            if day.status == DayStatus.PRESENT:
                present += 1
                if day.is_sunday:
                    sunday_present += 1
                    sunday_hours += day.work_hrs
            elif day.status == DayStatus.ABSENT:
                absent += 1
            elif day.status == DayStatus.LEAVE:
                absent += 1
                leave += 1
            elif day.status == DayStatus.HALF_DAY:
                half += 1
            elif day.status == DayStatus.HOLIDAY:
                holiday += 1
            elif day.status == DayStatus.WEEK_OFF:
                week_off += 1

            total_ot += day.ot_hrs
            total_pending += day.pending_hrs
            total_work += day.work_hrs
            if day.is_marked:
                marked_pending += day.pending_hrs

        return MonthlyTimesheet(
            employee_id=employee_id,
            month=month_key(year, month),
            days=days,
            present_days=present,
            absent_days=absent,
            leave_days=leave,
            half_days=half,
            holiday_days=holiday,
            week_off_days=week_off,
            total_ot_hrs=self._round(total_ot),
            total_pending_hrs=self._round(total_pending),
            marked_pending_hrs=self._round(marked_pending),
            total_work_hrs=self._round(total_work),
            sunday_present_count=sunday_present,
            sunday_work_hours=self._round(sunday_hours),
            full_days_count=sum(1 for d in days if d.is_full_day),
            marked_days_count=sum(1 for d in days if d.is_marked),
            unmarked_sundays=tuple(d.work_date for d in days if d.is_sunday and not d.is_marked),
        )

    @staticmethod
    def _latest_per_day(employee_id, year, month, records) -> dict:
        # Latest write wins; on a tie the first record seen is kept.
        latest: dict = {}
        for rec in records:
            if rec.employee_id != employee_id:
                continue
            if rec.work_date.year != year or rec.work_date.month != month:
                continue
            current = latest.get(rec.work_date)
            if current is None or rec.last_written > current.last_written:
                latest[rec.work_date] = rec
        return latest

    def _marked_day(self, rec: DailyAttendanceRecord) -> TimesheetDay:
        hours = self._calculator.for_record(rec)
        return TimesheetDay(
            work_date=rec.work_date,
            status=rec.status,
            shift_type=rec.shift_type,
            is_marked=True,
            is_sunday=is_sunday(rec.work_date),
            check_in=rec.check_in,
            lunch_in=rec.lunch_in,
            lunch_out=rec.lunch_out,
            check_out=rec.check_out,
            work_hrs=hours.work_hrs,
            ot_hrs=rec.ot_hrs,
            pending_hrs=hours.pending_hrs,
            actual_work_hrs=hours.actual_work_hrs,
            notes=rec.notes,
        )

    def _default_day(self, day) -> TimesheetDay:
        shifts = self._calculator.shifts
        shift_type = shifts.default_type_for(day)
        sunday = is_sunday(day)
        return TimesheetDay(
            work_date=day,
            status=DayStatus.HOLIDAY if sunday else DayStatus.ABSENT,
            shift_type=shift_type,
            is_marked=False,
            is_sunday=sunday,
            pending_hrs=0.0 if sunday else shifts.get(shift_type).target_hours,
        )

    @staticmethod
    def _round(value: float) -> float:
        return round_half_up(value, HOURS_PRECISION)
