from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Union

from ..common.datetime_utils import epoch_ms, month_key_of, now_local
from ..common.time_math import parse_clock, to_clock
from ..common.validators import optional_text, require_enum, require_non_negative
from ..core.actor import Actor
from ..core.constants import ABSENT_WITH_PUNCHES_NOTE, DEFAULT_HOLIDAY_NOTE
from ..core.enums import PUNCHED_STATUSES, DayStatus, Role, ShiftType
from ..core.exceptions import AuthorizationError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..holidays.calendar import HolidayCalendar
from ..timesheet.service import TimesheetService
from .calculator import DailyWorkCalculator
from .model import DailyAttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        holidays: HolidayCalendar,
        *,
        calculator: Optional[DailyWorkCalculator] = None,
        timesheets: Optional[TimesheetService] = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._holidays = holidays
        self._calculator = calculator or DailyWorkCalculator()
        self._timesheets = timesheets

    @staticmethod
    def _require_marker(actor: Actor) -> None:
        if actor.role not in {Role.HR, Role.ADMIN}:
            raise AuthorizationError("Only HR or admin can mark attendance")

    def _employee(self, employee_id: str) -> Employee:
        employee = self._employees.get(employee_id)
        if not employee:
            raise ValidationError(f"Employee {employee_id} does not exist")
        return employee

    @staticmethod
    def _punch(value: Optional[str], field_name: str) -> str:
        text = (value or "").strip()
        if text and parse_clock(text) is None:
            raise ValidationError(f"{field_name} must look like 9:30 AM")
        return text

    def save_day(
        self,
        *,
        actor: Actor,
        employee_id: str,
        work_date: date,
        status: Union[DayStatus, str],
        shift_type: Union[ShiftType, str, None] = None,
        check_in: Optional[str] = None,
        lunch_in: Optional[str] = None,
        lunch_out: Optional[str] = None,
        check_out: Optional[str] = None,
        ot_hrs: float = 0.0,
        notes: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> DailyAttendanceRecord:
        """Mark one employee-day, replacing whatever was stored for it.

        Derived hours are always recomputed here; callers cannot supply them.
        """
        self._require_marker(actor)
        now = now or now_local()
        employee = self._employee(employee_id)
        status = require_enum(DayStatus, status, "Status")
        shift = self._calculator.shifts.resolve(shift_type, work_date)
        ot_hrs = require_non_negative(ot_hrs or 0, "OT hours")
        existing = self._attendance.get(employee_id, work_date)

        punches = {"check_in": "", "lunch_in": "", "lunch_out": "", "check_out": ""}
        if status in PUNCHED_STATUSES:
            punches["check_in"] = (
                self._punch(check_in, "Check-in")
                or (existing.check_in if existing else "")
                or to_clock(now.hour + now.minute / 60)
            )
            punches["check_out"] = self._punch(check_out, "Check-out") or (existing.check_out if existing else "")
            if shift.has_lunch:
                punches["lunch_in"] = (
                    self._punch(lunch_in, "Lunch-in")
                    or (existing.lunch_in if existing else "")
                    or to_clock(shift.lunch_start)
                )
                punches["lunch_out"] = (
                    self._punch(lunch_out, "Lunch-out")
                    or (existing.lunch_out if existing else "")
                    or to_clock(shift.lunch_end)
                )

        hours = self._calculator.calculate(status=status, shift_type=shift.shift_type, **punches)

        if status == DayStatus.ABSENT and punches["check_in"] and punches["check_out"]:
            final_notes = ABSENT_WITH_PUNCHES_NOTE
        elif status == DayStatus.HOLIDAY:
            holiday = self._holidays.holiday_on(work_date, employee.department)
            final_notes = holiday.name if holiday else (optional_text(notes) or DEFAULT_HOLIDAY_NOTE)
        else:
            final_notes = optional_text(notes)

        stamp = epoch_ms(now)
        record = DailyAttendanceRecord(
            employee_id=employee_id,
            work_date=work_date,
            status=status,
            shift_type=shift.shift_type,
            work_hrs=hours.work_hrs,
            ot_hrs=ot_hrs if status in PUNCHED_STATUSES else 0.0,
            pending_hrs=hours.pending_hrs,
            actual_work_hrs=hours.actual_work_hrs,
            employee_name=employee.name,
            notes=final_notes,
            created_at=existing.created_at if existing and existing.created_at else stamp,
            updated_at=stamp,
            **punches,
        )
        self._attendance.upsert(record)
        logger.debug(
            "Saved %s %s as %s (work=%s pending=%s)",
            employee_id,
            work_date.isoformat(),
            status.value,
            record.work_hrs,
            record.pending_hrs,
        )

        if self._timesheets is not None:
            self._timesheets.refresh_summary(employee_id, month_key_of(work_date), now=now)
        return record

    def apply_holiday(self, *, actor: Actor, work_date: date, now: Optional[datetime] = None) -> list[DailyAttendanceRecord]:
        """Mark a holiday for every active employee it applies to and who has no record yet."""
        self._require_marker(actor)
        now = now or now_local()
        created: list[DailyAttendanceRecord] = []
        for employee in self._employees.list_active():
            holiday = self._holidays.holiday_on(work_date, employee.department)
            if not holiday or self._attendance.get(employee.employee_id, work_date):
                continue
            created.append(
                self.save_day(
                    actor=actor,
                    employee_id=employee.employee_id,
                    work_date=work_date,
                    status=DayStatus.HOLIDAY,
                    now=now,
                )
            )
        if created:
            logger.info("Holiday marked on %s for %d employee(s)", work_date.isoformat(), len(created))
        return created

    def list_day(self, work_date: date) -> list[DailyAttendanceRecord]:
        return list(self._attendance.list_for_date(work_date))
