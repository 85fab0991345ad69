from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import epoch_ms, now_local, parse_month_key
from ..core.actor import Actor
from ..core.constants import MIN_MARKED_DAYS
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, IncompleteMarkingError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .aggregator import MonthlyAggregator
from .model import MonthlySummary, MonthlyTimesheet, SuperSaveRecord, SuperSaveResult
from .repository import TimesheetRepository

logger = logging.getLogger(__name__)


class TimesheetService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        timesheets: TimesheetRepository,
        employees: EmployeeRepository,
        *,
        aggregator: Optional[MonthlyAggregator] = None,
        min_marked_days: int = MIN_MARKED_DAYS,
    ):
        self._attendance = attendance
        self._timesheets = timesheets
        self._employees = employees
        self._aggregator = aggregator or MonthlyAggregator()
        self._min_marked_days = int(min_marked_days)

    def _employee(self, employee_id: str) -> Employee:
        employee = self._employees.get(employee_id)
        if not employee:
            raise ValidationError(f"Employee {employee_id} does not exist")
        return employee

    def build_month(self, employee_id: str, month: str) -> MonthlyTimesheet:
        year, mon = parse_month_key(month)
        records = self._attendance.list_for_employee_month(employee_id, year, mon)
        return self._aggregator.aggregate(employee_id=employee_id, year=year, month=mon, records=records)

    def refresh_summary(self, employee_id: str, month: str, *, now: Optional[datetime] = None) -> MonthlySummary:
        """Recompute the stored summary from what is in the attendance store now."""
        sheet = self.build_month(employee_id, month)
        summary = MonthlySummary(
            employee_id=employee_id,
            month=sheet.month,
            full_working_days=sheet.full_days_count,
            sunday_present_count=sheet.sunday_present_count,
            sunday_work_hours=sheet.sunday_work_hours,
            marked_days_count=sheet.marked_days_count,
            updated_at=epoch_ms(now or now_local()),
        )
        self._timesheets.save_summary(summary)
        logger.debug("Summary refreshed for %s %s: %s marked", employee_id, sheet.month, summary.marked_days_count)
        return summary

    def get_supersave(self, employee_id: str, month: str) -> Optional[SuperSaveRecord]:
        return self._timesheets.get_supersave(employee_id, month)

    def super_save(self, *, actor: Actor, employee_id: str, month: str, now: Optional[datetime] = None) -> SuperSaveResult:
        """Lock in the month's totals once enough days are marked.

        Unmarked Sundays do not block the save; they come back as warnings.
        """
        if actor.role not in {Role.HR, Role.ADMIN}:
            raise AuthorizationError("Only HR or admin can super-save a timesheet")

        employee = self._employee(employee_id)
        sheet = self.build_month(employee_id, month)
        if sheet.marked_days_count < self._min_marked_days:
            logger.warning(
                "Super-save rejected for %s %s: %d of %d days marked",
                employee_id,
                sheet.month,
                sheet.marked_days_count,
                self._min_marked_days,
            )
            raise IncompleteMarkingError(marked_days=sheet.marked_days_count, required_days=self._min_marked_days)

        record = SuperSaveRecord(
            employee_id=employee_id,
            month=sheet.month,
            employee_name=employee.name,
            department=employee.department,
            marked_days=sheet.marked_days_count,
            total_days=sheet.total_days,
            full_working_days=sheet.full_days_count,
            sunday_present_count=sheet.sunday_present_count,
            sunday_work_hours=sheet.sunday_work_hours,
            total_ot=sheet.total_ot_hrs,
            total_pending=sheet.marked_pending_hrs,
            total_work_hrs=sheet.total_work_hrs,
            saved_at=epoch_ms(now or now_local()),
        )
        self._timesheets.save_supersave(record)

        result = SuperSaveResult(record=record, unmarked_sundays=sheet.unmarked_sundays)
        if result.unmarked_sundays:
            logger.warning("Super-saved %s %s with unmarked Sundays: %s", employee_id, sheet.month, result.warnings[0])
        else:
            logger.info("Super-saved %s %s (%d marked days)", employee_id, sheet.month, record.marked_days)
        return result
