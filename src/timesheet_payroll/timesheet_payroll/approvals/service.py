from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Optional, Union

from ..common.datetime_utils import epoch_ms, now_local, parse_month_key
from ..common.numbers import round_half_up
from ..common.validators import require_enum
from ..core.actor import Actor
from ..core.constants import HOURS_PRECISION, MIN_MARKED_DAYS
from ..core.enums import ApprovalStatus
from ..core.exceptions import AuthorizationError, IncompleteMarkingError, ValidationError
from ..employees.repository import EmployeeRepository
from ..payroll.service import EmployeeMonthGross, GrossEarningsService
from ..timesheet.service import TimesheetService
from .model import ApprovalSnapshot, AttendanceApproval
from .repository import ApprovalRepository

logger = logging.getLogger(__name__)

DECISIONS = frozenset({ApprovalStatus.ACCEPTED, ApprovalStatus.DECLINED})


class ApprovalWorkflow:
    """HR -> Admin approval of an employee-month.

    No record means "not submitted". HR submits once, after the month is
    super-saved; Admin accepts or declines the pending record. A month with
    any record cannot be sent again.
    """

    def __init__(
        self,
        approvals: ApprovalRepository,
        timesheets: TimesheetService,
        employees: EmployeeRepository,
        gross: GrossEarningsService,
        *,
        min_marked_days: int = MIN_MARKED_DAYS,
    ):
        self._approvals = approvals
        self._timesheets = timesheets
        self._employees = employees
        self._gross = gross
        self._min_marked_days = int(min_marked_days)

    @staticmethod
    def snapshot_of(g: EmployeeMonthGross) -> ApprovalSnapshot:
        sheet = g.sheet
        ot_hours = g.tally.ot_hours
        pending = sheet.marked_pending_hrs
        return ApprovalSnapshot(
            employee_name=g.employee.name,
            department=g.employee.department,
            total_days=sheet.total_days,
            present_days=g.tally.present_days,
            absent_days=sheet.absent_days,
            leave_days=sheet.leave_days,
            half_days=g.tally.half_days,
            ot_hours=ot_hours,
            pending_hours=pending,
            net_ot_hours=round_half_up(ot_hours - pending, HOURS_PRECISION),
            full_working_days=g.breakdown.full_working_days,
            marked_days=sheet.marked_days_count,
        )

    def get(self, employee_id: str, month: str) -> Optional[AttendanceApproval]:
        return self._approvals.get(employee_id, month)

    def list_month(self, month: str) -> list[AttendanceApproval]:
        parse_month_key(month)
        return list(self._approvals.list_for_month(month))

    def submit(self, *, actor: Actor, employee_id: str, month: str, now: Optional[datetime] = None) -> AttendanceApproval:
        if not actor.is_hr:
            raise AuthorizationError("Only HR can send attendance for approval")

        parse_month_key(month)
        employee = self._employees.get(employee_id)
        if not employee:
            raise ValidationError(f"Employee {employee_id} does not exist")

        existing = self._approvals.get(employee_id, month)
        if existing:
            raise AuthorizationError(f"Attendance for {month} was already sent ({existing.status.value})")

        if not self._timesheets.get_supersave(employee_id, month):
            marked = self._timesheets.build_month(employee_id, month).marked_days_count
            if marked < self._min_marked_days:
                raise IncompleteMarkingError(marked_days=marked, required_days=self._min_marked_days)
            raise ValidationError("Super-save the timesheet before sending it for approval")

        stamp = epoch_ms(now or now_local())
        approval = AttendanceApproval(
            employee_id=employee_id,
            month=month,
            status=ApprovalStatus.PENDING,
            snapshot=self.snapshot_of(self._gross.compute(employee, month)),
            created_at=stamp,
            updated_at=stamp,
            submitted_by=actor.actor_id,
        )
        self._approvals.save(approval)
        logger.info("%s %s sent for approval by %s", employee_id, month, actor.actor_id)
        return approval

    def decide(
        self,
        *,
        actor: Actor,
        employee_id: str,
        month: str,
        status: Union[ApprovalStatus, str],
        now: Optional[datetime] = None,
    ) -> AttendanceApproval:
        if not actor.is_admin:
            raise AuthorizationError("Only an admin can approve or decline attendance")

        decision = require_enum(ApprovalStatus, status, "Decision")
        if decision not in DECISIONS:
            raise ValidationError("Decision must be accepted or declined")

        existing = self._approvals.get(employee_id, month)
        if not existing:
            raise ValidationError(f"No approval request for {employee_id} in {month}")
        if existing.status != ApprovalStatus.PENDING:
            raise ValidationError(f"Attendance for {month} was already {existing.status.value}")

        decided = replace(
            existing,
            status=decision,
            updated_at=epoch_ms(now or now_local()),
            decided_by=actor.actor_id,
        )
        self._approvals.save(decided)
        logger.info("%s %s %s by %s", employee_id, month, decision.value, actor.actor_id)
        return decided
