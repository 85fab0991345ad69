from __future__ import annotations

from datetime import datetime

import pytest

from src.timesheet_payroll.timesheet_payroll.common.datetime_utils import iter_month_days
from src.timesheet_payroll.timesheet_payroll.core.enums import ApprovalStatus, DayStatus
from src.timesheet_payroll.timesheet_payroll.core.exceptions import (
    AuthorizationError,
    IncompleteMarkingError,
    ValidationError,
)
from tests.fakes import make_record

MONTH = "2024-06"


def mark_days(repos, count: int) -> None:
    for day in list(iter_month_days(2024, 6))[:count]:
        repos.attendance.upsert(
            make_record("E001", day, DayStatus.PRESENT, check_in="10:00 AM", check_out="6:30 PM", ot_hrs=1.0)
        )


@pytest.fixture
def ready(container, repos, hr, fixed_now):
    mark_days(repos, 26)
    container.timesheet_service.super_save(actor=hr, employee_id="E001", month=MONTH, now=fixed_now)
    return container


def test_submission_is_rejected_with_25_marked_days(container, repos, hr, fixed_now):
    mark_days(repos, 25)

    with pytest.raises(IncompleteMarkingError) as exc:
        container.approval_workflow.submit(actor=hr, employee_id="E001", month=MONTH, now=fixed_now)

    assert exc.value.shortfall == 1
    assert container.approval_workflow.get("E001", MONTH) is None


def test_submission_needs_a_super_save_even_when_enough_days_are_marked(container, repos, hr, fixed_now):
    mark_days(repos, 26)

    with pytest.raises(ValidationError) as exc:
        container.approval_workflow.submit(actor=hr, employee_id="E001", month=MONTH, now=fixed_now)

    assert not isinstance(exc.value, IncompleteMarkingError)


def test_submission_at_26_days_creates_a_pending_snapshot(ready, hr, fixed_now):
    approval = ready.approval_workflow.submit(actor=hr, employee_id="E001", month=MONTH, now=fixed_now)

    assert approval.status == ApprovalStatus.PENDING
    assert approval.submitted_by == "hr-1"
    snap = approval.snapshot
    assert snap.marked_days == 26
    assert snap.total_days == 30
    assert snap.department == "Staff"
    assert snap.ot_hours == 22.0
    assert snap.pending_hours == 0.0
    assert snap.net_ot_hours == 22.0
    assert ready.approval_workflow.list_month(MONTH) == [approval]


def test_pending_month_cannot_be_sent_again(ready, repos, hr, fixed_now):
    first = ready.approval_workflow.submit(actor=hr, employee_id="E001", month=MONTH, now=fixed_now)
    mark_days(repos, 27)

    with pytest.raises(AuthorizationError):
        ready.approval_workflow.submit(
            actor=hr,
            employee_id="E001",
            month=MONTH,
            now=datetime(2024, 6, 4, 10, 0, 0),
        )

    stored = ready.approval_workflow.get("E001", MONTH)
    assert stored == first
    assert stored.snapshot.marked_days == 26


def test_only_hr_submits(ready, admin, fixed_now):
    with pytest.raises(AuthorizationError):
        ready.approval_workflow.submit(actor=admin, employee_id="E001", month=MONTH, now=fixed_now)


def test_decision_needs_a_pending_record(ready, admin, fixed_now):
    with pytest.raises(ValidationError):
        ready.approval_workflow.decide(
            actor=admin,
            employee_id="E001",
            month=MONTH,
            status=ApprovalStatus.ACCEPTED,
            now=fixed_now,
        )


def test_only_admin_decides(ready, hr, fixed_now):
    ready.approval_workflow.submit(actor=hr, employee_id="E001", month=MONTH, now=fixed_now)
    with pytest.raises(AuthorizationError):
        ready.approval_workflow.decide(actor=hr, employee_id="E001", month=MONTH, status="accepted", now=fixed_now)


def test_decision_must_be_accept_or_decline(ready, hr, admin, fixed_now):
    ready.approval_workflow.submit(actor=hr, employee_id="E001", month=MONTH, now=fixed_now)
    with pytest.raises(ValidationError):
        ready.approval_workflow.decide(actor=admin, employee_id="E001", month=MONTH, status="pending", now=fixed_now)


@pytest.mark.parametrize("decision", [ApprovalStatus.ACCEPTED, ApprovalStatus.DECLINED])
def test_decisions_are_terminal(ready, hr, admin, fixed_now, decision):
    submitted = ready.approval_workflow.submit(actor=hr, employee_id="E001", month=MONTH, now=fixed_now)

    decided = ready.approval_workflow.decide(
        actor=admin,
        employee_id="E001",
        month=MONTH,
        status=decision.value,
        now=datetime(2024, 6, 5, 10, 0, 0),
    )

    assert decided.status == decision
    assert decided.snapshot == submitted.snapshot
    assert decided.created_at == submitted.created_at
    assert decided.decided_by == "admin-1"

    with pytest.raises(AuthorizationError):
        ready.approval_workflow.submit(actor=hr, employee_id="E001", month=MONTH, now=fixed_now)
    with pytest.raises(ValidationError):
        ready.approval_workflow.decide(actor=admin, employee_id="E001", month=MONTH, status="accepted", now=fixed_now)
