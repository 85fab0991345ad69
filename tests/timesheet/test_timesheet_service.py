from __future__ import annotations

from datetime import date

import pytest

from src.timesheet_payroll.timesheet_payroll.common.datetime_utils import iter_month_days
from src.timesheet_payroll.timesheet_payroll.core.enums import DayStatus
from src.timesheet_payroll.timesheet_payroll.core.exceptions import (
    AuthorizationError,
    IncompleteMarkingError,
    ValidationError,
)
from tests.fakes import make_record


def mark_weekdays(repos, employee_id="E001", *, extra_sundays=()):
    for day in iter_month_days(2024, 6):
        if day.weekday() != 6 or day in extra_sundays:
            repos.attendance.upsert(
                make_record(employee_id, day, DayStatus.PRESENT, check_in="9:00 AM", check_out="6:30 PM", ot_hrs=0.5)
            )


def test_super_save_rejects_an_incomplete_month(container, repos, hr, fixed_now):
    mark_weekdays(repos)

    with pytest.raises(IncompleteMarkingError) as exc:
        container.timesheet_service.super_save(actor=hr, employee_id="E001", month="2024-06", now=fixed_now)

    assert exc.value.shortfall == 1
    assert str(exc.value) == "You need to mark at least 26 days. Currently marked: 25 days."
    assert repos.timesheets.get_supersave("E001", "2024-06") is None


def test_super_save_stores_totals_and_warns_about_unmarked_sundays(container, repos, hr, fixed_now):
    mark_weekdays(repos, extra_sundays=(date(2024, 6, 2),))

    result = container.timesheet_service.super_save(actor=hr, employee_id="E001", month="2024-06", now=fixed_now)

    record = repos.timesheets.get_supersave("E001", "2024-06")
    assert record == result.record
    assert record.marked_days == 26
    assert record.total_days == 30
    assert record.total_ot == 13.0
    assert record.total_pending == 0.0
    assert record.employee_name == "Employee E001"
    assert result.warnings == ["Unmarked Sundays: 2024-06-09, 2024-06-16, 2024-06-23, 2024-06-30"]


def test_super_save_needs_hr_or_admin(container, repos, employee_actor, fixed_now):
    mark_weekdays(repos, extra_sundays=(date(2024, 6, 2),))
    with pytest.raises(AuthorizationError):
        container.timesheet_service.super_save(actor=employee_actor, employee_id="E001", month="2024-06", now=fixed_now)


def test_build_month_rejects_bad_month_key(container):
    with pytest.raises(ValidationError):
        container.timesheet_service.build_month("E001", "June 2024")


def test_refresh_summary(container, repos, fixed_now):
    mark_weekdays(repos)

    summary = container.timesheet_service.refresh_summary("E001", "2024-06", now=fixed_now)

    assert summary.marked_days_count == 25
    assert summary.full_working_days == 25
    assert repos.timesheets.get_summary("E001", "2024-06") == summary
