from __future__ import annotations

from datetime import date, datetime

import pytest

from src.timesheet_payroll.timesheet_payroll.core.constants import ABSENT_WITH_PUNCHES_NOTE
from src.timesheet_payroll.timesheet_payroll.core.enums import DayStatus, ShiftType
from src.timesheet_payroll.timesheet_payroll.core.exceptions import AuthorizationError, ValidationError
from src.timesheet_payroll.timesheet_payroll.holidays.model import Holiday
from tests.fakes import make_employee, make_record

MONDAY = date(2024, 6, 3)


def test_save_day_computes_hours_and_refreshes_summary(container, repos, hr, fixed_now):
    record = container.attendance_service.save_day(
        actor=hr,
        employee_id="E001",
        work_date=MONDAY,
        status="Present",
        check_in="10:00 AM",
        lunch_in="1:00 PM",
        lunch_out="1:30 PM",
        check_out="6:30 PM",
        ot_hrs=1.5,
        now=fixed_now,
    )

    assert record.shift_type == ShiftType.DAY
    assert record.work_hrs == 8.5
    assert record.pending_hrs == 0.0
    assert record.ot_hrs == 1.5
    assert record.employee_name == "Employee E001"
    assert repos.attendance.get("E001", MONDAY) == record

    summary = repos.timesheets.get_summary("E001", "2024-06")
    assert summary.marked_days_count == 1
    assert summary.full_working_days == 1


def test_only_hr_or_admin_can_mark(container, employee_actor, fixed_now):
    with pytest.raises(AuthorizationError):
        container.attendance_service.save_day(
            actor=employee_actor,
            employee_id="E001",
            work_date=MONDAY,
            status=DayStatus.PRESENT,
            now=fixed_now,
        )


def test_missing_punches_get_defaults(container, hr, fixed_now):
    record = container.attendance_service.save_day(
        actor=hr,
        employee_id="E001",
        work_date=MONDAY,
        status=DayStatus.PRESENT,
        now=fixed_now,
    )

    assert record.check_in == "9:15 AM"
    assert record.lunch_in == "1:00 PM"
    assert record.lunch_out == "1:30 PM"
    assert record.check_out == ""
    assert record.pending_hrs == 8.5


def test_resave_keeps_earlier_punches_and_created_at(container, hr, fixed_now):
    later = datetime(2024, 6, 3, 19, 0, 0)
    first = container.attendance_service.save_day(
        actor=hr,
        employee_id="E001",
        work_date=MONDAY,
        status=DayStatus.PRESENT,
        check_in="10:00 AM",
        now=fixed_now,
    )
    second = container.attendance_service.save_day(
        actor=hr,
        employee_id="E001",
        work_date=MONDAY,
        status=DayStatus.PRESENT,
        check_out="6:30 PM",
        now=later,
    )

    assert second.check_in == "10:00 AM"
    assert second.work_hrs == 8.5
    assert second.created_at == first.created_at
    assert second.updated_at > first.updated_at


def test_absent_with_both_punches_gets_note(container, hr, fixed_now):
    record = container.attendance_service.save_day(
        actor=hr,
        employee_id="E001",
        work_date=MONDAY,
        status=DayStatus.ABSENT,
        check_in="10:00 AM",
        check_out="11:00 AM",
        now=fixed_now,
    )
    assert record.notes == ABSENT_WITH_PUNCHES_NOTE


def test_holiday_takes_the_holiday_name_and_drops_punches(container, repos, hr, fixed_now):
    repos.holidays.holidays.append(Holiday(holiday_id=1, holiday_date=MONDAY, name="Founders Day"))

    record = container.attendance_service.save_day(
        actor=hr,
        employee_id="E001",
        work_date=MONDAY,
        status=DayStatus.HOLIDAY,
        check_in="10:00 AM",
        check_out="6:30 PM",
        ot_hrs=2,
        now=fixed_now,
    )

    assert record.notes == "Founders Day"
    assert record.check_in == ""
    assert record.work_hrs == 0.0
    assert record.pending_hrs == 0.0
    assert record.ot_hrs == 0.0


def test_holiday_without_calendar_entry_gets_default_note(container, hr, fixed_now):
    record = container.attendance_service.save_day(
        actor=hr,
        employee_id="E001",
        work_date=MONDAY,
        status=DayStatus.HOLIDAY,
        now=fixed_now,
    )
    assert record.notes == "Holiday"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"status": "Sick"},
        {"status": DayStatus.PRESENT, "check_in": "25:00"},
        {"status": DayStatus.PRESENT, "ot_hrs": -1},
        {"status": DayStatus.PRESENT, "shift_type": "evening"},
    ],
)
def test_invalid_input_is_rejected(container, hr, fixed_now, kwargs):
    with pytest.raises(ValidationError):
        container.attendance_service.save_day(actor=hr, employee_id="E001", work_date=MONDAY, now=fixed_now, **kwargs)


def test_unknown_employee_is_rejected(container, hr, fixed_now):
    with pytest.raises(ValidationError):
        container.attendance_service.save_day(
            actor=hr,
            employee_id="NOPE",
            work_date=MONDAY,
            status=DayStatus.PRESENT,
            now=fixed_now,
        )


def test_apply_holiday_marks_covered_employees_without_records(container, repos, hr, fixed_now):
    repos.employees.save(make_employee("E002", department="Worker"))
    repos.employees.save(make_employee("E003", department="Staff"))
    repos.holidays.holidays.append(
        Holiday(holiday_id=2, holiday_date=MONDAY, name="Staff Day", departments=("Staff",))
    )
    existing = make_record("E003", MONDAY, DayStatus.PRESENT, check_in="10:00 AM", check_out="6:30 PM")
    repos.attendance.upsert(existing)

    created = container.attendance_service.apply_holiday(actor=hr, work_date=MONDAY, now=fixed_now)

    assert [r.employee_id for r in created] == ["E001"]
    assert repos.attendance.get("E001", MONDAY).status == DayStatus.HOLIDAY
    assert repos.attendance.get("E002", MONDAY) is None
    assert repos.attendance.get("E003", MONDAY) == existing


def test_list_day(container, repos, hr, fixed_now):
    container.attendance_service.save_day(
        actor=hr,
        employee_id="E001",
        work_date=MONDAY,
        status=DayStatus.LEAVE,
        now=fixed_now,
    )
    assert [r.employee_id for r in container.attendance_service.list_day(MONDAY)] == ["E001"]
    assert container.attendance_service.list_day(date(2024, 6, 4)) == []
