from __future__ import annotations

import pytest

from src.timesheet_payroll.timesheet_payroll.core.enums import ChangeType
from src.timesheet_payroll.timesheet_payroll.core.exceptions import AuthorizationError, ValidationError
from src.timesheet_payroll.timesheet_payroll.employees.model import EmployeeUpdate


def test_admin_salary_change_appends_a_revision(container, repos, admin, fixed_now):
    result = container.employee_service.update_employee(
        actor=admin,
        employee_id="E001",
        update=EmployeeUpdate(monthly_salary=25000),
        now=fixed_now,
    )

    assert result.employee.salary.basic == 12500
    revision = result.revision
    assert revision.reason == "Salary revision"
    assert revision.previous_salary == 20000
    assert revision.new_salary == 25000
    assert revision.increment_percentage == 25.0
    assert revision.changed_by == "admin-1"
    assert {c.field for c in revision.changes} == {"monthly_salary", "basic", "hra", "other_allowance"}
    assert container.employee_service.list_revisions("E001") == [revision]


def test_no_monitored_change_appends_no_revision(container, repos, admin, fixed_now):
    result = container.employee_service.update_employee(
        actor=admin,
        employee_id="E001",
        update=EmployeeUpdate(phone="+91 98765 43210"),
        now=fixed_now,
    )

    assert result.revision is None
    assert result.employee.phone == "+91 98765 43210"
    assert repos.employees.list_revisions("E001") == []


def test_resaving_the_same_salary_is_a_no_op(container, repos, admin, fixed_now):
    result = container.employee_service.update_employee(
        actor=admin,
        employee_id="E001",
        update=EmployeeUpdate(monthly_salary=20000, include_esi=False),
        now=fixed_now,
    )

    assert result.revision is None
    assert repos.employees.saves == 0
    assert repos.employees.list_revisions("E001") == []


def test_flag_toggle_is_recorded_without_magnitude(container, admin, fixed_now):
    result = container.employee_service.update_employee(
        actor=admin,
        employee_id="E001",
        update=EmployeeUpdate(include_pf=True),
        reason="Joined PF",
        now=fixed_now,
    )

    (change,) = result.revision.changes
    assert change.field == "include_pf"
    assert change.change_type == ChangeType.TOGGLE
    assert change.change_amount is None
    assert result.revision.reason == "Joined PF"
    assert result.revision.increment_percentage == 0.0


def test_hr_may_edit_details_but_not_salary(container, hr, fixed_now):
    ok = container.employee_service.update_employee(
        actor=hr,
        employee_id="E001",
        update=EmployeeUpdate(department="Worker"),
        now=fixed_now,
    )
    assert ok.employee.department == "Worker"

    with pytest.raises(AuthorizationError):
        container.employee_service.update_employee(
            actor=hr,
            employee_id="E001",
            update=EmployeeUpdate(monthly_salary=30000),
            now=fixed_now,
        )


def test_employees_cannot_edit(container, employee_actor, fixed_now):
    with pytest.raises(AuthorizationError):
        container.employee_service.update_employee(
            actor=employee_actor,
            employee_id="E001",
            update=EmployeeUpdate(phone="1"),
            now=fixed_now,
        )


@pytest.mark.parametrize(
    "update",
    [
        EmployeeUpdate(ot_rate=-5),
        EmployeeUpdate(monthly_salary=-1),
        EmployeeUpdate(name="   "),
        EmployeeUpdate(status="retired"),
    ],
)
def test_invalid_updates_are_rejected(container, admin, fixed_now, update):
    with pytest.raises(ValidationError):
        container.employee_service.update_employee(actor=admin, employee_id="E001", update=update, now=fixed_now)


def test_unknown_employee(container, admin, fixed_now):
    with pytest.raises(ValidationError):
        container.employee_service.update_employee(
            actor=admin,
            employee_id="NOPE",
            update=EmployeeUpdate(phone="1"),
            now=fixed_now,
        )
