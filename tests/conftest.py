from __future__ import annotations

from datetime import datetime

import pytest

from src.timesheet_payroll.timesheet_payroll.container import Container, assemble_container
from src.timesheet_payroll.timesheet_payroll.core.actor import Actor
from src.timesheet_payroll.timesheet_payroll.core.enums import Role
from tests.fakes import (
    InMemoryApprovals,
    InMemoryAttendance,
    InMemoryCredits,
    InMemoryEmployees,
    InMemoryEsi,
    InMemoryHolidays,
    InMemoryTimesheets,
    Repos,
    make_employee,
)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 6, 3, 9, 15, 0)


@pytest.fixture
def hr() -> Actor:
    return Actor(role=Role.HR, actor_id="hr-1", name="HR One")


@pytest.fixture
def admin() -> Actor:
    return Actor(role=Role.ADMIN, actor_id="admin-1", name="Admin One")


@pytest.fixture
def employee_actor() -> Actor:
    return Actor(role=Role.EMPLOYEE, actor_id="E001", name="Employee E001")


@pytest.fixture
def repos() -> Repos:
    return Repos(
        employees=InMemoryEmployees(make_employee("E001")),
        attendance=InMemoryAttendance(),
        holidays=InMemoryHolidays(),
        timesheets=InMemoryTimesheets(),
        approvals=InMemoryApprovals(),
        esi=InMemoryEsi(),
        credits=InMemoryCredits(),
    )


@pytest.fixture
def container(repos: Repos) -> Container:
    return assemble_container(
        employees_repo=repos.employees,
        attendance_repo=repos.attendance,
        holidays_repo=repos.holidays,
        timesheets_repo=repos.timesheets,
        approvals_repo=repos.approvals,
        esi_repo=repos.esi,
        credits_repo=repos.credits,
    )
