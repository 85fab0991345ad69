from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .approvals.mysql_approval_repository import MySQLApprovalRepository
from .approvals.repository import ApprovalRepository
from .approvals.service import ApprovalWorkflow
from .attendance.calculator import DailyWorkCalculator
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core import constants
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .esi.calculator import EsiCalculator
from .esi.mysql_esi_repository import MySQLEsiRepository
from .esi.repository import EsiRepository
from .esi.service import EsiService
from .holidays.calendar import HolidayCalendar
from .holidays.mysql_holiday_repository import MySQLHolidayRepository
from .holidays.repository import HolidayRepository
from .payroll.mysql_payroll_repository import MySQLPayrollCreditRepository
from .payroll.payslip import PayslipCalculator
from .payroll.repository import PayrollCreditRepository
from .payroll.service import GrossEarningsService, PayrollService
from .timesheet.aggregator import MonthlyAggregator
from .timesheet.mysql_timesheet_repository import MySQLTimesheetRepository
from .timesheet.repository import TimesheetRepository
from .timesheet.service import TimesheetService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    holidays_repo: HolidayRepository
    timesheets_repo: TimesheetRepository
    approvals_repo: ApprovalRepository
    esi_repo: EsiRepository
    credits_repo: PayrollCreditRepository

    daily_calculator: DailyWorkCalculator
    holiday_calendar: HolidayCalendar
    employee_service: EmployeeService
    timesheet_service: TimesheetService
    attendance_service: AttendanceService
    gross_service: GrossEarningsService
    esi_service: EsiService
    payroll_service: PayrollService
    approval_workflow: ApprovalWorkflow


def _setting(settings: Any, name: str):
    return getattr(settings, name, getattr(constants, name))


def assemble_container(
    *,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    holidays_repo: HolidayRepository,
    timesheets_repo: TimesheetRepository,
    approvals_repo: ApprovalRepository,
    esi_repo: EsiRepository,
    credits_repo: PayrollCreditRepository,
    settings: Any = None,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services over the given repositories; settings override the payroll constants."""
    min_marked_days = int(_setting(settings, "MIN_MARKED_DAYS"))
    esi_calculator = EsiCalculator(
        threshold=float(_setting(settings, "ESI_SALARY_THRESHOLD")),
        rate=float(_setting(settings, "ESI_RATE")),
    )

    daily_calculator = DailyWorkCalculator()
    holiday_calendar = HolidayCalendar(holidays_repo)
    employee_service = EmployeeService(employees_repo)
    timesheet_service = TimesheetService(
        attendance_repo,
        timesheets_repo,
        employees_repo,
        aggregator=MonthlyAggregator(daily_calculator),
        min_marked_days=min_marked_days,
    )
    attendance_service = AttendanceService(
        attendance_repo,
        employees_repo,
        holiday_calendar,
        calculator=daily_calculator,
        timesheets=timesheet_service,
    )
    gross_service = GrossEarningsService(
        timesheet_service,
        holiday_calendar,
        default_ot_rate=float(_setting(settings, "DEFAULT_OT_RATE")),
    )
    esi_service = EsiService(esi_repo, employees_repo, gross_service, credits_repo, calculator=esi_calculator)
    payroll_service = PayrollService(
        employees_repo,
        gross_service,
        esi_repo,
        approvals_repo,
        credits_repo,
        esi=esi_calculator,
        payslips=PayslipCalculator(pf_rate=float(_setting(settings, "PF_RATE"))),
    )
    approval_workflow = ApprovalWorkflow(
        approvals_repo,
        timesheet_service,
        employees_repo,
        gross_service,
        min_marked_days=min_marked_days,
    )

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        holidays_repo=holidays_repo,
        timesheets_repo=timesheets_repo,
        approvals_repo=approvals_repo,
        esi_repo=esi_repo,
        credits_repo=credits_repo,
        daily_calculator=daily_calculator,
        holiday_calendar=holiday_calendar,
        employee_service=employee_service,
        timesheet_service=timesheet_service,
        attendance_service=attendance_service,
        gross_service=gross_service,
        esi_service=esi_service,
        payroll_service=payroll_service,
        approval_workflow=approval_workflow,
    )


def build_container(*, db_config: dict, settings: Any = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_settings(db_config))
    return assemble_container(
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        holidays_repo=MySQLHolidayRepository(conn),
        timesheets_repo=MySQLTimesheetRepository(conn),
        approvals_repo=MySQLApprovalRepository(conn),
        esi_repo=MySQLEsiRepository(conn),
        credits_repo=MySQLPayrollCreditRepository(conn),
        settings=settings,
        conn=conn,
    )
