from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from ..approvals.repository import ApprovalRepository
from ..common.datetime_utils import parse_month_key, sundays_in_month
from ..core.constants import DEFAULT_OT_RATE
from ..core.enums import ApprovalStatus
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..employees.salary import monthly_salary_of
from ..esi.calculator import EsiCalculator
from ..esi.repository import EsiRepository
from ..holidays.calendar import HolidayCalendar
from ..timesheet.model import MonthlyTimesheet
from ..timesheet.service import TimesheetService
from .calculator.base import GrossBreakdown, GrossInput, PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .payslip import Payslip, PayslipCalculator
from .repository import PayrollCreditRepository
from .tally import AttendanceTally, tally_month

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmployeeMonthGross:
    """Everything derived for one employee-month, computed in one place."""

    employee: Employee
    month: str
    monthly_salary: float
    sheet: MonthlyTimesheet
    tally: AttendanceTally
    applicable_holidays: int
    sundays_in_month: int
    ot_rate: float
    breakdown: GrossBreakdown


class GrossEarningsService:
    """Single source of gross earnings for the timesheet, approval and ESI views."""

    def __init__(
        self,
        timesheets: TimesheetService,
        holidays: HolidayCalendar,
        *,
        calculator: Optional[PayrollCalculator] = None,
        default_ot_rate: float = DEFAULT_OT_RATE,
    ):
        self._timesheets = timesheets
        self._holidays = holidays
        self._calculator = calculator or StandardPayrollCalculator()
        self._default_ot_rate = float(default_ot_rate)

    @property
    def calculator(self) -> PayrollCalculator:
        return self._calculator

    def compute(self, employee: Employee, month: str) -> EmployeeMonthGross:
        year, mon = parse_month_key(month)
        sheet = self._timesheets.build_month(employee.employee_id, month)
        tally = tally_month(sheet, department=employee.department)
        holidays = self._holidays.applicable_count(year, mon, employee.department)
        sundays = len(sundays_in_month(year, mon))
        salary = monthly_salary_of(employee)
        ot_rate = employee.ot_rate if employee.ot_rate else self._default_ot_rate

        breakdown = self._calculator.gross(
            GrossInput(
                monthly_salary=salary,
                total_days=sheet.total_days,
                present_days=tally.present_days,
                half_days=tally.half_days,
                applicable_holidays=holidays,
                sundays_in_month=sundays,
                sunday_worked_count=tally.sunday_worked_count,
                ot_minutes=tally.ot_minutes,
                ot_rate=ot_rate,
            )
        )
        return EmployeeMonthGross(
            employee=employee,
            month=sheet.month,
            monthly_salary=salary,
            sheet=sheet,
            tally=tally,
            applicable_holidays=holidays,
            sundays_in_month=sundays,
            ot_rate=ot_rate,
            breakdown=breakdown,
        )


@dataclass(frozen=True)
class PayrollRow:
    gross: EmployeeMonthGross
    payslip: Payslip
    esi_included: bool
    approval_status: Optional[ApprovalStatus]
    salary_credited: bool

    @property
    def employee(self) -> Employee:
        return self.gross.employee


class PayrollService:
    def __init__(
        self,
        employees: EmployeeRepository,
        gross: GrossEarningsService,
        esi_entries: EsiRepository,
        approvals: ApprovalRepository,
        credits: PayrollCreditRepository,
        *,
        esi: Optional[EsiCalculator] = None,
        payslips: Optional[PayslipCalculator] = None,
    ):
        self._employees = employees
        self._gross = gross
        self._esi_entries = esi_entries
        self._approvals = approvals
        self._credits = credits
        self._esi = esi or EsiCalculator()
        self._payslips = payslips or PayslipCalculator()

    def build_register(
        self,
        month: str,
        *,
        loan_deductions: Optional[Mapping[str, float]] = None,
        leave_days: Optional[Mapping[str, float]] = None,
    ) -> list[PayrollRow]:
        """One row per active employee.

        Leave days default to the marked Leave and Absent days of the month;
        ``leave_days`` overrides that count per employee.
        """
        parse_month_key(month)
        loan_deductions = loan_deductions or {}
        leave_days = leave_days or {}
        credited = self._credits.credited_ids(month)

        rows: list[PayrollRow] = []
        for employee in self._employees.list_active():
            g = self._gross.compute(employee, month)
            eligible = self._esi.is_eligible(esi_flag=employee.esi_enabled, monthly_salary=g.monthly_salary)
            saved = self._esi_entries.get(month, employee.employee_id)
            included = saved.esi_included if saved else eligible
            esi_amount = self._esi.amount(
                gross=g.breakdown.total_gross_earnings,
                eligible=eligible,
                included=included,
            )
            approval = self._approvals.get(employee.employee_id, month)
            leave = leave_days.get(employee.employee_id)
            if leave is None:
                leave = g.tally.leave_days
            rows.append(
                PayrollRow(
                    gross=g,
                    payslip=self._payslips.build(
                        employee=employee,
                        monthly_salary=g.monthly_salary,
                        breakdown=g.breakdown,
                        esi_amount=esi_amount,
                        loan_deduction=float(loan_deductions.get(employee.employee_id, 0) or 0),
                        leave_days=float(leave),
                    ),
                    esi_included=included,
                    approval_status=approval.status if approval else None,
                    salary_credited=employee.employee_id in credited,
                )
            )
        logger.debug("Payroll register for %s: %d row(s)", month, len(rows))
        return rows
