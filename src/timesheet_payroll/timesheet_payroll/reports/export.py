"""Spreadsheet projections of attendance, ESI and payroll data.

One-way exports: column names are what downstream spreadsheets key on, so
they are kept literal.
"""

from __future__ import annotations

import io
from typing import Iterable, Mapping, Sequence

import pandas as pd

from ..attendance.model import DailyAttendanceRecord
from ..common.numbers import round_half_up
from ..common.time_math import clock_to_decimal, format_duration
from ..esi.model import EsiEntry
from ..payroll.service import PayrollRow
from ..shifts.calendar import ShiftCalendar
from ..timesheet.model import MonthlyTimesheet

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

DAILY_COLUMNS = [
    "ID",
    "Name",
    "Shift",
    "Status",
    "Check In",
    "Lunch In",
    "Lunch Out",
    "Check Out",
    "Actual Hrs",
    "Work Hrs",
    "Pending Hrs",
]

TIMESHEET_COLUMNS = [
    "Name",
    "MonthYear",
    "Date",
    "WeekDay",
    "AttType",
    "Shift",
    "TimeIN",
    "TimeOut",
    "ActualHrs",
    "LTimein",
    "LTimeout",
    "BHrs",
    "ABHrs",
    "WorkHrs",
    "Pending",
]


def daily_attendance_frame(records: Iterable[DailyAttendanceRecord]) -> pd.DataFrame:
    rows = [
        {
            "ID": r.employee_id,
            "Name": r.employee_name,
            "Shift": r.shift_type.value.title(),
            "Status": r.status.value,
            "Check In": r.check_in or "-",
            "Lunch In": r.lunch_in or "-",
            "Lunch Out": r.lunch_out or "-",
            "Check Out": r.check_out or "-",
            "Actual Hrs": format_duration(r.actual_work_hrs),
            "Work Hrs": format_duration(r.work_hrs),
            "Pending Hrs": format_duration(r.pending_hrs),
        }
        for r in records
    ]
    return pd.DataFrame(rows, columns=DAILY_COLUMNS)


def timesheet_frame(sheet: MonthlyTimesheet, *, employee_name: str, shifts: ShiftCalendar) -> pd.DataFrame:
    """One row per calendar day; times as decimal hours for spreadsheet maths."""
    rows = []
    for day in sheet.days:
        shift = shifts.get(day.shift_type)
        lunch_taken = 0.0
        if day.lunch_in and day.lunch_out:
            lunch_taken = max(0.0, clock_to_decimal(day.lunch_out) - clock_to_decimal(day.lunch_in))
        rows.append(
            {
                "Name": employee_name,
                "MonthYear": day.work_date.strftime("%b-%Y"),
                "Date": day.work_date.isoformat(),
                "WeekDay": day.work_date.strftime("%A"),
                "AttType": day.status.value,
                "Shift": shift.name,
                "TimeIN": clock_to_decimal(day.check_in),
                "TimeOut": clock_to_decimal(day.check_out),
                "ActualHrs": round_half_up(day.actual_work_hrs, 2),
                "LTimein": clock_to_decimal(day.lunch_in),
                "LTimeout": clock_to_decimal(day.lunch_out),
                "BHrs": round_half_up(shift.allotted_lunch, 2),
                "ABHrs": round_half_up(lunch_taken, 2),
                "WorkHrs": round_half_up(day.work_hrs, 2),
                "Pending": round_half_up(day.pending_hrs, 2),
            }
        )
    return pd.DataFrame(rows, columns=TIMESHEET_COLUMNS)


def esi_register_frame(entries: Sequence[EsiEntry]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "Employee ID": e.employee_id,
                "Name": e.employee_name,
                "Monthly Salary": e.monthly_salary,
                "Eligible": "Yes" if e.eligible else "No",
                "ESI Included": "Yes" if e.esi_included else "No",
                "Total Gross Earnings": e.total_gross_earnings,
                "ESI Amount": e.esi_amount,
                "Payment Status": e.payment_status.value,
                "Salary Credited": "Yes" if e.salary_credited else "No",
            }
            for e in entries
        ]
    )


def payroll_frame(rows: Sequence[PayrollRow]) -> pd.DataFrame:
    records = []
    for row in rows:
        g, p = row.gross, row.payslip
        records.append(
            {
                "Employee ID": g.employee.employee_id,
                "Name": g.employee.name,
                "Department": g.employee.department,
                "Monthly Salary": g.monthly_salary,
                "Total Days": g.sheet.total_days,
                "Present Days": g.tally.present_days,
                "Full Working Days": g.breakdown.full_working_days,
                "Half Days": g.tally.half_days,
                "Holidays": g.applicable_holidays,
                "OT Hours": g.tally.ot_hours,
                "Per Day": p.per_day_rate,
                "PD Pay": p.present_pay,
                "HD Pay": p.half_day_pay,
                "Holiday Pay": p.holiday_pay,
                "Sunday Pay": p.sunday_pay,
                "OT Amount": p.ot_amount,
                "Basic": p.basic,
                "HRA": p.hra,
                "Conveyance": p.conveyance,
                "Other Allowance": p.other_allowance,
                "Special Allowance": p.special_allowance,
                "Additional SP Allowance": p.additional_special_allowance,
                "Total Earnings": p.total_earnings,
                "PF": p.pf,
                "ESI": p.esi,
                "Loan Deduction": p.loan_deduction,
                "Leave Deduction": p.leave_deduction,
                "Total Deductions": p.total_deductions,
                "Net Payable": p.net_payable,
                "Approval": row.approval_status.value if row.approval_status else "not sent",
                "Salary Credited": "Yes" if row.salary_credited else "No",
            }
        )
    return pd.DataFrame(records)


def to_xlsx_bytes(sheets: Mapping[str, pd.DataFrame]) -> bytes:
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        for name, frame in sheets.items():
            frame.to_excel(writer, index=False, sheet_name=name[:31])
    return output.getvalue()


def to_csv_bytes(frame: pd.DataFrame) -> bytes:
    return frame.to_csv(index=False).encode("utf-8-sig")
