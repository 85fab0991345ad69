import io
from datetime import date

import pandas as pd

from src.timesheet_payroll.timesheet_payroll.core.enums import DayStatus
from src.timesheet_payroll.timesheet_payroll.reports.export import (
    DAILY_COLUMNS,
    TIMESHEET_COLUMNS,
    daily_attendance_frame,
    esi_register_frame,
    timesheet_frame,
    to_csv_bytes,
    to_xlsx_bytes,
)
from src.timesheet_payroll.timesheet_payroll.esi.model import EsiEntry
from src.timesheet_payroll.timesheet_payroll.shifts.calendar import ShiftCalendar
from src.timesheet_payroll.timesheet_payroll.timesheet.aggregator import MonthlyAggregator
from tests.fakes import make_record

RECORD = make_record(
    "E001",
    date(2024, 6, 3),
    DayStatus.PRESENT,
    check_in="10:00 AM",
    lunch_in="1:00 PM",
    lunch_out="1:45 PM",
    check_out="6:30 PM",
    work_hrs=8.25,
    pending_hrs=0.25,
    actual_work_hrs=8.25,
    employee_name="Asha",
)


def test_daily_frame_uses_literal_columns_and_hh_mm():
    frame = daily_attendance_frame([RECORD])

    assert list(frame.columns) == DAILY_COLUMNS
    row = frame.iloc[0]
    assert row["Shift"] == "Day"
    assert row["Work Hrs"] == "8:15"
    assert row["Pending Hrs"] == "0:15"


def test_timesheet_frame_has_a_row_per_day():
    sheet = MonthlyAggregator().aggregate(employee_id="E001", year=2024, month=6, records=[RECORD])

    frame = timesheet_frame(sheet, employee_name="Asha", shifts=ShiftCalendar())

    assert list(frame.columns) == TIMESHEET_COLUMNS
    assert len(frame) == 30
    row = frame.iloc[2]
    assert row["MonthYear"] == "Jun-2024"
    assert row["WeekDay"] == "Monday"
    assert row["TimeIN"] == 10.0
    assert row["LTimeout"] == 13.75
    assert row["BHrs"] == 0.5
    assert row["ABHrs"] == 0.75
    assert row["WorkHrs"] == 8.25


def test_csv_has_bom():
    payload = to_csv_bytes(daily_attendance_frame([RECORD]))
    assert payload.startswith(b"\xef\xbb\xbf")
    assert b"Check In" in payload


def test_xlsx_round_trips_through_pandas():
    entry = EsiEntry(
        employee_id="E001",
        month="2024-06",
        employee_name="Asha",
        eligible=True,
        esi_included=True,
        monthly_salary=20000,
        total_gross_earnings=20000,
        esi_amount=150.0,
    )

    payload = to_xlsx_bytes({"ESI 2024-06": esi_register_frame([entry])})

    back = pd.read_excel(io.BytesIO(payload), sheet_name="ESI 2024-06")
    assert back.loc[0, "ESI Amount"] == 150.0
    assert back.loc[0, "Payment Status"] == "Pending"
