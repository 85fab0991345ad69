from datetime import date

from src.timesheet_payroll.timesheet_payroll.core.enums import DayStatus, ShiftType
from src.timesheet_payroll.timesheet_payroll.timesheet.aggregator import MonthlyAggregator
from tests.fakes import make_record

FULL_DAY = dict(check_in="10:00 AM", lunch_in="1:00 PM", lunch_out="1:30 PM", check_out="6:30 PM")


def aggregate(records, employee_id="E001"):
    return MonthlyAggregator().aggregate(employee_id=employee_id, year=2024, month=6, records=records)


def test_empty_month_defaults_sundays_to_holiday_and_other_days_to_absent():
    sheet = aggregate([])

    assert sheet.month == "2024-06"
    assert sheet.total_days == 30
    assert sheet.marked_days_count == 0
    assert sheet.holiday_days == 5
    assert sheet.absent_days == 25
    assert sheet.total_pending_hrs == 25 * 8.5
    assert sheet.marked_pending_hrs == 0.0
    assert sheet.unmarked_sundays == (
        date(2024, 6, 2),
        date(2024, 6, 9),
        date(2024, 6, 16),
        date(2024, 6, 23),
        date(2024, 6, 30),
    )


def test_latest_write_wins_for_the_same_day():
    day = date(2024, 6, 3)
    older = make_record("E001", day, DayStatus.ABSENT, updated_at=1)
    newer = make_record("E001", day, DayStatus.PRESENT, updated_at=2, **FULL_DAY)

    sheet = aggregate([newer, older])

    assert sheet.days[2].status == DayStatus.PRESENT
    assert sheet.present_days == 1
    assert sheet.marked_days_count == 1


def test_first_record_wins_on_equal_timestamps():
    day = date(2024, 6, 3)
    first = make_record("E001", day, DayStatus.HALF_DAY, updated_at=5)
    second = make_record("E001", day, DayStatus.LEAVE, updated_at=5)

    sheet = aggregate([first, second])

    assert sheet.days[2].status == DayStatus.HALF_DAY
    assert sheet.leave_days == 0


def test_leave_counts_as_absent_and_leave():
    sheet = aggregate([make_record("E001", date(2024, 6, 4), DayStatus.LEAVE)])
    assert sheet.leave_days == 1
    # 24 defaulted weekdays + the leave day
    assert sheet.absent_days == 25


def test_sunday_presence_is_counted_separately():
    sunday = make_record("E001", date(2024, 6, 2), DayStatus.PRESENT, check_in="9:00 AM", check_out="1:00 PM")

    sheet = aggregate([sunday])

    assert sheet.present_days == 1
    assert sheet.sunday_present_count == 1
    assert sheet.sunday_work_hours == 4.0
    assert date(2024, 6, 2) not in sheet.unmarked_sundays


def test_full_day_requires_no_pending_hours():
    records = [
        make_record("E001", date(2024, 6, 3), DayStatus.PRESENT, **FULL_DAY),
        make_record("E001", date(2024, 6, 4), DayStatus.PRESENT, check_in="10:00 AM", check_out="5:00 PM"),
    ]

    sheet = aggregate(records)

    assert sheet.full_days_count == 1
    assert sheet.marked_pending_hrs == 1.5


def test_hours_come_from_punches_and_ot_from_the_record():
    stale = make_record(
        "E001",
        date(2024, 6, 3),
        DayStatus.PRESENT,
        work_hrs=99.0,
        pending_hrs=99.0,
        ot_hrs=2.0,
        **FULL_DAY,
    )

    day = aggregate([stale]).days[2]

    assert day.work_hrs == 8.5
    assert day.pending_hrs == 0.0
    assert day.ot_hrs == 2.0


def test_other_employees_and_months_are_ignored():
    records = [
        make_record("E002", date(2024, 6, 3), DayStatus.PRESENT, **FULL_DAY),
        make_record("E001", date(2024, 7, 1), DayStatus.PRESENT, **FULL_DAY),
    ]
    assert aggregate(records).marked_days_count == 0


def test_night_shift_record_keeps_its_shift():
    night = make_record(
        "E001",
        date(2024, 6, 5),
        DayStatus.PRESENT,
        shift_type=ShiftType.NIGHT,
        check_in="4:00 PM",
        check_out="12:30 AM",
    )
    day = aggregate([night]).days[4]
    assert day.shift_type == ShiftType.NIGHT
    assert day.work_hrs == 8.5
