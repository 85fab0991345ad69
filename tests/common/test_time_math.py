import pytest

from src.timesheet_payroll.timesheet_payroll.common.numbers import round_half_up, to_float
from src.timesheet_payroll.timesheet_payroll.common.time_math import (
    clock_to_decimal,
    format_duration,
    format_hours_hm,
    parse_clock,
    to_clock,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("10:00 AM", 10.0),
        ("12:00 AM", 0.0),
        ("12:30 PM", 12.5),
        ("6:30 pm", 18.5),
        (" 9:15 Am ", 9.25),
    ],
)
def test_parse_clock_accepts_twelve_hour_times(text, expected):
    assert parse_clock(text) == pytest.approx(expected)


@pytest.mark.parametrize("text", [None, "", "10:00", "13:00 PM", "0:30 AM", "9:60 AM", "nine AM", "10:00 XM"])
def test_parse_clock_rejects_malformed_input(text):
    assert parse_clock(text) is None


def test_format_duration():
    assert format_duration(8.5) == "8:30"
    assert format_duration(0) == "0:00"
    assert format_duration(1.9999) == "2:00"
    assert format_duration(-0.25) == "-0:15"


def test_format_duration_drops_sign_when_it_rounds_to_zero():
    assert format_duration(-0.001) == "0:00"


def test_format_hours_hm():
    assert format_hours_hm(1.5) == "1h 30m"
    assert format_hours_hm(0) == "0h 0m"


def test_to_clock_round_trips_and_wraps():
    assert to_clock(13.5) == "1:30 PM"
    assert to_clock(0) == "12:00 AM"
    assert to_clock(24.5) == "12:30 AM"
    assert parse_clock(to_clock(9.25)) == pytest.approx(9.25)


def test_clock_to_decimal():
    assert clock_to_decimal("1:20 PM") == 13.33
    assert clock_to_decimal("") == 0.0


def test_round_half_up_is_not_bankers_rounding():
    assert round_half_up(0.125, 2) == 0.13
    assert round_half_up(2.675, 2) == 2.68
    assert round_half_up(7500.5, 0) == 7501.0


def test_to_float_defaults():
    assert to_float(None) == 0.0
    assert to_float("", default=3.0) == 3.0
    assert to_float("x", default=-1.0) == -1.0
    assert to_float("2.5") == 2.5
