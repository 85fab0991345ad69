import pytest

from src.timesheet_payroll.timesheet_payroll.attendance.factory import WorkHoursStrategyFactory
from src.timesheet_payroll.timesheet_payroll.attendance.strategies.off_day_strategy import OffDayStrategy
from src.timesheet_payroll.timesheet_payroll.attendance.strategies.punched_strategy import PunchedDayStrategy
from src.timesheet_payroll.timesheet_payroll.core.enums import DayStatus


@pytest.mark.parametrize("status", [DayStatus.LEAVE, DayStatus.HOLIDAY, DayStatus.WEEK_OFF])
def test_factory_off_days_use_off_day_strategy(status):
    assert isinstance(WorkHoursStrategyFactory().for_status(status), OffDayStrategy)


@pytest.mark.parametrize("status", [DayStatus.PRESENT, DayStatus.HALF_DAY, DayStatus.ABSENT])
def test_factory_punched_days_use_punched_strategy(status):
    assert isinstance(WorkHoursStrategyFactory().for_status(status), PunchedDayStrategy)
