from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import OFF_DAY_STATUSES, DayStatus
from .strategies.base import WorkHoursStrategy
from .strategies.off_day_strategy import OffDayStrategy
from .strategies.punched_strategy import PunchedDayStrategy


@dataclass
class WorkHoursStrategyFactory:
    """Factory Pattern: choose the hours strategy for a day's status."""

    def for_status(self, status: DayStatus) -> WorkHoursStrategy:
        if status in OFF_DAY_STATUSES:
            return OffDayStrategy()
        return PunchedDayStrategy()
