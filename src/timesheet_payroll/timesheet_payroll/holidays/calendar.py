from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional

from ..common.datetime_utils import days_in_month
from .model import Holiday
from .repository import HolidayRepository


class HolidayCalendar:
    """Answers "which holidays apply to this department in this month"."""

    def __init__(self, holidays: HolidayRepository):
        self._holidays = holidays

    def for_month(self, year: int, month: int) -> list[Holiday]:
        seen: dict[date, Holiday] = {}
        for h in self._holidays.list_for_month(year, month):
            if h.holiday_date.month != month:
                continue
            if h.holiday_date.year != year:
                if not h.is_recurring or h.holiday_date.day > days_in_month(year, month):
                    continue
                h = replace(h, holiday_date=h.holiday_date.replace(year=year))
            # A dated entry beats a recurring one on the same day.
            if h.holiday_date not in seen or not h.is_recurring:
                seen[h.holiday_date] = h
        return sorted(seen.values(), key=lambda x: x.holiday_date)

    def applicable(self, year: int, month: int, department: str) -> list[Holiday]:
        return [h for h in self.for_month(year, month) if h.applies_to(department)]

    def applicable_count(self, year: int, month: int, department: str) -> int:
        return len(self.applicable(year, month, department))

    def holiday_on(self, day: date, department: str) -> Optional[Holiday]:
        for h in self.applicable(day.year, day.month, department):
            if h.holiday_date == day:
                return h
        return None
