from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class GrossInput:
    monthly_salary: float
    total_days: int
    present_days: int
    half_days: int
    applicable_holidays: int
    sundays_in_month: int
    sunday_worked_count: int
    ot_minutes: int
    ot_rate: float


@dataclass(frozen=True)
class GrossBreakdown:
    required_days: int
    adjusted_required_days: int
    full_working_days: int
    per_day_rate: float
    present_pay: float
    half_day_pay: float
    holiday_pay: float
    effective_sunday_off: int
    sunday_pay: float
    ot_amount: float
    total_gross_earnings: float

    @property
    def base_earnings(self) -> float:
        return self.present_pay + self.half_day_pay + self.holiday_pay


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def full_working_days(self, *, total_days: int, present_days: int, applicable_holidays: int) -> int:
        raise NotImplementedError

    @abstractmethod
    def gross(self, data: GrossInput) -> GrossBreakdown:
        raise NotImplementedError
