from __future__ import annotations

from ...core.constants import REQUIRED_DAYS_DEFAULT, REQUIRED_DAYS_LONG_MONTH
from .base import GrossBreakdown, GrossInput, PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: meeting the holiday-adjusted presence threshold pays the full month.

    Short of the threshold only present days are paid. Holidays, unworked
    Sundays, half days and overtime are paid on top.
    """

    def required_days(self, total_days: int) -> int:
        return REQUIRED_DAYS_LONG_MONTH if total_days == 31 else REQUIRED_DAYS_DEFAULT

    def full_working_days(self, *, total_days: int, present_days: int, applicable_holidays: int) -> int:
        adjusted = self.required_days(total_days) - applicable_holidays
        return total_days if present_days >= adjusted else present_days

    def gross(self, data: GrossInput) -> GrossBreakdown:
        required = self.required_days(data.total_days)
        adjusted = required - data.applicable_holidays
        full_days = self.full_working_days(
            total_days=data.total_days,
            present_days=data.present_days,
            applicable_holidays=data.applicable_holidays,
        )

        per_day = data.monthly_salary / data.total_days if data.total_days else 0.0
        present_pay = full_days * per_day
        half_day_pay = data.half_days * (per_day / 2)
        holiday_pay = data.applicable_holidays * per_day
        sunday_off = max(0, data.sundays_in_month - data.sunday_worked_count)
        sunday_pay = sunday_off * per_day
        ot_amount = (data.ot_minutes / 60) * data.ot_rate

        return GrossBreakdown(
            required_days=required,
            adjusted_required_days=adjusted,
            full_working_days=full_days,
            per_day_rate=per_day,
            present_pay=present_pay,
            half_day_pay=half_day_pay,
            holiday_pay=holiday_pay,
            effective_sunday_off=sunday_off,
            sunday_pay=sunday_pay,
            ot_amount=ot_amount,
            total_gross_earnings=present_pay + half_day_pay + holiday_pay + sunday_pay + ot_amount,
        )
