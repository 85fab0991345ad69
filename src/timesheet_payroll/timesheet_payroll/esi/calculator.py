from __future__ import annotations

from ..common.numbers import round_half_up
from ..core.constants import ESI_RATE, ESI_SALARY_THRESHOLD, MONEY_PRECISION


class EsiCalculator:
    """Employee State Insurance: a flat share of gross for salaries up to a threshold."""

    def __init__(self, *, threshold: float = ESI_SALARY_THRESHOLD, rate: float = ESI_RATE):
        self.threshold = float(threshold)
        self.rate = float(rate)

    def is_eligible(self, *, esi_flag: bool, monthly_salary: float) -> bool:
        return bool(esi_flag) and float(monthly_salary) <= self.threshold

    def amount(self, *, gross: float, eligible: bool, included: bool) -> float:
        # Rate applies to gross rounded to the paisa.
        gross = round_half_up(gross, MONEY_PRECISION)
        if not (eligible and included) or gross <= 0:
            return 0.0
        return round_half_up(gross * self.rate, MONEY_PRECISION)
