"""Salary structure rules.

Basic is 50% and HRA 25% of the monthly salary. Conveyance and special
allowance come out of the remaining 25%; whatever is left becomes "other
allowance". The additional special allowance sits outside that split.
"""

from __future__ import annotations

from ..common.numbers import round_half_up
from .model import Employee, SalaryStructure

BASIC_SHARE = 0.50
HRA_SHARE = 0.25


def derive_structure(
    monthly_salary: float,
    *,
    conveyance: float = 0.0,
    special_allowance: float = 0.0,
    additional_special_allowance: float = 0.0,
) -> SalaryStructure:
    monthly = max(0.0, float(monthly_salary or 0))
    conveyance = max(0.0, float(conveyance or 0))
    special = max(0.0, float(special_allowance or 0))

    basic = round_half_up(monthly * BASIC_SHARE, 0)
    hra = round_half_up(monthly * HRA_SHARE, 0)
    remaining = monthly - basic - hra

    if conveyance + special > remaining:
        special = max(0.0, remaining - conveyance)
    other = round_half_up(max(0.0, remaining - conveyance - special), 0)
    gross = round_half_up(basic + hra + conveyance + special + other, 0)

    return SalaryStructure(
        monthly_salary=monthly,
        basic=basic,
        hra=hra,
        conveyance=conveyance,
        special_allowance=special,
        additional_special_allowance=max(0.0, float(additional_special_allowance or 0)),
        other_allowance=other,
        gross_monthly=gross,
    )


def monthly_salary_of(employee: Employee) -> float:
    """Salary used for per-day rates and ESI eligibility."""
    s = employee.salary
    if s.gross_monthly:
        return float(s.gross_monthly)
    components = s.basic + s.hra + s.conveyance + s.other_allowance + s.special_allowance
    if components:
        return float(components)
    return float(s.monthly_salary)
