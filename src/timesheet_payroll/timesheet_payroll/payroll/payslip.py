from __future__ import annotations

from dataclasses import dataclass

from ..common.numbers import round_half_up
from ..core.constants import PF_RATE
from ..employees.model import Employee
from .calculator.base import GrossBreakdown


def _money(value: float) -> float:
    return round_half_up(value, 2)


@dataclass(frozen=True)
class Payslip:
    per_day_rate: float
    present_pay: float
    half_day_pay: float
    holiday_pay: float
    sunday_pay: float
    ot_amount: float
    basic: float
    hra: float
    conveyance: float
    other_allowance: float
    special_allowance: float
    additional_special_allowance: float
    total_earnings: float
    pf: float
    esi: float
    loan_deduction: float
    leave_deduction: float
    total_deductions: float
    net_payable: float


class PayslipCalculator:
    """Turns a gross breakdown into earnings components, deductions and net pay.

    Salary components are pro-rated by how much of the month's base pay was
    earned. PF is charged on pro-rated basic + conveyance; ESI on the same
    gross the ESI register uses.
    """

    def __init__(self, *, pf_rate: float = PF_RATE):
        self._pf_rate = float(pf_rate)

    def build(
        self,
        *,
        employee: Employee,
        monthly_salary: float,
        breakdown: GrossBreakdown,
        esi_amount: float,
        loan_deduction: float = 0.0,
        leave_days: float = 0.0,
    ) -> Payslip:
        per_day = _money(breakdown.per_day_rate)
        base = _money(breakdown.base_earnings)
        ratio = base / monthly_salary if base > 0 and monthly_salary > 0 else 0.0

        s = employee.salary
        basic = _money(s.basic * ratio)
        hra = _money(s.hra * ratio)
        conveyance = _money(s.conveyance * ratio)
        other = _money(s.other_allowance * ratio)
        special = _money(s.special_allowance * ratio)

        total_earnings = _money(breakdown.total_gross_earnings + s.additional_special_allowance)
        pf = _money((basic + conveyance) * self._pf_rate) if employee.pf_enabled else 0.0
        leave_deduction = _money(leave_days * per_day)
        deductions = _money(pf + esi_amount + loan_deduction + leave_deduction)

        return Payslip(
            per_day_rate=per_day,
            present_pay=_money(breakdown.present_pay),
            half_day_pay=_money(breakdown.half_day_pay),
            holiday_pay=_money(breakdown.holiday_pay),
            sunday_pay=_money(breakdown.sunday_pay),
            ot_amount=_money(breakdown.ot_amount),
            basic=basic,
            hra=hra,
            conveyance=conveyance,
            other_allowance=other,
            special_allowance=special,
            additional_special_allowance=_money(s.additional_special_allowance),
            total_earnings=total_earnings,
            pf=pf,
            esi=_money(esi_amount),
            loan_deduction=_money(loan_deduction),
            leave_deduction=leave_deduction,
            total_deductions=deductions,
            net_payable=_money(total_earnings - deductions),
        )
