from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import PaymentStatus


@dataclass(frozen=True)
class EsiEntry:
    """ESI register line for one employee-month.

    esi_included and payment_status are HR overrides and survive recomputes;
    everything else is recalculated.
    """

    employee_id: str
    month: str
    employee_name: str
    eligible: bool
    esi_included: bool
    monthly_salary: float
    total_gross_earnings: float
    esi_amount: float
    payment_status: PaymentStatus = PaymentStatus.PENDING
    salary_credited: bool = False
    updated_at: int = 0
