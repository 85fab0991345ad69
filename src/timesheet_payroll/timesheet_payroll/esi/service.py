from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Optional, Union

from ..common.datetime_utils import epoch_ms, now_local, parse_month_key
from ..common.numbers import round_half_up
from ..common.validators import require_enum
from ..core.actor import Actor
from ..core.constants import MONEY_PRECISION
from ..core.enums import PaymentStatus, Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..employees.repository import EmployeeRepository
from ..payroll.repository import PayrollCreditRepository
from ..payroll.service import GrossEarningsService
from .calculator import EsiCalculator
from .model import EsiEntry
from .repository import EsiRepository

logger = logging.getLogger(__name__)


class EsiService:
    def __init__(
        self,
        entries: EsiRepository,
        employees: EmployeeRepository,
        gross: GrossEarningsService,
        credits: PayrollCreditRepository,
        *,
        calculator: Optional[EsiCalculator] = None,
    ):
        self._entries = entries
        self._employees = employees
        self._gross = gross
        self._credits = credits
        self._calculator = calculator or EsiCalculator()

    @staticmethod
    def _require_hr(actor: Actor) -> None:
        if actor.role not in {Role.HR, Role.ADMIN}:
            raise AuthorizationError("Only HR or admin can manage the ESI register")

    def build_register(self, month: str, *, now: Optional[datetime] = None) -> list[EsiEntry]:
        """Fresh ESI lines for every active employee, keeping saved HR overrides."""
        parse_month_key(month)
        stamp = epoch_ms(now or now_local())
        credited = self._credits.credited_ids(month)
        saved = {e.employee_id: e for e in self._entries.list_for_month(month)}

        register: list[EsiEntry] = []
        for employee in self._employees.list_active():
            g = self._gross.compute(employee, month)
            eligible = self._calculator.is_eligible(esi_flag=employee.esi_enabled, monthly_salary=g.monthly_salary)
            previous = saved.get(employee.employee_id)
            included = previous.esi_included if previous else eligible
            payment = previous.payment_status if previous else PaymentStatus.PENDING
            gross = round_half_up(g.breakdown.total_gross_earnings, MONEY_PRECISION)

            register.append(
                EsiEntry(
                    employee_id=employee.employee_id,
                    month=month,
                    employee_name=employee.name,
                    eligible=eligible,
                    esi_included=included,
                    monthly_salary=g.monthly_salary,
                    total_gross_earnings=gross,
                    esi_amount=self._calculator.amount(
                        gross=g.breakdown.total_gross_earnings,
                        eligible=eligible,
                        included=included,
                    ),
                    payment_status=payment,
                    salary_credited=employee.employee_id in credited,
                    updated_at=stamp,
                )
            )
        return register

    def recompute_month(self, *, actor: Actor, month: str, now: Optional[datetime] = None) -> list[EsiEntry]:
        self._require_hr(actor)
        register = self.build_register(month, now=now)
        self._entries.save_all(register)
        logger.info(
            "ESI register %s recomputed: %d line(s), total %.2f",
            month,
            len(register),
            sum(e.esi_amount for e in register),
        )
        return register

    def update_entry(
        self,
        *,
        actor: Actor,
        month: str,
        employee_id: str,
        esi_included: Optional[bool] = None,
        payment_status: Union[PaymentStatus, str, None] = None,
        now: Optional[datetime] = None,
    ) -> EsiEntry:
        """Set the HR-controlled fields of one line. Paid requires ESI to be included."""
        self._require_hr(actor)
        entry = self._entries.get(month, employee_id)
        if entry is None:
            entry = next((e for e in self.build_register(month, now=now) if e.employee_id == employee_id), None)
        if entry is None:
            raise ValidationError(f"No ESI line for {employee_id} in {month}")

        included = entry.esi_included if esi_included is None else bool(esi_included)
        status = entry.payment_status
        if payment_status is not None:
            status = require_enum(PaymentStatus, payment_status, "Payment status")
        if status == PaymentStatus.PAID and not included:
            raise ValidationError("ESI can only be marked Paid while it is included")

        updated = replace(
            entry,
            esi_included=included,
            payment_status=status,
            esi_amount=self._calculator.amount(
                gross=entry.total_gross_earnings,
                eligible=entry.eligible,
                included=included,
            ),
            updated_at=epoch_ms(now or now_local()),
        )
        self._entries.save_all([updated])
        logger.info(
            "ESI %s %s set to included=%s status=%s by %s",
            month,
            employee_id,
            included,
            status.value,
            actor.actor_id,
        )
        return updated
