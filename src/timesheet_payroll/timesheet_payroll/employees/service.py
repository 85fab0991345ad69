from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_local
from ..common.validators import optional_text, require_non_empty, require_non_negative
from ..core.actor import Actor
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..revisions.ledger import SalaryRevisionLedger
from ..revisions.model import SalaryRevision
from .model import Employee, EmployeeUpdate
from .repository import EmployeeRepository
from .salary import derive_structure

logger = logging.getLogger(__name__)

EMPLOYEE_STATUSES = {"active", "inactive"}


@dataclass(frozen=True)
class EmployeeUpdateResult:
    employee: Employee
    revision: Optional[SalaryRevision] = None


class EmployeeService:
    def __init__(self, employees: EmployeeRepository, *, ledger: Optional[SalaryRevisionLedger] = None):
        self._employees = employees
        self._ledger = ledger or SalaryRevisionLedger()

    def get(self, employee_id: str) -> Employee:
        employee = self._employees.get(employee_id)
        if not employee:
            raise ValidationError(f"Employee {employee_id} does not exist")
        return employee

    def list_active(self) -> list[Employee]:
        return list(self._employees.list_active())

    def list_revisions(self, employee_id: str) -> list[SalaryRevision]:
        self.get(employee_id)
        return list(self._employees.list_revisions(employee_id))

    def update_employee(
        self,
        *,
        actor: Actor,
        employee_id: str,
        update: EmployeeUpdate,
        reason: str = "",
        now: Optional[datetime] = None,
    ) -> EmployeeUpdateResult:
        """Apply an employee-form edit; salary changes by an admin append a revision."""
        if actor.role not in {Role.ADMIN, Role.HR}:
            raise AuthorizationError("You are not allowed to edit employees")

        now = now or now_local()
        previous = self.get(employee_id)
        updated = self._apply(previous, update)

        revision = self._ledger.build_revision(actor=actor, previous=previous, updated=updated, reason=reason, now=now)
        if updated == previous:
            return EmployeeUpdateResult(employee=previous)

        self._employees.save(updated, revision=revision)
        logger.info(
            "Employee %s updated by %s%s",
            employee_id,
            actor.actor_id,
            f" (revision {revision.revision_id})" if revision else "",
        )
        return EmployeeUpdateResult(employee=updated, revision=revision)

    @staticmethod
    def _apply(employee: Employee, update: EmployeeUpdate) -> Employee:
        changes: dict = {}
        if update.name is not None:
            changes["name"] = require_non_empty(update.name, "Name")
        if update.department is not None:
            changes["department"] = update.department.strip()
        if update.phone is not None:
            changes["phone"] = optional_text(update.phone)
        if update.status is not None:
            if update.status not in EMPLOYEE_STATUSES:
                raise ValidationError("Status must be active or inactive")
            changes["status"] = update.status
        if update.ot_rate is not None:
            changes["ot_rate"] = require_non_negative(update.ot_rate, "OT rate")
        for flag in ("esi_applicable", "pf_applicable", "include_esi", "include_pf"):
            value = getattr(update, flag)
            if value is not None:
                changes[flag] = bool(value)

        salary_inputs = (
            update.monthly_salary,
            update.conveyance,
            update.special_allowance,
            update.additional_special_allowance,
        )
        if any(v is not None for v in salary_inputs):
            current = employee.salary

            def pick(value, fallback, label):
                return require_non_negative(value, label) if value is not None else fallback

            changes["salary"] = derive_structure(
                pick(update.monthly_salary, current.monthly_salary, "Monthly salary"),
                conveyance=pick(update.conveyance, current.conveyance, "Conveyance"),
                special_allowance=pick(update.special_allowance, current.special_allowance, "Special allowance"),
                additional_special_allowance=pick(
                    update.additional_special_allowance,
                    current.additional_special_allowance,
                    "Additional special allowance",
                ),
            )

        return replace(employee, **changes)
