from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import epoch_ms
from ..common.numbers import round_half_up
from ..common.validators import optional_text
from ..core.actor import Actor
from ..core.constants import DEFAULT_REVISION_REASON
from ..core.enums import ChangeType
from ..core.exceptions import AuthorizationError
from ..employees.model import Employee
from .model import SalaryChange, SalaryRevision

logger = logging.getLogger(__name__)

MONITORED_AMOUNTS = (
    ("monthly_salary", "Monthly Salary"),
    ("basic", "Basic"),
    ("hra", "HRA"),
    ("conveyance", "Conveyance"),
    ("special_allowance", "Special Allowance"),
    ("additional_special_allowance", "Additional Special Allowance"),
    ("other_allowance", "Other Allowance"),
)

MONITORED_FLAGS = (
    ("include_esi", "Include ESI"),
    ("include_pf", "Include PF"),
)


def percentage_change(old: float, new: float) -> float:
    """Absolute percentage delta; a change away from zero counts as 100%."""
    if old == 0:
        return 100.0
    return round_half_up(abs((new - old) / old) * 100, 2)


class SalaryRevisionLedger:
    """Builds revision entries from two snapshots of an employee's salary."""

    def diff(self, previous: Employee, updated: Employee) -> list[SalaryChange]:
        changes: list[SalaryChange] = []

        for name, label in MONITORED_AMOUNTS:
            old = float(getattr(previous.salary, name) or 0)
            new = float(getattr(updated.salary, name) or 0)
            if round_half_up(old, 2) == round_half_up(new, 2):
                continue
            changes.append(
                SalaryChange(
                    field=name,
                    field_label=label,
                    old_value=old,
                    new_value=new,
                    change_type=ChangeType.INCREASE if new > old else ChangeType.DECREASE,
                    change_amount=round_half_up(abs(new - old), 2),
                    change_percentage=percentage_change(old, new),
                )
            )

        for name, label in MONITORED_FLAGS:
            old_flag = bool(getattr(previous, name))
            new_flag = bool(getattr(updated, name))
            if old_flag != new_flag:
                changes.append(
                    SalaryChange(
                        field=name,
                        field_label=label,
                        old_value=old_flag,
                        new_value=new_flag,
                        change_type=ChangeType.TOGGLE,
                    )
                )

        return changes

    def build_revision(
        self,
        *,
        actor: Actor,
        previous: Employee,
        updated: Employee,
        reason: Optional[str] = None,
        now: datetime,
    ) -> Optional[SalaryRevision]:
        """Return the entry to append, or ``None`` when nothing monitored changed."""
        changes = self.diff(previous, updated)
        if not changes:
            return None
        if not actor.is_admin:
            raise AuthorizationError("Only an admin can change salary details")

        previous_salary = float(previous.salary.monthly_salary or 0)
        new_salary = float(updated.salary.monthly_salary or 0)
        if previous_salary:
            increment = round_half_up((new_salary - previous_salary) / previous_salary * 100, 2)
        else:
            increment = 0.0

        stamp = epoch_ms(now)
        revision = SalaryRevision(
            revision_id=f"REV-{stamp}",
            employee_id=updated.employee_id,
            employee_name=updated.name,
            revision_date=now.date(),
            effective_from=now.date(),
            changed_by=actor.actor_id,
            changed_by_name=actor.name,
            changes=tuple(changes),
            reason=optional_text(reason) or DEFAULT_REVISION_REASON,
            timestamp=stamp,
            previous_salary=previous_salary,
            new_salary=new_salary,
            increment_percentage=increment,
        )
        logger.info(
            "Salary revision %s for %s: %d change(s), %.2f%%",
            revision.revision_id,
            revision.employee_id,
            len(changes),
            increment,
        )
        return revision
