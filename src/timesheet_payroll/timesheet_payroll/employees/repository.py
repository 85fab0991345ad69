from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..revisions.model import SalaryRevision
from .model import Employee


class EmployeeRepository(Protocol):
    def get(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_active(self) -> Sequence[Employee]:
        raise NotImplementedError

    def save(self, employee: Employee, *, revision: Optional[SalaryRevision] = None) -> None:
        """Persist the employee and, if given, append the revision in the same transaction."""

        raise NotImplementedError

    def list_revisions(self, employee_id: str) -> Sequence[SalaryRevision]:
        raise NotImplementedError
