from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceApproval


class ApprovalRepository(Protocol):
    def get(self, employee_id: str, month: str) -> Optional[AttendanceApproval]:
        raise NotImplementedError

    def save(self, approval: AttendanceApproval) -> None:
        raise NotImplementedError

    def list_for_month(self, month: str) -> Sequence[AttendanceApproval]:
        raise NotImplementedError
