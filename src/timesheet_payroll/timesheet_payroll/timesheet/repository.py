from __future__ import annotations

from typing import Optional, Protocol

from .model import MonthlySummary, SuperSaveRecord


class TimesheetRepository(Protocol):
    def save_summary(self, summary: MonthlySummary) -> None:
        raise NotImplementedError

    def get_summary(self, employee_id: str, month: str) -> Optional[MonthlySummary]:
        raise NotImplementedError

    def save_supersave(self, record: SuperSaveRecord) -> None:
        raise NotImplementedError

    def get_supersave(self, employee_id: str, month: str) -> Optional[SuperSaveRecord]:
        raise NotImplementedError
