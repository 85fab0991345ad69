from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import DailyAttendanceRecord


class AttendanceRepository(Protocol):
    def get(self, employee_id: str, work_date: date) -> Optional[DailyAttendanceRecord]:
        raise NotImplementedError

    def upsert(self, record: DailyAttendanceRecord) -> None:
        """Write the whole record for its (employee_id, work_date) in one step."""

        raise NotImplementedError

    def list_for_date(self, work_date: date) -> Sequence[DailyAttendanceRecord]:
        raise NotImplementedError

    def list_for_employee_month(self, employee_id: str, year: int, month: int) -> Sequence[DailyAttendanceRecord]:
        raise NotImplementedError

    def list_for_month(self, year: int, month: int) -> Sequence[DailyAttendanceRecord]:
        raise NotImplementedError
