from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_bool, db_cursor, fetchall, normalize_mysql_date
from .model import Holiday
from .repository import HolidayRepository


def _split_departments(value: str) -> tuple[str, ...]:
    parts = [p.strip() for p in (value or "").split(",")]
    return tuple(p for p in parts if p) or ("All",)


class MySQLHolidayRepository(HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_month(self, year: int, month: int) -> Sequence[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT holiday_id, holiday_date, name, departments, is_recurring
                FROM holidays
                WHERE (YEAR(holiday_date)=%s AND MONTH(holiday_date)=%s)
                   OR (is_recurring=1 AND MONTH(holiday_date)=%s)
                ORDER BY holiday_date
                """,
                (int(year), int(month), int(month)),
            )
            return [
                Holiday(
                    holiday_id=int(r["holiday_id"]),
                    holiday_date=normalize_mysql_date(r["holiday_date"]),
                    name=r["name"],
                    departments=_split_departments(r.get("departments")),
                    is_recurring=as_bool(r.get("is_recurring")),
                )
                for r in fetchall(cur)
            ]
