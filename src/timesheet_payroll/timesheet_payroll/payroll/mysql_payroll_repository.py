from __future__ import annotations

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .repository import PayrollCreditRepository


class MySQLPayrollCreditRepository(PayrollCreditRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def credited_ids(self, month: str) -> set[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT employee_id FROM payroll_credited WHERE month_key=%s AND credited=1",
                (month,),
            )
            return {str(r["employee_id"]) for r in fetchall(cur)}
