from __future__ import annotations

from typing import Optional, Sequence

from ..common.numbers import to_float
from ..core.enums import PaymentStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_bool, db_cursor, fetchall, fetchone
from .model import EsiEntry
from .repository import EsiRepository

_COLUMNS = """
    month_key, employee_id, employee_name, eligible, esi_included, monthly_salary,
    total_gross_earnings, esi_amount, payment_status, salary_credited, updated_ms
"""


def _to_entry(r: dict) -> EsiEntry:
    return EsiEntry(
        employee_id=str(r["employee_id"]),
        month=r["month_key"],
        employee_name=r.get("employee_name") or "",
        eligible=as_bool(r.get("eligible")),
        esi_included=as_bool(r.get("esi_included")),
        monthly_salary=to_float(r.get("monthly_salary")),
        total_gross_earnings=to_float(r.get("total_gross_earnings")),
        esi_amount=to_float(r.get("esi_amount")),
        payment_status=PaymentStatus(r.get("payment_status") or PaymentStatus.PENDING.value),
        salary_credited=as_bool(r.get("salary_credited")),
        updated_at=int(r.get("updated_ms") or 0),
    )


class MySQLEsiRepository(EsiRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, month: str, employee_id: str) -> Optional[EsiEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM esi_entries WHERE month_key=%s AND employee_id=%s",
                (month, employee_id),
            )
            r = fetchone(cur)
            return _to_entry(r) if r else None

    def list_for_month(self, month: str) -> Sequence[EsiEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM esi_entries WHERE month_key=%s ORDER BY employee_name",
                (month,),
            )
            return [_to_entry(r) for r in fetchall(cur)]

    def save_all(self, entries: Sequence[EsiEntry]) -> None:
        if not entries:
            return
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                f"""
                INSERT INTO esi_entries({_COLUMNS})
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    employee_name=VALUES(employee_name),
                    eligible=VALUES(eligible),
                    esi_included=VALUES(esi_included),
                    monthly_salary=VALUES(monthly_salary),
                    total_gross_earnings=VALUES(total_gross_earnings),
                    esi_amount=VALUES(esi_amount),
                    payment_status=VALUES(payment_status),
                    salary_credited=VALUES(salary_credited),
                    updated_ms=VALUES(updated_ms)
                """,
                [
                    (
                        e.month,
                        e.employee_id,
                        e.employee_name,
                        int(e.eligible),
                        int(e.esi_included),
                        e.monthly_salary,
                        e.total_gross_earnings,
                        e.esi_amount,
                        e.payment_status.value,
                        int(e.salary_credited),
                        e.updated_at,
                    )
                    for e in entries
                ],
            )
