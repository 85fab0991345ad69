from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import days_in_month
from ..common.numbers import to_float
from ..core.enums import DayStatus, ShiftType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import DailyAttendanceRecord
from .repository import AttendanceRepository

_COLUMNS = """
    employee_id, work_date, employee_name, status, shift_type,
    check_in, lunch_in, lunch_out, check_out,
    work_hrs, ot_hrs, pending_hrs, actual_work_hrs,
    notes, created_ms, updated_ms
"""


def _to_record(r: dict) -> DailyAttendanceRecord:
    return DailyAttendanceRecord(
        employee_id=str(r["employee_id"]),
        work_date=normalize_mysql_date(r["work_date"]),
        status=DayStatus(r["status"]),
        shift_type=ShiftType(r["shift_type"]),
        check_in=r.get("check_in") or "",
        lunch_in=r.get("lunch_in") or "",
        lunch_out=r.get("lunch_out") or "",
        check_out=r.get("check_out") or "",
        work_hrs=to_float(r.get("work_hrs")),
        ot_hrs=to_float(r.get("ot_hrs")),
        pending_hrs=to_float(r.get("pending_hrs")),
        actual_work_hrs=to_float(r.get("actual_work_hrs")),
        employee_name=r.get("employee_name") or "",
        notes=r.get("notes"),
        created_at=int(r.get("created_ms") or 0),
        updated_at=int(r.get("updated_ms") or 0),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, employee_id: str, work_date: date) -> Optional[DailyAttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance_records WHERE employee_id=%s AND work_date=%s",
                (employee_id, work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def upsert(self, record: DailyAttendanceRecord) -> None:
        # created_ms is kept from the first write; everything else is replaced.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(
                    employee_id, work_date, employee_name, status, shift_type,
                    check_in, lunch_in, lunch_out, check_out,
                    work_hrs, ot_hrs, pending_hrs, actual_work_hrs,
                    notes, created_ms, updated_ms
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    employee_name=VALUES(employee_name),
                    status=VALUES(status),
                    shift_type=VALUES(shift_type),
                    check_in=VALUES(check_in),
                    lunch_in=VALUES(lunch_in),
                    lunch_out=VALUES(lunch_out),
                    check_out=VALUES(check_out),
                    work_hrs=VALUES(work_hrs),
                    ot_hrs=VALUES(ot_hrs),
                    pending_hrs=VALUES(pending_hrs),
                    actual_work_hrs=VALUES(actual_work_hrs),
                    notes=VALUES(notes),
                    updated_ms=VALUES(updated_ms)
                """,
                (
                    record.employee_id,
                    record.work_date,
                    record.employee_name,
                    record.status.value,
                    record.shift_type.value,
                    record.check_in,
                    record.lunch_in,
                    record.lunch_out,
                    record.check_out,
                    record.work_hrs,
                    record.ot_hrs,
                    record.pending_hrs,
                    record.actual_work_hrs,
                    record.notes,
                    record.created_at,
                    record.updated_at,
                ),
            )

    def list_for_date(self, work_date: date) -> Sequence[DailyAttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance_records WHERE work_date=%s ORDER BY employee_id",
                (work_date,),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_for_employee_month(self, employee_id: str, year: int, month: int) -> Sequence[DailyAttendanceRecord]:
        start = date(year, month, 1)
        end = date(year, month, days_in_month(year, month))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS} FROM attendance_records
                WHERE employee_id=%s AND work_date BETWEEN %s AND %s
                ORDER BY work_date
                """,
                (employee_id, start, end),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_for_month(self, year: int, month: int) -> Sequence[DailyAttendanceRecord]:
        start = date(year, month, 1)
        end = date(year, month, days_in_month(year, month))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS} FROM attendance_records
                WHERE work_date BETWEEN %s AND %s
                ORDER BY work_date, employee_id
                """,
                (start, end),
            )
            return [_to_record(r) for r in fetchall(cur)]
