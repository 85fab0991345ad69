from __future__ import annotations

from typing import Optional

from ..common.numbers import to_float
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import MonthlySummary, SuperSaveRecord
from .repository import TimesheetRepository


class MySQLTimesheetRepository(TimesheetRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def save_summary(self, summary: MonthlySummary) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO timesheet_summaries(
                    employee_id, month_key, full_working_days, sunday_present_count,
                    sunday_work_hours, marked_days_count, updated_ms
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    full_working_days=VALUES(full_working_days),
                    sunday_present_count=VALUES(sunday_present_count),
                    sunday_work_hours=VALUES(sunday_work_hours),
                    marked_days_count=VALUES(marked_days_count),
                    updated_ms=VALUES(updated_ms)
                """,
                (
                    summary.employee_id,
                    summary.month,
                    summary.full_working_days,
                    summary.sunday_present_count,
                    summary.sunday_work_hours,
                    summary.marked_days_count,
                    summary.updated_at,
                ),
            )

    def get_summary(self, employee_id: str, month: str) -> Optional[MonthlySummary]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, month_key, full_working_days, sunday_present_count,
                       sunday_work_hours, marked_days_count, updated_ms
                FROM timesheet_summaries
                WHERE employee_id=%s AND month_key=%s
                """,
                (employee_id, month),
            )
            r = fetchone(cur)
            if not r:
                return None
            return MonthlySummary(
                employee_id=str(r["employee_id"]),
                month=r["month_key"],
                full_working_days=int(r["full_working_days"]),
                sunday_present_count=int(r["sunday_present_count"]),
                sunday_work_hours=to_float(r["sunday_work_hours"]),
                marked_days_count=int(r["marked_days_count"]),
                updated_at=int(r["updated_ms"]),
            )

    def save_supersave(self, record: SuperSaveRecord) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO timesheet_supersaves(
                    employee_id, month_key, employee_name, department, marked_days, total_days,
                    full_working_days, sunday_present_count, sunday_work_hours,
                    total_ot, total_pending, total_work_hrs, saved_ms
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    employee_name=VALUES(employee_name),
                    department=VALUES(department),
                    marked_days=VALUES(marked_days),
                    total_days=VALUES(total_days),
                    full_working_days=VALUES(full_working_days),
                    sunday_present_count=VALUES(sunday_present_count),
                    sunday_work_hours=VALUES(sunday_work_hours),
                    total_ot=VALUES(total_ot),
                    total_pending=VALUES(total_pending),
                    total_work_hrs=VALUES(total_work_hrs),
                    saved_ms=VALUES(saved_ms)
                """,
                (
                    record.employee_id,
                    record.month,
                    record.employee_name,
                    record.department,
                    record.marked_days,
                    record.total_days,
                    record.full_working_days,
                    record.sunday_present_count,
                    record.sunday_work_hours,
                    record.total_ot,
                    record.total_pending,
                    record.total_work_hrs,
                    record.saved_at,
                ),
            )

    def get_supersave(self, employee_id: str, month: str) -> Optional[SuperSaveRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, month_key, employee_name, department, marked_days, total_days,
                       full_working_days, sunday_present_count, sunday_work_hours,
                       total_ot, total_pending, total_work_hrs, saved_ms
                FROM timesheet_supersaves
                WHERE employee_id=%s AND month_key=%s
                """,
                (employee_id, month),
            )
            r = fetchone(cur)
            if not r:
                return None
            return SuperSaveRecord(
                employee_id=str(r["employee_id"]),
                month=r["month_key"],
                employee_name=r["employee_name"],
                department=r.get("department") or "",
                marked_days=int(r["marked_days"]),
                total_days=int(r["total_days"]),
                full_working_days=int(r["full_working_days"]),
                sunday_present_count=int(r["sunday_present_count"]),
                sunday_work_hours=to_float(r["sunday_work_hours"]),
                total_ot=to_float(r["total_ot"]),
                total_pending=to_float(r["total_pending"]),
                total_work_hrs=to_float(r["total_work_hrs"]),
                saved_at=int(r["saved_ms"]),
            )
