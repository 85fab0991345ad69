from __future__ import annotations

import json
from typing import Optional, Sequence

from ..core.enums import ApprovalStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import ApprovalSnapshot, AttendanceApproval
from .repository import ApprovalRepository

_COLUMNS = "employee_id, month_key, status, snapshot_json, submitted_by, decided_by, created_ms, updated_ms"


def _to_approval(r: dict) -> AttendanceApproval:
    raw = r.get("snapshot_json") or "{}"
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8")
    return AttendanceApproval(
        employee_id=str(r["employee_id"]),
        month=r["month_key"],
        status=ApprovalStatus(r["status"]),
        snapshot=ApprovalSnapshot.from_dict(json.loads(raw)),
        created_at=int(r["created_ms"]),
        updated_at=int(r["updated_ms"]),
        submitted_by=r.get("submitted_by") or "",
        decided_by=r.get("decided_by"),
    )


class MySQLApprovalRepository(ApprovalRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, employee_id: str, month: str) -> Optional[AttendanceApproval]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance_approvals WHERE employee_id=%s AND month_key=%s",
                (employee_id, month),
            )
            r = fetchone(cur)
            return _to_approval(r) if r else None

    def save(self, approval: AttendanceApproval) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO attendance_approvals({_COLUMNS})
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    status=VALUES(status),
                    snapshot_json=VALUES(snapshot_json),
                    submitted_by=VALUES(submitted_by),
                    decided_by=VALUES(decided_by),
                    updated_ms=VALUES(updated_ms)
                """,
                (
                    approval.employee_id,
                    approval.month,
                    approval.status.value,
                    json.dumps(approval.snapshot.to_dict()),
                    approval.submitted_by,
                    approval.decided_by,
                    approval.created_at,
                    approval.updated_at,
                ),
            )

    def list_for_month(self, month: str) -> Sequence[AttendanceApproval]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance_approvals WHERE month_key=%s ORDER BY employee_id",
                (month,),
            )
            return [_to_approval(r) for r in fetchall(cur)]
