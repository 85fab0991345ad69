from __future__ import annotations

import json
from typing import Optional, Sequence

from ..common.numbers import to_float
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_bool, db_cursor, fetchall, fetchone, normalize_mysql_date
from ..revisions.model import SalaryChange, SalaryRevision
from .model import Employee, SalaryStructure
from .repository import EmployeeRepository

_COLUMNS = """
    employee_id, employee_code, name, department, phone, status,
    esi_applicable, include_esi, pf_applicable, include_pf, ot_rate,
    monthly_salary, basic, hra, conveyance, special_allowance,
    additional_special_allowance, other_allowance, gross_monthly
"""


def _to_employee(r: dict) -> Employee:
    return Employee(
        employee_id=str(r["employee_id"]),
        employee_code=r.get("employee_code") or "",
        name=r["name"],
        department=r.get("department") or "",
        phone=r.get("phone"),
        status=r.get("status") or "active",
        esi_applicable=as_bool(r.get("esi_applicable")),
        include_esi=as_bool(r.get("include_esi")),
        pf_applicable=as_bool(r.get("pf_applicable")),
        include_pf=as_bool(r.get("include_pf")),
        ot_rate=to_float(r["ot_rate"]) if r.get("ot_rate") is not None else None,
        salary=SalaryStructure(
            monthly_salary=to_float(r.get("monthly_salary")),
            basic=to_float(r.get("basic")),
            hra=to_float(r.get("hra")),
            conveyance=to_float(r.get("conveyance")),
            special_allowance=to_float(r.get("special_allowance")),
            additional_special_allowance=to_float(r.get("additional_special_allowance")),
            other_allowance=to_float(r.get("other_allowance")),
            gross_monthly=to_float(r.get("gross_monthly")),
        ),
    )


def _to_revision(r: dict) -> SalaryRevision:
    raw_changes = r.get("changes_json") or "[]"
    if isinstance(raw_changes, (bytes, bytearray)):
        raw_changes = raw_changes.decode("utf-8")
    return SalaryRevision(
        revision_id=r["revision_id"],
        employee_id=str(r["employee_id"]),
        employee_name=r["employee_name"],
        revision_date=normalize_mysql_date(r["revision_date"]),
        effective_from=normalize_mysql_date(r["effective_from"]),
        changed_by=r["changed_by"],
        changed_by_name=r.get("changed_by_name") or "",
        changes=tuple(SalaryChange.from_dict(c) for c in json.loads(raw_changes)),
        reason=r["reason"],
        timestamp=int(r["created_ms"]),
        previous_salary=to_float(r.get("previous_salary")),
        new_salary=to_float(r.get("new_salary")),
        increment_percentage=to_float(r.get("increment_percentage")),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (employee_id,))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def list_active(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE status='active' ORDER BY name")
            return [_to_employee(r) for r in fetchall(cur)]

    def save(self, employee: Employee, *, revision: Optional[SalaryRevision] = None) -> None:
        s = employee.salary
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET name=%s, department=%s, phone=%s, status=%s,
                    esi_applicable=%s, include_esi=%s, pf_applicable=%s, include_pf=%s, ot_rate=%s,
                    monthly_salary=%s, basic=%s, hra=%s, conveyance=%s, special_allowance=%s,
                    additional_special_allowance=%s, other_allowance=%s, gross_monthly=%s
                WHERE employee_id=%s
                """,
                (
                    employee.name,
                    employee.department,
                    employee.phone,
                    employee.status,
                    int(employee.esi_applicable),
                    int(employee.include_esi),
                    int(employee.pf_applicable),
                    int(employee.include_pf),
                    employee.ot_rate,
                    s.monthly_salary,
                    s.basic,
                    s.hra,
                    s.conveyance,
                    s.special_allowance,
                    s.additional_special_allowance,
                    s.other_allowance,
                    s.gross_monthly,
                    employee.employee_id,
                ),
            )
            if revision is None:
                return
            cur.execute(
                """
                INSERT INTO salary_revisions(
                    revision_id, employee_id, employee_name, revision_date, effective_from,
                    changed_by, changed_by_name, changes_json, reason, created_ms,
                    previous_salary, new_salary, increment_percentage
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    revision.revision_id,
                    revision.employee_id,
                    revision.employee_name,
                    revision.revision_date,
                    revision.effective_from,
                    revision.changed_by,
                    revision.changed_by_name,
                    json.dumps([c.to_dict() for c in revision.changes]),
                    revision.reason,
                    revision.timestamp,
                    revision.previous_salary,
                    revision.new_salary,
                    revision.increment_percentage,
                ),
            )

    def list_revisions(self, employee_id: str) -> Sequence[SalaryRevision]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT revision_id, employee_id, employee_name, revision_date, effective_from,
                       changed_by, changed_by_name, changes_json, reason, created_ms,
                       previous_salary, new_salary, increment_percentage
                FROM salary_revisions
                WHERE employee_id=%s
                ORDER BY created_ms
                """,
                (employee_id,),
            )
            return [_to_revision(r) for r in fetchall(cur)]
