from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import send_bytes, to_jsonable
from ..common.numbers import to_float
from ..container import Container
from ..core.exceptions import ValidationError
from ..reports.export import XLSX_MIMETYPE, payroll_frame, to_xlsx_bytes


def _per_employee(prefix: str) -> dict[str, float]:
    # ?loan.E001=500&leave.E001=1.5
    values: dict[str, float] = {}
    for key, raw in request.args.items():
        if not key.startswith(prefix + "."):
            continue
        amount = to_float(raw, default=-1.0)
        if amount < 0:
            raise ValidationError(f"{key} must be a non-negative number")
        values[key[len(prefix) + 1:]] = amount
    return values


def register(app: Flask, container: Container) -> None:
    def _register(month: str):
        return container.payroll_service.build_register(
            month,
            loan_deductions=_per_employee("loan"),
            leave_days=_per_employee("leave"),
        )

    @app.route("/api/payroll/<month>", methods=["GET"], endpoint="payroll_register")
    def payroll_register(month: str):
        rows = _register(month)
        return jsonify(
            {
                "success": True,
                "month": month,
                "rows": [
                    {
                        "employee_id": row.employee.employee_id,
                        "name": row.employee.name,
                        "department": row.employee.department,
                        "breakdown": to_jsonable(row.gross.breakdown),
                        "payslip": to_jsonable(row.payslip),
                        "esi_included": row.esi_included,
                        "approval_status": row.approval_status.value if row.approval_status else None,
                        "salary_credited": row.salary_credited,
                    }
                    for row in rows
                ],
            }
        ), 200

    @app.route("/api/payroll/<month>/export.xlsx", methods=["GET"], endpoint="payroll_export")
    def payroll_export(month: str):
        rows = _register(month)
        return send_bytes(
            app,
            to_xlsx_bytes({f"Payroll {month}": payroll_frame(rows)}),
            mimetype=XLSX_MIMETYPE,
            filename=f"payroll_{month}.xlsx",
        )
