from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import current_actor, send_bytes, to_jsonable
from ..container import Container
from ..reports.export import XLSX_MIMETYPE, timesheet_frame, to_xlsx_bytes


def register(app: Flask, container: Container) -> None:
    @app.route("/api/timesheet/<employee_id>/<month>", methods=["GET"], endpoint="timesheet_month")
    def month_view(employee_id: str, month: str):
        container.employee_service.get(employee_id)
        sheet = container.timesheet_service.build_month(employee_id, month)
        supersave = container.timesheet_service.get_supersave(employee_id, month)
        return jsonify(
            {
                "success": True,
                "timesheet": to_jsonable(sheet),
                "super_saved": supersave is not None,
            }
        ), 200

    @app.route("/api/timesheet/<employee_id>/<month>/super-save", methods=["POST"], endpoint="timesheet_super_save")
    def super_save(employee_id: str, month: str):
        result = container.timesheet_service.super_save(actor=current_actor(), employee_id=employee_id, month=month)
        return jsonify(
            {
                "success": True,
                "record": to_jsonable(result.record),
                "warnings": result.warnings,
            }
        ), 200

    @app.route("/api/timesheet/<employee_id>/<month>/export.xlsx", methods=["GET"], endpoint="timesheet_export")
    def export(employee_id: str, month: str):
        employee = container.employee_service.get(employee_id)
        sheet = container.timesheet_service.build_month(employee_id, month)
        frame = timesheet_frame(sheet, employee_name=employee.name, shifts=container.daily_calculator.shifts)
        return send_bytes(
            app,
            to_xlsx_bytes({month: frame}),
            mimetype=XLSX_MIMETYPE,
            filename=f"timesheet_{employee_id}_{month}.xlsx",
        )
