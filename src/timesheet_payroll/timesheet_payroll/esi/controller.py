from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import current_actor, json_body, send_bytes, to_jsonable
from ..container import Container
from ..reports.export import XLSX_MIMETYPE, esi_register_frame, to_xlsx_bytes


def register(app: Flask, container: Container) -> None:
    @app.route("/api/esi/<month>", methods=["GET"], endpoint="esi_register")
    def esi_register(month: str):
        entries = container.esi_service.build_register(month)
        return jsonify(
            {
                "success": True,
                "month": month,
                "entries": to_jsonable(entries),
                "total_esi": round(sum(e.esi_amount for e in entries), 2),
            }
        ), 200

    @app.route("/api/esi/<month>/recompute", methods=["POST"], endpoint="esi_recompute")
    def esi_recompute(month: str):
        entries = container.esi_service.recompute_month(actor=current_actor(), month=month)
        return jsonify({"success": True, "entries": to_jsonable(entries)}), 200

    @app.route("/api/esi/<month>/<employee_id>", methods=["PATCH"], endpoint="esi_update_entry")
    def esi_update_entry(month: str, employee_id: str):
        body = json_body()
        entry = container.esi_service.update_entry(
            actor=current_actor(),
            month=month,
            employee_id=employee_id,
            esi_included=body.get("esi_included"),
            payment_status=body.get("payment_status"),
        )
        return jsonify({"success": True, "entry": to_jsonable(entry)}), 200

    @app.route("/api/esi/<month>/export.xlsx", methods=["GET"], endpoint="esi_export")
    def esi_export(month: str):
        entries = container.esi_service.build_register(month)
        return send_bytes(
            app,
            to_xlsx_bytes({f"ESI {month}": esi_register_frame(entries)}),
            mimetype=XLSX_MIMETYPE,
            filename=f"esi_{month}.xlsx",
        )
