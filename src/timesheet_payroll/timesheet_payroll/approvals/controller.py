from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import current_actor, json_body, to_jsonable
from ..common.time_math import format_hours_hm
from ..container import Container
from .model import AttendanceApproval


def _approval_json(approval: AttendanceApproval) -> dict:
    data = to_jsonable(approval)
    snap = approval.snapshot
    data["display"] = {
        "ot_hours": format_hours_hm(snap.ot_hours),
        "pending_hours": format_hours_hm(snap.pending_hours),
        "net_ot_hours": format_hours_hm(snap.net_ot_hours),
    }
    return data


def register(app: Flask, container: Container) -> None:
    @app.route("/api/approvals/<month>", methods=["GET"], endpoint="approvals_month")
    def approvals_month(month: str):
        approvals = container.approval_workflow.list_month(month)
        return jsonify({"success": True, "approvals": [_approval_json(a) for a in approvals]}), 200

    @app.route("/api/approvals/<employee_id>/<month>", methods=["POST"], endpoint="approvals_submit")
    def approvals_submit(employee_id: str, month: str):
        approval = container.approval_workflow.submit(actor=current_actor(), employee_id=employee_id, month=month)
        return jsonify({"success": True, "approval": _approval_json(approval)}), 200

    @app.route("/api/approvals/<employee_id>/<month>/decision", methods=["POST"], endpoint="approvals_decide")
    def approvals_decide(employee_id: str, month: str):
        body = json_body()
        approval = container.approval_workflow.decide(
            actor=current_actor(),
            employee_id=employee_id,
            month=month,
            status=body.get("status", ""),
        )
        return jsonify({"success": True, "approval": _approval_json(approval)}), 200
