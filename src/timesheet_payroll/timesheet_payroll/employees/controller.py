from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import current_actor, json_body, to_jsonable
from ..container import Container
from ..core.exceptions import ValidationError
from .model import EmployeeUpdate

_UPDATABLE = (
    "name",
    "department",
    "phone",
    "status",
    "ot_rate",
    "esi_applicable",
    "pf_applicable",
    "include_esi",
    "include_pf",
    "monthly_salary",
    "conveyance",
    "special_allowance",
    "additional_special_allowance",
)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    def employees_list():
        return jsonify({"success": True, "employees": to_jsonable(container.employee_service.list_active())}), 200

    @app.route("/api/employees/<employee_id>/salary", methods=["PUT"], endpoint="employees_update")
    def employees_update(employee_id: str):
        body = json_body()
        unknown = sorted(set(body) - set(_UPDATABLE) - {"reason"})
        if unknown:
            raise ValidationError(f"Unknown field(s): {', '.join(unknown)}")
        result = container.employee_service.update_employee(
            actor=current_actor(),
            employee_id=employee_id,
            update=EmployeeUpdate(**{k: body[k] for k in _UPDATABLE if k in body}),
            reason=body.get("reason") or "",
        )
        return jsonify(
            {
                "success": True,
                "employee": to_jsonable(result.employee),
                "revision": to_jsonable(result.revision),
            }
        ), 200

    @app.route("/api/employees/<employee_id>/revisions", methods=["GET"], endpoint="employees_revisions")
    def employees_revisions(employee_id: str):
        revisions = container.employee_service.list_revisions(employee_id)
        return jsonify({"success": True, "revisions": to_jsonable(revisions)}), 200
