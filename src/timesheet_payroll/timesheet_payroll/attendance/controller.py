from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import parse_iso_date
from ..common.http import current_actor, json_body, send_bytes, to_jsonable
from ..container import Container
from ..reports.export import daily_attendance_frame, to_csv_bytes


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/<employee_id>/<work_date>", methods=["PUT"], endpoint="attendance_save_day")
    def save_day(employee_id: str, work_date: str):
        actor = current_actor()
        body = json_body()
        record = container.attendance_service.save_day(
            actor=actor,
            employee_id=employee_id,
            work_date=parse_iso_date(work_date),
            status=body.get("status", ""),
            shift_type=body.get("shift_type"),
            check_in=body.get("check_in"),
            lunch_in=body.get("lunch_in"),
            lunch_out=body.get("lunch_out"),
            check_out=body.get("check_out"),
            ot_hrs=body.get("ot_hrs", 0),
            notes=body.get("notes"),
        )
        return jsonify({"success": True, "record": to_jsonable(record)}), 200

    @app.route("/api/attendance/<work_date>", methods=["GET"], endpoint="attendance_list_day")
    def list_day(work_date: str):
        records = container.attendance_service.list_day(parse_iso_date(work_date))
        return jsonify({"success": True, "records": to_jsonable(records)}), 200

    @app.route("/api/attendance/<work_date>/holiday", methods=["POST"], endpoint="attendance_apply_holiday")
    def apply_holiday(work_date: str):
        created = container.attendance_service.apply_holiday(actor=current_actor(), work_date=parse_iso_date(work_date))
        return jsonify({"success": True, "created": len(created)}), 200

    @app.route("/api/attendance/<work_date>/export.csv", methods=["GET"], endpoint="attendance_day_csv")
    def day_csv(work_date: str):
        day = parse_iso_date(work_date)
        frame = daily_attendance_frame(container.attendance_service.list_day(day))
        return send_bytes(
            app,
            to_csv_bytes(frame),
            mimetype="text/csv",
            filename=f"attendance_{day.strftime('%Y%m%d')}.csv",
        )
