from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local
from ..common.http import json_error
from ..core.constants import MONTHS
from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/<int:employee_id>", methods=["GET"], endpoint="employee_attendance")
    def employee_attendance(employee_id: int):
        today = now_local()
        month = request.args.get("month") or MONTHS[today.month - 1]
        year = request.args.get("year") or str(today.year)
        # The staff page lists the most recent day first.
        newest_first = request.args.get("order", "newest") != "oldest"

        try:
            records = container.attendance_service.get_attendance(
                employee_id, month, year, newest_first=newest_first
            )
        except DomainError as e:
            return json_error(e)
        return jsonify([r.to_dict() for r in records])

    @app.route("/api/attendance/<int:employee_id>/checkin", methods=["POST"], endpoint="employee_checkin")
    def employee_checkin(employee_id: int):
        try:
            event_id = container.attendance_service.record_check_in(employee_id)
        except DomainError as e:
            return json_error(e)
        return jsonify({"success": True, "id": event_id}), 201
