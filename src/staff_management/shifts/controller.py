from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import parse_optional_time
from ..common.http import json_body, json_error
from ..core.exceptions import DomainError
from ..container import Container
from .model import Shift


def _shift_dict(s: Shift) -> dict:
    return {
        "id": s.shift_id,
        "name": s.shift_name,
        "start_time": s.start_time.strftime("%H:%M") if s.start_time else None,
        "end_time": s.end_time.strftime("%H:%M") if s.end_time else None,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/shift", methods=["GET"], endpoint="list_shifts")
    def list_shifts():
        try:
            shifts = container.shift_service.list_shifts()
        except DomainError as e:
            return json_error(e)
        return jsonify([_shift_dict(s) for s in shifts])

    @app.route("/api/shift", methods=["POST"], endpoint="create_shift")
    def create_shift():
        try:
            data = json_body()
            shift_id = container.shift_service.create_shift(
                data.get("name", ""),
                start_time=parse_optional_time(data.get("start_time"), "Start time"),
                end_time=parse_optional_time(data.get("end_time"), "End time"),
            )
        except DomainError as e:
            return json_error(e)
        return jsonify({"success": True, "id": shift_id}), 201

    @app.route("/api/shift/<int:shift_id>", methods=["PATCH"], endpoint="rename_shift")
    def rename_shift(shift_id: int):
        try:
            data = json_body()
            container.shift_service.rename_shift(shift_id, data.get("name", ""))
        except DomainError as e:
            return json_error(e)
        return jsonify({"success": True})

    @app.route("/api/shift/<int:shift_id>", methods=["DELETE"], endpoint="delete_shift")
    def delete_shift(shift_id: int):
        try:
            container.shift_service.delete_shift(shift_id)
        except DomainError as e:
            return json_error(e)
        return jsonify({"success": True, "message": "Shift deleted"})
