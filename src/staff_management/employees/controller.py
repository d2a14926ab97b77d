from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_body, json_error
from ..core.exceptions import DomainError, ValidationError
from ..container import Container
from .model import EmployeeInput


def _employee_id(value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError("Invalid employee id")


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employee", methods=["GET"], endpoint="list_employees")
    def list_employees():
        try:
            views = container.employee_service.list_employees()
        except DomainError as e:
            return json_error(e)
        return jsonify([v.to_dict() for v in views])

    @app.route("/api/employee/<int:employee_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(employee_id: int):
        try:
            view = container.employee_service.get_employee(employee_id)
        except DomainError as e:
            return json_error(e)
        return jsonify(view.to_dict())

    @app.route("/api/employee", methods=["POST"], endpoint="create_employee")
    def create_employee():
        try:
            data = json_body()
            employee_id = container.employee_service.create_employee(EmployeeInput.from_payload(data))
            view = container.employee_service.get_employee(employee_id)
        except DomainError as e:
            return json_error(e)
        return jsonify(view.to_dict()), 201

    @app.route("/api/employee", methods=["PATCH"], endpoint="update_employee")
    def update_employee():
        try:
            data = json_body()
            employee_id = _employee_id(data.get("id"))
            container.employee_service.update_employee(employee_id, EmployeeInput.from_payload(data))
            view = container.employee_service.get_employee(employee_id)
        except DomainError as e:
            return json_error(e)
        return jsonify(view.to_dict())

    @app.route("/api/employee", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee():
        try:
            container.employee_service.delete_employee(_employee_id(request.args.get("id")))
        except DomainError as e:
            return json_error(e)
        return jsonify({"success": True, "message": "Employee deleted"})
