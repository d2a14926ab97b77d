from __future__ import annotations

import logging

from werkzeug.security import generate_password_hash

from ..attendance.repository import AttendanceRepository
from ..core.exceptions import NotFound
from ..shifts.repository import ShiftRepository
from ..shifts.resolver import resolve_employee_shifts, validate_shift_exists
from .model import EmployeeInput, EmployeeView
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: manage employees and expose them with shift names resolved."""

    def __init__(self, employees: EmployeeRepository, shifts: ShiftRepository, attendance: AttendanceRepository):
        self._employees = employees
        self._shifts = shifts
        self._attendance = attendance

    def list_employees(self) -> list[EmployeeView]:
        # Both fetches must succeed; a StorageError from either aborts the call.
        employees = self._employees.list_all()
        shifts = self._shifts.list_all()
        return resolve_employee_shifts(shifts, employees)

    def get_employee(self, employee_id: int) -> EmployeeView:
        emp = self._employees.get_by_id(employee_id)
        if not emp:
            raise NotFound("Employee not found")

        shift = self._shifts.get_by_id(emp.shift_id)
        return resolve_employee_shifts([shift] if shift else [], [emp])[0]

    def create_employee(self, data: EmployeeInput) -> int:
        shift_id = validate_shift_exists(self._shifts, data.shift)

        employee_id = self._employees.create(
            name=data.name,
            password_hash=generate_password_hash(data.password),
            contact_info=data.contact_info,
            role=data.role,
            sex=data.sex,
            salary=data.salary,
            picture=data.picture,
            shift_id=shift_id,
        )
        logger.info("created employee %s on shift %s", employee_id, shift_id)
        return employee_id

    def update_employee(self, employee_id: int, data: EmployeeInput) -> None:
        shift_id = validate_shift_exists(self._shifts, data.shift)

        updated = self._employees.update(
            employee_id=employee_id,
            name=data.name,
            password_hash=generate_password_hash(data.password),
            contact_info=data.contact_info,
            role=data.role,
            sex=data.sex,
            salary=data.salary,
            picture=data.picture,
            shift_id=shift_id,
        )
        if not updated:
            raise NotFound("Employee not found")
        logger.info("updated employee %s", employee_id)

    def delete_employee(self, employee_id: int) -> None:
        """Delete the employee's attendance events, then the employee.

        The two deletes run as separate storage calls, not one transaction. If the
        employee delete fails after the events are gone, the events stay deleted
        and the employee remains; calling again completes the cascade.
        """
        if not self._employees.get_by_id(employee_id):
            raise NotFound("Employee not found")

        # Events first: removing the employee first would leave orphaned events.
        removed = self._attendance.delete_for_employee(employee_id)
        if not self._employees.delete_by_id(employee_id):
            raise NotFound("Employee not found")
        logger.info("deleted employee %s and %s attendance event(s)", employee_id, removed)
