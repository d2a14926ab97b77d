"""Shift reference resolution.

Read side: replace employees' shift ids with shift names.
Write side: turn a shift name into the id to persist, or refuse the write.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from ..core.exceptions import ReferenceNotFound
from ..employees.model import Employee, EmployeeView
from .model import Shift
from .repository import ShiftRepository

logger = logging.getLogger(__name__)


def resolve_shift_name(shifts: Iterable[Shift], shift_id: int) -> Optional[str]:
    for shift in shifts:
        if shift.shift_id == shift_id:
            return shift.shift_name
    return None


def resolve_employee_shifts(shifts: Iterable[Shift], employees: Sequence[Employee]) -> list[EmployeeView]:
    """Project employees into views with the shift name in place of the id.

    An id with no matching shift is kept as-is so the employee is still listed;
    a warning is logged because that means a dangling reference in the store.
    """
    shifts = list(shifts)

    out: list[EmployeeView] = []
    for emp in employees:
        shift = resolve_shift_name(shifts, emp.shift_id)
        if shift is None:
            logger.warning(
                "employee %s references unknown shift id %s; keeping raw id",
                emp.employee_id,
                emp.shift_id,
            )
            shift = emp.shift_id
        out.append(EmployeeView.from_employee(emp, shift=shift))
    return out


def validate_shift_exists(shifts: ShiftRepository, shift_name: str) -> int:
    shift = shifts.get_by_name(shift_name)
    if not shift:
        raise ReferenceNotFound(f"Shift not found: {shift_name}")
    return shift.shift_id
