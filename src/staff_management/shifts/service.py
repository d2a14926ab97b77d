from __future__ import annotations

import logging
from datetime import time
from typing import Optional, Sequence

from ..common.validators import require_non_empty
from ..core.exceptions import NotFound, ReferenceInUse, ValidationError
from ..employees.repository import EmployeeRepository
from .model import Shift
from .repository import ShiftRepository

logger = logging.getLogger(__name__)


class ShiftService:
    """Use case: manage shifts (admin)."""

    def __init__(self, shifts: ShiftRepository, employees: EmployeeRepository):
        self._shifts = shifts
        self._employees = employees

    def list_shifts(self) -> Sequence[Shift]:
        return self._shifts.list_all()

    def create_shift(
        self,
        shift_name: str,
        *,
        start_time: Optional[time] = None,
        end_time: Optional[time] = None,
    ) -> int:
        shift_name = require_non_empty(shift_name, "Shift name")
        if self._shifts.get_by_name(shift_name):
            raise ValidationError("Shift name already exists")

        shift_id = self._shifts.create(shift_name=shift_name, start_time=start_time, end_time=end_time)
        logger.info("created shift %s (%s)", shift_id, shift_name)
        return shift_id

    def rename_shift(self, shift_id: int, shift_name: str) -> None:
        shift_name = require_non_empty(shift_name, "Shift name")
        if not self._shifts.get_by_id(shift_id):
            raise NotFound("Shift not found")

        existing = self._shifts.get_by_name(shift_name)
        if existing and existing.shift_id != shift_id:
            raise ValidationError("Shift name already exists")

        if not self._shifts.rename(shift_id=shift_id, shift_name=shift_name):
            raise NotFound("Shift not found")

    def delete_shift(self, shift_id: int) -> None:
        if not self._shifts.get_by_id(shift_id):
            raise NotFound("Shift not found")

        in_use = self._employees.count_by_shift(shift_id)
        if in_use:
            raise ReferenceInUse(f"Shift is assigned to {in_use} employee(s)")

        if not self._shifts.delete_by_id(shift_id):
            raise NotFound("Shift not found")
        logger.info("deleted shift %s", shift_id)
