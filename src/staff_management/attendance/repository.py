from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from ..core.enums import AttendanceEventType
from .model import AttendanceEvent


class AttendanceRepository(Protocol):
    def list_for_employee(self, employee_id: int, *, start: datetime, end: datetime) -> Sequence[AttendanceEvent]:
        """Events with start <= timestamp <= end, ordered by timestamp ascending."""

        raise NotImplementedError

    def create_event(self, *, employee_id: int, timestamp: datetime, event_type: AttendanceEventType) -> int:
        raise NotImplementedError

    def delete_for_employee(self, employee_id: int) -> int:
        """Delete every event of the employee; returns how many were removed."""

        raise NotImplementedError
