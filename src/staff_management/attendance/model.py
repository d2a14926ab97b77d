from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional, Union

from ..core.enums import AttendanceDayStatus, AttendanceEventType


@dataclass(frozen=True)
class AttendanceEvent:
    """Domain entity: an append-only attendance event (check-in, check-out)."""

    event_id: int
    employee_id: int
    timestamp: datetime
    # Unknown types read from storage stay as their raw string.
    event_type: Union[AttendanceEventType, str]


@dataclass(frozen=True)
class AttendanceDayRecord:
    """Derived per-day status for a calendar month. Never persisted."""

    day: date
    status: AttendanceDayStatus
    check_in_time: Optional[time] = None

    def to_dict(self) -> dict:
        return {
            "date": self.day.strftime("%Y-%m-%d"),
            "status": self.status.value,
            "time": self.check_in_time.strftime("%H:%M:%S") if self.check_in_time else None,
        }
