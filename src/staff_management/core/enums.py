from __future__ import annotations

from enum import Enum


class AttendanceEventType(str, Enum):
    """Kind of an attendance event. Only check-ins feed the monthly calendar."""

    CHECK_IN = "check-in"
    CHECK_OUT = "check-out"


class AttendanceDayStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
