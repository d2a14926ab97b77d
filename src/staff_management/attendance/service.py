from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Union

from ..common.datetime_utils import month_bounds, normalize_month, normalize_year, now_local
from ..core.enums import AttendanceEventType
from ..core.exceptions import NotFound
from ..employees.repository import EmployeeRepository
from .calendar import build_attendance_calendar
from .model import AttendanceDayRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, employees: EmployeeRepository):
        self._attendance = attendance
        self._employees = employees

    def get_attendance(
        self,
        employee_id: int,
        month: Union[int, str],
        year: Union[int, str],
        *,
        newest_first: bool = False,
    ) -> list[AttendanceDayRecord]:
        """Day-by-day attendance of one employee for one calendar month.

        `month` may be a 1-based index or an English month name. An employee with
        no events gets an all-absent month; an unknown employee raises NotFound.
        """
        month_i = normalize_month(month)
        year_i = normalize_year(year)

        if not self._employees.get_by_id(employee_id):
            raise NotFound("Employee not found")

        start, end = month_bounds(month_i, year_i)
        events = self._attendance.list_for_employee(employee_id, start=start, end=end)
        return build_attendance_calendar(events, month_i, year_i, newest_first=newest_first)

    def record_check_in(self, employee_id: int, *, now: Optional[datetime] = None) -> int:
        now = now or now_local()

        if not self._employees.get_by_id(employee_id):
            raise NotFound("Employee not found")

        event_id = self._attendance.create_event(
            employee_id=employee_id,
            timestamp=now,
            event_type=AttendanceEventType.CHECK_IN,
        )
        logger.info("employee %s checked in at %s", employee_id, now.isoformat(timespec="seconds"))
        return event_id
