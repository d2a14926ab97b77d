"""Monthly attendance calendar.

Folds a sparse list of check-in events into one record per day of the month.
Pure function: no storage access, no clock.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable

from ..common.datetime_utils import days_in_month
from ..core.enums import AttendanceDayStatus, AttendanceEventType
from .model import AttendanceDayRecord, AttendanceEvent


def build_attendance_calendar(
    events: Iterable[AttendanceEvent],
    month: int,
    year: int,
    *,
    newest_first: bool = False,
) -> list[AttendanceDayRecord]:
    """Return exactly days_in_month(month, year) records, ascending by day.

    Only check-in events count. When several check-ins share a day, the last one
    in iteration order wins; callers pass events ordered by timestamp, so that
    is the latest check-in of the day.

    Events outside the requested month are ignored.
    """
    check_ins: dict[int, AttendanceEvent] = {}
    for event in events:
        if event.event_type != AttendanceEventType.CHECK_IN:
            continue
        ts = event.timestamp
        if ts.year != year or ts.month != month:
            continue
        check_ins[ts.day] = event

    records = []
    for day in range(1, days_in_month(month, year) + 1):
        event = check_ins.get(day)
        if event:
            records.append(
                AttendanceDayRecord(
                    day=date(year, month, day),
                    status=AttendanceDayStatus.PRESENT,
                    check_in_time=event.timestamp.time(),
                )
            )
        else:
            records.append(AttendanceDayRecord(day=date(year, month, day), status=AttendanceDayStatus.ABSENT))

    if newest_first:
        records.reverse()
    return records
