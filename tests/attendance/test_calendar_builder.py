from datetime import date, datetime, time

import pytest

from staff_management.attendance.calendar import build_attendance_calendar
from staff_management.attendance.model import AttendanceEvent
from staff_management.core.enums import AttendanceDayStatus, AttendanceEventType


def _check_in(event_id: int, ts: datetime) -> AttendanceEvent:
    return AttendanceEvent(event_id=event_id, employee_id=1, timestamp=ts, event_type=AttendanceEventType.CHECK_IN)


def test_empty_month_is_all_absent():
    records = build_attendance_calendar([], 4, 2024)

    assert len(records) == 30
    assert all(r.status == AttendanceDayStatus.ABSENT for r in records)
    assert all(r.check_in_time is None for r in records)


@pytest.mark.parametrize("year, expected", [(2024, 29), (2023, 28), (2000, 29), (1900, 28)])
def test_february_length_follows_queried_year(year, expected):
    assert len(build_attendance_calendar([], 2, year)) == expected


def test_days_are_unique_and_consecutive():
    records = build_attendance_calendar([], 12, 2025)

    assert [r.day for r in records] == [date(2025, 12, d) for d in range(1, 32)]


def test_check_ins_mark_days_present():
    events = [_check_in(1, datetime(2024, 3, 1, 9, 0)), _check_in(2, datetime(2024, 3, 15, 9, 5))]

    records = build_attendance_calendar(events, 3, 2024)

    assert len(records) == 31
    present = {r.day.day: r.check_in_time for r in records if r.status == AttendanceDayStatus.PRESENT}
    assert present == {1: time(9, 0), 15: time(9, 5)}
    assert sum(1 for r in records if r.status == AttendanceDayStatus.ABSENT) == 29


def test_same_day_last_processed_event_wins():
    events = [_check_in(1, datetime(2024, 3, 5, 8, 0)), _check_in(2, datetime(2024, 3, 5, 12, 30))]

    assert build_attendance_calendar(events, 3, 2024)[4].check_in_time == time(12, 30)
    assert build_attendance_calendar(list(reversed(events)), 3, 2024)[4].check_in_time == time(8, 0)


def test_non_check_in_events_are_ignored():
    events = [
        AttendanceEvent(1, 1, datetime(2024, 3, 2, 17, 0), AttendanceEventType.CHECK_OUT),
    ]

    records = build_attendance_calendar(events, 3, 2024)

    assert records[1].status == AttendanceDayStatus.ABSENT


def test_events_from_another_month_are_ignored():
    events = [_check_in(1, datetime(2024, 4, 2, 9, 0))]

    records = build_attendance_calendar(events, 3, 2024)

    assert records[1].status == AttendanceDayStatus.ABSENT


def test_newest_first_reverses_day_order():
    records = build_attendance_calendar([], 1, 2024, newest_first=True)

    assert records[0].day == date(2024, 1, 31)
    assert records[-1].day == date(2024, 1, 1)


def test_record_to_dict():
    records = build_attendance_calendar([_check_in(1, datetime(2024, 3, 1, 9, 0, 7))], 3, 2024)

    assert records[0].to_dict() == {"date": "2024-03-01", "status": "present", "time": "09:00:07"}
    assert records[1].to_dict() == {"date": "2024-03-02", "status": "absent", "time": None}
