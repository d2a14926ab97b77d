from __future__ import annotations

from datetime import datetime
from typing import Any, Sequence, Union

from ..core.enums import AttendanceEventType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceEvent
from .repository import AttendanceRepository


def _event_type(value: Any) -> Union[AttendanceEventType, str]:
    try:
        return AttendanceEventType(value)
    except ValueError:
        return str(value)


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(self, employee_id: int, *, start: datetime, end: datetime) -> Sequence[AttendanceEvent]:
        with db_cursor(
            self._conn_factory, entity="attendance", operation="list_for_employee", ref=employee_id
        ) as (_, cur):
            cur.execute(
                """
                SELECT event_id, employee_id, event_time, event_type
                FROM attendance_events
                WHERE employee_id=%s AND event_time >= %s AND event_time <= %s
                ORDER BY event_time, event_id
                """,
                (employee_id, start, end),
            )
            return [
                AttendanceEvent(
                    event_id=int(r["event_id"]),
                    employee_id=int(r["employee_id"]),
                    timestamp=r["event_time"],
                    event_type=_event_type(r["event_type"]),
                )
                for r in fetchall(cur)
            ]

    def create_event(self, *, employee_id: int, timestamp: datetime, event_type: AttendanceEventType) -> int:
        with db_cursor(self._conn_factory, entity="attendance", operation="create_event", ref=employee_id) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_events(employee_id, event_time, event_type)
                VALUES(%s,%s,%s)
                """,
                (employee_id, timestamp, event_type.value),
            )
            return int(cur.lastrowid)

    def delete_for_employee(self, employee_id: int) -> int:
        with db_cursor(
            self._conn_factory, entity="attendance", operation="delete_for_employee", ref=employee_id
        ) as (_, cur):
            cur.execute("DELETE FROM attendance_events WHERE employee_id=%s", (employee_id,))
            return int(cur.rowcount)
