from __future__ import annotations

from datetime import time
from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time
from .model import Shift
from .repository import ShiftRepository


def _to_shift(r: Dict[str, Any]) -> Shift:
    return Shift(
        shift_id=int(r["shift_id"]),
        shift_name=r["shift_name"],
        start_time=normalize_mysql_time(r.get("start_time")),
        end_time=normalize_mysql_time(r.get("end_time")),
    )


class MySQLShiftRepository(ShiftRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Shift]:
        with db_cursor(self._conn_factory, entity="shift", operation="list_all") as (_, cur):
            cur.execute(
                """
                SELECT shift_id, shift_name, start_time, end_time
                FROM shifts
                ORDER BY shift_id
                """
            )
            return [_to_shift(r) for r in fetchall(cur)]

    def get_by_id(self, shift_id: int) -> Optional[Shift]:
        with db_cursor(self._conn_factory, entity="shift", operation="get_by_id", ref=shift_id) as (_, cur):
            cur.execute(
                """
                SELECT shift_id, shift_name, start_time, end_time
                FROM shifts
                WHERE shift_id=%s
                """,
                (shift_id,),
            )
            r = fetchone(cur)
            return _to_shift(r) if r else None

    def get_by_name(self, shift_name: str) -> Optional[Shift]:
        with db_cursor(self._conn_factory, entity="shift", operation="get_by_name", ref=shift_name) as (_, cur):
            cur.execute(
                """
                SELECT shift_id, shift_name, start_time, end_time
                FROM shifts
                WHERE shift_name=%s
                LIMIT 1
                """,
                (shift_name,),
            )
            r = fetchone(cur)
            return _to_shift(r) if r else None

    def create(self, *, shift_name: str, start_time: Optional[time], end_time: Optional[time]) -> int:
        with db_cursor(self._conn_factory, entity="shift", operation="create", ref=shift_name) as (_, cur):
            cur.execute(
                "INSERT INTO shifts(shift_name, start_time, end_time) VALUES(%s,%s,%s)",
                (shift_name, start_time, end_time),
            )
            return int(cur.lastrowid)

    def rename(self, *, shift_id: int, shift_name: str) -> bool:
        with db_cursor(self._conn_factory, entity="shift", operation="rename", ref=shift_id) as (_, cur):
            cur.execute("UPDATE shifts SET shift_name=%s WHERE shift_id=%s", (shift_name, shift_id))
            return cur.rowcount > 0

    def delete_by_id(self, shift_id: int) -> bool:
        with db_cursor(self._conn_factory, entity="shift", operation="delete", ref=shift_id) as (_, cur):
            cur.execute("DELETE FROM shifts WHERE shift_id=%s", (shift_id,))
            return cur.rowcount > 0
