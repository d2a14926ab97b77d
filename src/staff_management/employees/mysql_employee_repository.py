from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository


def _to_employee(r: Dict[str, Any]) -> Employee:
    return Employee(
        employee_id=int(r["employee_id"]),
        name=r["name"],
        contact_info=r["contact_info"],
        role=r["role"],
        sex=r.get("sex"),
        salary=float(r.get("salary") or 0),
        picture=r.get("picture"),
        shift_id=int(r["shift_id"]),
        password_hash=r.get("password_hash") or "",
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory, entity="employee", operation="list_all") as (_, cur):
            cur.execute(
                """
                SELECT employee_id, name, contact_info, role, sex, salary, picture, shift_id, password_hash
                FROM employees
                ORDER BY employee_id
                """
            )
            return [_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory, entity="employee", operation="get_by_id", ref=employee_id) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, name, contact_info, role, sex, salary, picture, shift_id, password_hash
                FROM employees
                WHERE employee_id=%s
                """,
                (employee_id,),
            )
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def create(
        self,
        *,
        name: str,
        password_hash: str,
        contact_info: str,
        role: str,
        sex: Optional[str],
        salary: float,
        picture: Optional[str],
        shift_id: int,
    ) -> int:
        with db_cursor(self._conn_factory, entity="employee", operation="create", ref=name) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(name, password_hash, contact_info, role, sex, salary, picture, shift_id)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (name, password_hash, contact_info, role, sex, salary, picture, shift_id),
            )
            return int(cur.lastrowid)

    def update(
        self,
        *,
        employee_id: int,
        name: str,
        password_hash: str,
        contact_info: str,
        role: str,
        sex: Optional[str],
        salary: float,
        picture: Optional[str],
        shift_id: int,
    ) -> bool:
        with db_cursor(self._conn_factory, entity="employee", operation="update", ref=employee_id) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET name=%s, password_hash=%s, contact_info=%s, role=%s, sex=%s,
                    salary=%s, picture=%s, shift_id=%s
                WHERE employee_id=%s
                """,
                (name, password_hash, contact_info, role, sex, salary, picture, shift_id, employee_id),
            )
            return cur.rowcount > 0

    def delete_by_id(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory, entity="employee", operation="delete", ref=employee_id) as (_, cur):
            cur.execute("DELETE FROM employees WHERE employee_id=%s", (employee_id,))
            return cur.rowcount > 0

    def count_by_shift(self, shift_id: int) -> int:
        with db_cursor(self._conn_factory, entity="employee", operation="count_by_shift", ref=shift_id) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM employees WHERE shift_id=%s", (shift_id,))
            r = fetchone(cur)
            return int(r["n"]) if r else 0
