from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .shifts.mysql_shift_repository import MySQLShiftRepository
from .shifts.repository import ShiftRepository
from .shifts.service import ShiftService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    shifts_repo: ShiftRepository
    attendance_repo: AttendanceRepository

    employee_service: EmployeeService
    shift_service: ShiftService
    attendance_service: AttendanceService


def build_services(
    *,
    employees_repo: EmployeeRepository,
    shifts_repo: ShiftRepository,
    attendance_repo: AttendanceRepository,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    return Container(
        conn=conn,
        employees_repo=employees_repo,
        shifts_repo=shifts_repo,
        attendance_repo=attendance_repo,
        employee_service=EmployeeService(employees_repo, shifts_repo, attendance_repo),
        shift_service=ShiftService(shifts_repo, employees_repo),
        attendance_service=AttendanceService(attendance_repo, employees_repo),
    )


def build_container(*, db_config: dict) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
    )
    conn = DatabaseConnection.get_instance(config)

    return build_services(
        employees_repo=MySQLEmployeeRepository(conn),
        shifts_repo=MySQLShiftRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        conn=conn,
    )
