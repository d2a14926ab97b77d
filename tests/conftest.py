from __future__ import annotations

from datetime import datetime, time
from typing import Optional

import pytest

from staff_management.attendance.model import AttendanceEvent
from staff_management.attendance.service import AttendanceService
from staff_management.core.enums import AttendanceEventType
from staff_management.core.exceptions import StorageError
from staff_management.employees.model import Employee
from staff_management.employees.service import EmployeeService
from staff_management.shifts.model import Shift
from staff_management.shifts.service import ShiftService


class InMemoryShifts:
    def __init__(self, shifts: Optional[dict[int, Shift]] = None):
        self.shifts: dict[int, Shift] = dict(shifts or {})
        self.fail = False

    def list_all(self):
        if self.fail:
            raise StorageError()
        return [self.shifts[k] for k in sorted(self.shifts)]

    def get_by_id(self, shift_id: int) -> Optional[Shift]:
        return self.shifts.get(shift_id)

    def get_by_name(self, shift_name: str) -> Optional[Shift]:
        # Same as the utf8mb4_unicode_ci lookup in MySQL: case-insensitive.
        for s in self.shifts.values():
            if s.shift_name.casefold() == shift_name.casefold():
                return s
        return None

    def create(self, *, shift_name: str, start_time=None, end_time=None) -> int:
        shift_id = max(self.shifts, default=0) + 1
        self.shifts[shift_id] = Shift(shift_id, shift_name, start_time, end_time)
        return shift_id

    def rename(self, *, shift_id: int, shift_name: str) -> bool:
        s = self.shifts.get(shift_id)
        if not s:
            return False
        self.shifts[shift_id] = Shift(shift_id, shift_name, s.start_time, s.end_time)
        return True

    def delete_by_id(self, shift_id: int) -> bool:
        return self.shifts.pop(shift_id, None) is not None


class InMemoryEmployees:
    def __init__(self):
        self.employees: dict[int, Employee] = {}
        self._id = 0
        self.fail = False

    def list_all(self):
        if self.fail:
            raise StorageError()
        return [self.employees[k] for k in sorted(self.employees)]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self.employees.get(employee_id)

    def create(self, **fields) -> int:
        if self.fail:
            raise StorageError()
        self._id += 1
        self.employees[self._id] = Employee(employee_id=self._id, **fields)
        return self._id

    def update(self, *, employee_id: int, **fields) -> bool:
        if employee_id not in self.employees:
            return False
        self.employees[employee_id] = Employee(employee_id=employee_id, **fields)
        return True

    def delete_by_id(self, employee_id: int) -> bool:
        return self.employees.pop(employee_id, None) is not None

    def count_by_shift(self, shift_id: int) -> int:
        return sum(1 for e in self.employees.values() if e.shift_id == shift_id)


class InMemoryAttendance:
    def __init__(self):
        self.events: list[AttendanceEvent] = []
        self._id = 0
        self.last_range = None
        self.fail = False

    def add(self, employee_id: int, timestamp: datetime, event_type=AttendanceEventType.CHECK_IN) -> int:
        return self.create_event(employee_id=employee_id, timestamp=timestamp, event_type=event_type)

    def list_for_employee(self, employee_id: int, *, start: datetime, end: datetime):
        if self.fail:
            raise StorageError()
        self.last_range = (start, end)
        items = [e for e in self.events if e.employee_id == employee_id and start <= e.timestamp <= end]
        items.sort(key=lambda e: (e.timestamp, e.event_id))
        return items

    def create_event(self, *, employee_id: int, timestamp: datetime, event_type: AttendanceEventType) -> int:
        self._id += 1
        self.events.append(AttendanceEvent(self._id, employee_id, timestamp, event_type))
        return self._id

    def delete_for_employee(self, employee_id: int) -> int:
        before = len(self.events)
        self.events = [e for e in self.events if e.employee_id != employee_id]
        return before - len(self.events)


class FakeCursor:
    def __init__(self, rows=None, error: Optional[Exception] = None):
        self.rows = list(rows or [])
        self.error = error
        self.executed: list[tuple] = []
        self.rowcount = 0
        self.lastrowid = 0
        self.closed = False

    def execute(self, sql, params=None):
        self.executed.append((sql, params))
        if self.error:
            raise self.error

    def fetchall(self):
        return self.rows

    def fetchone(self):
        return self.rows[0] if self.rows else None

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, cursor: FakeCursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary: bool = False):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnFactory:
    """Stands in for DatabaseConnection; hands out one scripted connection."""

    def __init__(self, rows=None, error: Optional[Exception] = None, connect_error: Optional[Exception] = None):
        self.cursor = FakeCursor(rows, error)
        self.conn = FakeConnection(self.cursor)
        self.connect_error = connect_error

    def connect(self):
        if self.connect_error:
            raise self.connect_error
        return self.conn


@pytest.fixture
def make_conn_factory():
    return FakeConnFactory


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 15, 9, 5, 0)


@pytest.fixture
def shifts_repo() -> InMemoryShifts:
    return InMemoryShifts({1: Shift(1, "Day", time(8, 0), time(16, 0))})


@pytest.fixture
def employees_repo() -> InMemoryEmployees:
    return InMemoryEmployees()


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def employee_service(employees_repo, shifts_repo, attendance_repo) -> EmployeeService:
    return EmployeeService(employees_repo, shifts_repo, attendance_repo)


@pytest.fixture
def shift_service(shifts_repo, employees_repo) -> ShiftService:
    return ShiftService(shifts_repo, employees_repo)


@pytest.fixture
def attendance_service(attendance_repo, employees_repo) -> AttendanceService:
    return AttendanceService(attendance_repo, employees_repo)


@pytest.fixture
def employee_payload() -> dict:
    return {
        "name": "Alice",
        "password": "1234",
        "contact_info": "0912345678",
        "role": "Cashier",
        "shift": "Day",
        "sex": "female",
        "salary": "1500",
        "imageUrl": "https://cdn.example.com/alice.png",
    }
