from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): the service layer depends on this interface, not on a concrete DB.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

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
        raise NotImplementedError

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
        """Replace every field of the row; False when no row has that id."""

        raise NotImplementedError

    def delete_by_id(self, employee_id: int) -> bool:
        raise NotImplementedError

    def count_by_shift(self, shift_id: int) -> int:
        raise NotImplementedError
