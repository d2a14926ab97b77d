from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from ..common.validators import (
    optional_text,
    require_length_between,
    require_non_empty,
    require_non_negative_number,
)
from ..core.constants import CONTACT_INFO_MAX_LENGTH, CONTACT_INFO_MIN_LENGTH, PIN_LENGTH


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee, as stored (shift is an id)."""

    employee_id: int
    name: str
    contact_info: str
    role: str
    sex: Optional[str]
    salary: float
    picture: Optional[str]
    shift_id: int
    password_hash: str = ""


@dataclass(frozen=True)
class EmployeeInput:
    """Validated write payload. `shift` is the shift name chosen by the caller."""

    name: str
    password: str
    contact_info: str
    role: str
    shift: str
    sex: Optional[str] = None
    salary: float = 0.0
    picture: Optional[str] = None

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "EmployeeInput":
        salary = data.get("salary")
        return cls(
            name=require_non_empty(data.get("name"), "Name"),
            password=require_length_between(data.get("password"), "Password", PIN_LENGTH, PIN_LENGTH),
            contact_info=require_length_between(
                data.get("contact_info"),
                "Contact info",
                CONTACT_INFO_MIN_LENGTH,
                CONTACT_INFO_MAX_LENGTH,
            ),
            role=require_non_empty(data.get("role"), "Role"),
            shift=require_non_empty(data.get("shift"), "Shift"),
            sex=optional_text(data.get("sex")),
            salary=0.0 if salary in (None, "") else require_non_negative_number(salary, "Salary"),
            # the upload form posts the picture as imageUrl
            picture=optional_text(data.get("picture", data.get("imageUrl"))),
        )


@dataclass(frozen=True)
class EmployeeView:
    """Read-model returned to callers: shift holds the name (or the raw id if unresolved)."""

    id: int
    name: str
    contact_info: str
    role: str
    shift: Union[str, int]
    sex: Optional[str]
    salary: float
    picture: Optional[str]

    @classmethod
    def from_employee(cls, emp: Employee, *, shift: Union[str, int]) -> "EmployeeView":
        return cls(
            id=emp.employee_id,
            name=emp.name,
            contact_info=emp.contact_info,
            role=emp.role,
            shift=shift,
            sex=emp.sex,
            salary=emp.salary,
            picture=emp.picture,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "contact_info": self.contact_info,
            "role": self.role,
            "shift": self.shift,
            "sex": self.sex,
            "salary": self.salary,
            "picture": self.picture,
        }
