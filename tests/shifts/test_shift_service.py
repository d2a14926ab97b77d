import pytest

from staff_management.core.exceptions import NotFound, ReferenceInUse, ValidationError
from staff_management.employees.model import EmployeeInput


def test_create_shift(shift_service, shifts_repo):
    shift_id = shift_service.create_shift(" Night ")

    assert shifts_repo.get_by_id(shift_id).shift_name == "Night"
    assert [s.shift_name for s in shift_service.list_shifts()] == ["Day", "Night"]


def test_create_duplicate_or_empty_name_is_rejected(shift_service):
    with pytest.raises(ValidationError):
        shift_service.create_shift("Day")
    with pytest.raises(ValidationError):
        shift_service.create_shift("  ")


def test_rename_shift(shift_service, shifts_repo):
    shift_service.rename_shift(1, "Morning")

    assert shifts_repo.get_by_id(1).shift_name == "Morning"
    with pytest.raises(NotFound):
        shift_service.rename_shift(9, "Evening")


def test_rename_to_existing_name_is_rejected(shift_service):
    shift_service.create_shift("Night")

    with pytest.raises(ValidationError):
        shift_service.rename_shift(1, "Night")


def test_delete_unused_shift(shift_service, shifts_repo):
    shift_id = shift_service.create_shift("Night")

    shift_service.delete_shift(shift_id)

    assert shifts_repo.get_by_id(shift_id) is None


def test_delete_shift_in_use_is_rejected(shift_service, shifts_repo, employee_service, employee_payload):
    employee_service.create_employee(EmployeeInput.from_payload(employee_payload))

    with pytest.raises(ReferenceInUse):
        shift_service.delete_shift(1)

    assert shifts_repo.get_by_id(1) is not None


def test_delete_missing_shift(shift_service):
    with pytest.raises(NotFound):
        shift_service.delete_shift(77)
