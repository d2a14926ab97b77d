"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the rules live in the services.
"""

import importlib

from config import get_settings_module

from staff_management.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    for view in container.employee_service.list_employees():
        print(view.to_dict())

    for record in container.attendance_service.get_attendance(1, "March", 2024, newest_first=True):
        print(record.to_dict())


if __name__ == "__main__":
    main()
