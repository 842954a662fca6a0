"""Example: use the service layer directly (no Flask).

Controllers are thin; the business rules live in the services.
"""

import importlib

from config import get_settings_module

from employee_management.auth.model import Credential
from employee_management.container import build_container
from employee_management.core.enums import Role


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, secret_key=settings.SECRET_KEY)
    admin = Credential(user_id=1, role=Role.ADMIN)

    for row in container.attendance_service.get_report(actor=admin):
        print(row.to_dict())
    for salary in container.salary_service.list_salaries(actor=admin)[:5]:
        print(salary.to_dict())


if __name__ == "__main__":
    main()
