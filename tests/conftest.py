from __future__ import annotations

import importlib
from dataclasses import replace
from datetime import date, datetime
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from employee_management.attendance.model import (
    AttendanceEntry,
    AttendanceReportRow,
    AttendanceSheet,
    ResolvedAttendanceEntry,
)
from employee_management.auth.model import Credential, User
from employee_management.container import wire_services
from employee_management.core.enums import AttendanceStatus, Role, SalaryStatus
from employee_management.employees.model import Department, Employee
from employee_management.main import create_app
from employee_management.salary.model import Salary, SalaryDraft

TEST_SECRET = "test-secret"


class InMemoryUsers:
    def __init__(self, users: list[User]):
        self._by_id = {u.user_id: u for u in users}

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._by_id.get(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self._by_id.values() if u.email == email), None)

    def deactivate(self, user_id: int) -> None:
        self._by_id[user_id] = replace(self._by_id[user_id], is_active=False)


class InMemoryEmployees:
    def __init__(self, employees: list[Employee]):
        self._by_code = {e.employee_id: e for e in employees}

    def get_by_user_id(self, user_id: int) -> Optional[Employee]:
        return next((e for e in self._by_code.values() if e.user_id == user_id), None)

    def by_code(self, employee_id: str) -> Optional[Employee]:
        return self._by_code.get(employee_id)

    def list_all(self):
        return sorted(self._by_code.values(), key=lambda e: e.employee_id)


class InMemoryAttendance:
    """One sheet per date; replacing a date swaps the whole entry list."""

    def __init__(self, employees: InMemoryEmployees):
        self._employees = employees
        self._sheets: dict[date, tuple[int, list[AttendanceEntry]]] = {}
        self._id = 0

    def replace_for_date(self, *, work_date: date, entries) -> int:
        existing = self._sheets.get(work_date)
        if existing:
            attendance_id = existing[0]
        else:
            self._id += 1
            attendance_id = self._id
        self._sheets[work_date] = (attendance_id, list(entries))
        return attendance_id

    def get_by_date(self, work_date: date) -> Optional[AttendanceSheet]:
        found = self._sheets.get(work_date)
        if not found:
            return None
        attendance_id, entries = found
        return AttendanceSheet(
            attendance_id=attendance_id,
            work_date=work_date,
            records=[
                ResolvedAttendanceEntry(
                    employee_id=e.employee_id,
                    status=e.status,
                    employee=self._employees.by_code(e.employee_id),
                )
                for e in entries
            ],
        )

    def daily_report(self):
        return [
            AttendanceReportRow(
                work_date=d,
                present=sum(1 for e in entries if e.status == AttendanceStatus.PRESENT),
                absent=sum(1 for e in entries if e.status == AttendanceStatus.ABSENT),
            )
            for d, (_, entries) in sorted(self._sheets.items())
        ]


class InMemorySalaries:
    def __init__(self):
        self._rows: dict[int, Salary] = {}
        self._id = 0

    @staticmethod
    def _from_draft(salary_id: int, d: SalaryDraft, created_at: datetime) -> Salary:
        return Salary(
            salary_id=salary_id,
            employee_id=d.employee_id,
            basic_salary=d.basic_salary,
            allowances=d.allowances,
            deductions=d.deductions,
            net_salary=d.net_salary,
            month=d.month,
            year=d.year,
            status=d.status,
            payment_date=d.payment_date,
            created_at=created_at,
            updated_at=created_at,
        )

    def create(self, draft: SalaryDraft) -> int:
        self._id += 1
        self._rows[self._id] = self._from_draft(self._id, draft, datetime(2024, 2, 1, 9, 0))
        return self._id

    def get_by_id(self, salary_id: int) -> Optional[Salary]:
        return self._rows.get(salary_id)

    def list_all(self):
        return sorted(self._rows.values(), key=lambda s: (s.year, s.month, s.salary_id), reverse=True)

    def list_by_employee(self, employee_id: str):
        return [s for s in self.list_all() if s.employee_id == employee_id]

    def replace(self, salary_id: int, draft: SalaryDraft) -> bool:
        current = self._rows.get(salary_id)
        if not current:
            return False
        self._rows[salary_id] = self._from_draft(salary_id, draft, current.created_at)
        return True

    def update_status(self, salary_id: int, status: SalaryStatus) -> bool:
        current = self._rows.get(salary_id)
        if not current:
            return False
        self._rows[salary_id] = replace(current, status=status)
        return True

    def delete(self, salary_id: int) -> bool:
        return self._rows.pop(salary_id, None) is not None


ENGINEERING = Department(department_id=1, name="Engineering")


@pytest.fixture
def admin() -> Credential:
    return Credential(user_id=1, role=Role.ADMIN)


@pytest.fixture
def staff() -> Credential:
    return Credential(user_id=2, role=Role.EMPLOYEE)


@pytest.fixture
def users_repo() -> InMemoryUsers:
    return InMemoryUsers(
        [
            User(1, "Admin Demo", "admin@example.com", generate_password_hash("admin123"), Role.ADMIN),
            User(2, "Asha Menon", "asha@example.com", generate_password_hash("employee123"), Role.EMPLOYEE),
            User(3, "Ravi Kumar", "ravi@example.com", generate_password_hash("employee123"), Role.EMPLOYEE),
        ]
    )


@pytest.fixture
def employees_repo() -> InMemoryEmployees:
    return InMemoryEmployees(
        [
            Employee("E1", 2, "Asha Menon", "asha@example.com", ENGINEERING, 50000.0),
            Employee("E2", 3, "Ravi Kumar", "ravi@example.com", None, 42000.0),
        ]
    )


@pytest.fixture
def attendance_repo(employees_repo) -> InMemoryAttendance:
    return InMemoryAttendance(employees_repo)


@pytest.fixture
def salaries_repo() -> InMemorySalaries:
    return InMemorySalaries()


@pytest.fixture
def container(users_repo, employees_repo, attendance_repo, salaries_repo):
    return wire_services(
        users_repo=users_repo,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        salaries_repo=salaries_repo,
        secret_key=TEST_SECRET,
    )


@pytest.fixture
def app(container):
    return create_app(container=container, settings=importlib.import_module("config.testing"))


@pytest.fixture
def client(app):
    return app.test_client()


def _login(client, email: str, password: str) -> dict:
    resp = client.post("/api/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.get_json()
    return {"Authorization": f"Bearer {resp.get_json()['token']}"}


@pytest.fixture
def admin_headers(client) -> dict:
    return _login(client, "admin@example.com", "admin123")


@pytest.fixture
def staff_headers(client) -> dict:
    return _login(client, "asha@example.com", "employee123")


@pytest.fixture
def sample_salary() -> dict:
    return {
        "employeeId": "E1",
        "basicSalary": 50000,
        "allowances": {"hra": 5000, "da": 2000, "medical": 1000, "ta": 500, "total": 8500},
        "deductions": {"pf": 2000, "tax": 1000, "insurance": 500, "total": 3500},
        "netSalary": 55000,
        "month": 1,
        "year": 2024,
        "status": "pending",
    }
