from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .auth.mysql_user_repository import MySQLUserRepository
from .auth.repository import UserRepository
from .auth.service import AuthService
from .auth.tokens import TokenService
from .core.constants import DEFAULT_TOKEN_MAX_AGE_SECONDS
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .salary.mysql_salary_repository import MySQLSalaryRepository
from .salary.repository import SalaryRepository
from .salary.service import SalaryService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    users_repo: UserRepository
    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    salaries_repo: SalaryRepository

    auth_service: AuthService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    salary_service: SalaryService


def wire_services(
    *,
    users_repo: UserRepository,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    salaries_repo: SalaryRepository,
    secret_key: str,
    token_max_age_seconds: int = DEFAULT_TOKEN_MAX_AGE_SECONDS,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Compose services over any repository implementations (MySQL or in-memory)."""
    tokens = TokenService(secret_key, max_age_seconds=token_max_age_seconds)

    return Container(
        conn=conn,
        users_repo=users_repo,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        salaries_repo=salaries_repo,
        auth_service=AuthService(users_repo, tokens),
        employee_service=EmployeeService(employees_repo),
        attendance_service=AttendanceService(attendance_repo),
        salary_service=SalaryService(salaries_repo, employees_repo),
    )


def build_container(
    *,
    db_config: dict,
    secret_key: str,
    token_max_age_seconds: int = DEFAULT_TOKEN_MAX_AGE_SECONDS,
) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    return wire_services(
        users_repo=MySQLUserRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        salaries_repo=MySQLSalaryRepository(conn),
        secret_key=secret_key,
        token_max_age_seconds=token_max_age_seconds,
        conn=conn,
    )
