from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_float
from .model import Department, Employee
from .repository import EmployeeRepository

_SELECT = """
    SELECT e.employee_id, e.user_id, e.name, e.email, e.salary,
           d.department_id, d.name AS department_name
    FROM employees e
    LEFT JOIN departments d ON d.department_id = e.department_id
"""


def to_employee(row: Dict[str, Any]) -> Employee:
    department = None
    if row.get("department_id") is not None:
        department = Department(department_id=int(row["department_id"]), name=row["department_name"])
    return Employee(
        employee_id=row["employee_id"],
        user_id=int(row["user_id"]) if row.get("user_id") is not None else None,
        name=row["name"],
        email=row["email"],
        department=department,
        salary=to_float(row.get("salary")),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_user_id(self, user_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE e.user_id=%s", (int(user_id),))
            row = fetchone(cur)
            return to_employee(row) if row else None

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} ORDER BY e.employee_id")
            return [to_employee(r) for r in fetchall(cur)]
