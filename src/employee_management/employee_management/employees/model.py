from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Department:
    department_id: int
    name: str

    def to_dict(self) -> dict:
        return {"id": self.department_id, "name": self.name}


@dataclass(frozen=True)
class Employee:
    """Employee identity record, provisioned by onboarding.

    Attendance entries and salary records reference it by ``employee_id`` code.
    """

    employee_id: str
    user_id: Optional[int]
    name: str
    email: str
    department: Optional[Department]
    salary: float

    def to_dict(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "userId": self.user_id,
            "name": self.name,
            "email": self.email,
            "department": self.department.to_dict() if self.department else None,
            "salary": self.salary,
        }

    def to_summary_dict(self) -> dict:
        """Subset used when resolving attendance entries."""
        return {
            "employeeId": self.employee_id,
            "name": self.name,
            "department": self.department.to_dict() if self.department else None,
        }
