from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import SalaryStatus


@dataclass(frozen=True)
class Allowances:
    hra: float = 0.0
    da: float = 0.0
    medical: float = 0.0
    ta: float = 0.0
    total: float = 0.0

    def to_dict(self) -> dict:
        return {"hra": self.hra, "da": self.da, "medical": self.medical, "ta": self.ta, "total": self.total}


@dataclass(frozen=True)
class Deductions:
    pf: float = 0.0
    tax: float = 0.0
    insurance: float = 0.0
    total: float = 0.0

    def to_dict(self) -> dict:
        return {"pf": self.pf, "tax": self.tax, "insurance": self.insurance, "total": self.total}


@dataclass(frozen=True)
class SalaryDraft:
    """Validated salary fields as submitted, before the store assigns an id."""

    employee_id: str
    basic_salary: float
    allowances: Allowances
    deductions: Deductions
    net_salary: float
    month: int
    year: int
    status: SalaryStatus = SalaryStatus.PENDING
    payment_date: Optional[date] = None


@dataclass(frozen=True)
class Salary:
    """Domain entity: one salary record of an employee for a month."""

    salary_id: int
    employee_id: str
    basic_salary: float
    allowances: Allowances
    deductions: Deductions
    net_salary: float
    month: int
    year: int
    status: SalaryStatus
    payment_date: Optional[date] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.salary_id,
            "employeeId": self.employee_id,
            "basicSalary": self.basic_salary,
            "allowances": self.allowances.to_dict(),
            "deductions": self.deductions.to_dict(),
            "netSalary": self.net_salary,
            "month": self.month,
            "year": self.year,
            "paymentDate": self.payment_date.strftime("%Y-%m-%d") if self.payment_date else None,
            "status": self.status.value,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
