from __future__ import annotations

from abc import ABC, abstractmethod


class SalaryCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll totals)."""

    @abstractmethod
    def allowances_total(self, *, hra: float, da: float, medical: float, ta: float) -> float:
        raise NotImplementedError

    @abstractmethod
    def deductions_total(self, *, pf: float, tax: float, insurance: float) -> float:
        raise NotImplementedError

    @abstractmethod
    def net_salary(self, *, basic_salary: float, allowances_total: float, deductions_total: float) -> float:
        raise NotImplementedError
