from __future__ import annotations

from .base import SalaryCalculator


class StandardSalaryCalculator(SalaryCalculator):
    """Standard rule: totals are plain sums, net = basic + allowances - deductions."""

    def allowances_total(self, *, hra: float, da: float, medical: float, ta: float) -> float:
        return round(hra + da + medical + ta, 2)

    def deductions_total(self, *, pf: float, tax: float, insurance: float) -> float:
        return round(pf + tax + insurance, 2)

    def net_salary(self, *, basic_salary: float, allowances_total: float, deductions_total: float) -> float:
        return round(basic_salary + allowances_total - deductions_total, 2)
