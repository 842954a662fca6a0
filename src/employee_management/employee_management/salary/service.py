from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from ..auth.model import Credential
from ..auth.permissions import require_admin
from ..common.validators import (
    optional_date,
    require_amount,
    require_choice,
    require_int_range,
    require_non_empty,
)
from ..core.constants import MAX_PAYROLL_YEAR, MIN_PAYROLL_YEAR
from ..core.enums import SalaryStatus
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .calculator.base import SalaryCalculator
from .calculator.standard_calculator import StandardSalaryCalculator
from .model import Allowances, Deductions, Salary, SalaryDraft
from .repository import SalaryRepository

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Salary record not found"


def _section(payload: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = payload.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValidationError(f"{key} must be an object")
    return value


class SalaryService:
    """Use cases: salary record CRUD plus the narrower status update."""

    def __init__(
        self,
        salaries: SalaryRepository,
        employees: EmployeeRepository,
        *,
        calculator: Optional[SalaryCalculator] = None,
    ):
        self._salaries = salaries
        self._employees = employees
        self._calculator = calculator or StandardSalaryCalculator()

    def build_draft(self, payload: Any) -> SalaryDraft:
        """Validate a request body; totals the client left out are computed."""
        if not isinstance(payload, dict):
            raise ValidationError("Salary details are required")

        raw_a = _section(payload, "allowances")
        raw_d = _section(payload, "deductions")

        hra = require_amount(raw_a.get("hra"), "allowances.hra", default=0.0)
        da = require_amount(raw_a.get("da"), "allowances.da", default=0.0)
        medical = require_amount(raw_a.get("medical"), "allowances.medical", default=0.0)
        ta = require_amount(raw_a.get("ta"), "allowances.ta", default=0.0)
        if raw_a.get("total") is None:
            a_total = require_amount(
                self._calculator.allowances_total(hra=hra, da=da, medical=medical, ta=ta), "allowances.total"
            )
        else:
            a_total = require_amount(raw_a.get("total"), "allowances.total")

        pf = require_amount(raw_d.get("pf"), "deductions.pf", default=0.0)
        tax = require_amount(raw_d.get("tax"), "deductions.tax", default=0.0)
        insurance = require_amount(raw_d.get("insurance"), "deductions.insurance", default=0.0)
        if raw_d.get("total") is None:
            d_total = require_amount(
                self._calculator.deductions_total(pf=pf, tax=tax, insurance=insurance), "deductions.total"
            )
        else:
            d_total = require_amount(raw_d.get("total"), "deductions.total")

        basic = require_amount(payload.get("basicSalary"), "basicSalary")
        if payload.get("netSalary") is None:
            net = require_amount(
                self._calculator.net_salary(basic_salary=basic, allowances_total=a_total, deductions_total=d_total),
                "netSalary",
            )
        else:
            net = require_amount(payload.get("netSalary"), "netSalary")

        status = payload.get("status")
        return SalaryDraft(
            employee_id=require_non_empty(payload.get("employeeId"), "employeeId"),
            basic_salary=basic,
            allowances=Allowances(hra=hra, da=da, medical=medical, ta=ta, total=a_total),
            deductions=Deductions(pf=pf, tax=tax, insurance=insurance, total=d_total),
            net_salary=net,
            month=require_int_range(payload.get("month"), "month", 1, 12),
            year=require_int_range(payload.get("year"), "year", MIN_PAYROLL_YEAR, MAX_PAYROLL_YEAR),
            status=SalaryStatus.PENDING if status is None else require_choice(status, SalaryStatus, "status"),
            payment_date=optional_date(payload.get("paymentDate"), "paymentDate"),
        )

    def _require_visible(self, actor: Credential, employee_id: str) -> None:
        if actor.is_admin:
            return
        own = self._employees.get_by_user_id(actor.user_id)
        if not own or own.employee_id != employee_id:
            raise AuthorizationError("You can only view your own salary records")

    def _get_existing(self, salary_id: int) -> Salary:
        salary = self._salaries.get_by_id(int(salary_id))
        if not salary:
            raise NotFoundError(NOT_FOUND_MESSAGE)
        return salary

    def add_salary(self, *, actor: Credential, payload: Any) -> Salary:
        require_admin(actor)
        draft = self.build_draft(payload)
        salary_id = self._salaries.create(draft)
        logger.info(
            "salary %s created for employee %s (%02d/%d) by user %s",
            salary_id,
            draft.employee_id,
            draft.month,
            draft.year,
            actor.user_id,
        )
        return self._get_existing(salary_id)

    def list_salaries(self, *, actor: Credential) -> Sequence[Salary]:
        require_admin(actor)
        return self._salaries.list_all()

    def get_salary(self, *, actor: Credential, salary_id: int) -> Salary:
        salary = self._get_existing(salary_id)
        self._require_visible(actor, salary.employee_id)
        return salary

    def list_by_employee(self, *, actor: Credential, employee_id: str) -> Sequence[Salary]:
        employee_id = require_non_empty(employee_id, "employeeId")
        self._require_visible(actor, employee_id)
        return self._salaries.list_by_employee(employee_id)

    def update_salary(self, *, actor: Credential, salary_id: int, payload: Any) -> Salary:
        require_admin(actor)
        self._get_existing(salary_id)
        draft = self.build_draft(payload)
        self._salaries.replace(int(salary_id), draft)
        logger.info("salary %s replaced by user %s", salary_id, actor.user_id)
        return self._get_existing(salary_id)

    def update_salary_status(self, *, actor: Credential, salary_id: int, status: Any) -> Salary:
        """Change only the status; any transition, including backwards, is accepted."""
        require_admin(actor)
        if status is None:
            raise ValidationError("status is required")
        new_status = require_choice(status, SalaryStatus, "status")

        current = self._get_existing(salary_id)
        self._salaries.update_status(int(salary_id), new_status)
        logger.info(
            "salary %s status %s -> %s by user %s",
            salary_id,
            current.status.value,
            new_status.value,
            actor.user_id,
        )
        return self._get_existing(salary_id)

    def delete_salary(self, *, actor: Credential, salary_id: int) -> None:
        require_admin(actor)
        if not self._salaries.delete(int(salary_id)):
            raise NotFoundError(NOT_FOUND_MESSAGE)
        logger.info("salary %s deleted by user %s", salary_id, actor.user_id)
