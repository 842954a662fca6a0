from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import SalaryStatus
from .model import Salary, SalaryDraft


class SalaryRepository(Protocol):
    def create(self, draft: SalaryDraft) -> int:
        raise NotImplementedError

    def get_by_id(self, salary_id: int) -> Optional[Salary]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Salary]:
        raise NotImplementedError

    def list_by_employee(self, employee_id: str) -> Sequence[Salary]:
        raise NotImplementedError

    def replace(self, salary_id: int, draft: SalaryDraft) -> bool:
        """Full-document replace of every client-supplied field."""

        raise NotImplementedError

    def update_status(self, salary_id: int, status: SalaryStatus) -> bool:
        raise NotImplementedError

    def delete(self, salary_id: int) -> bool:
        raise NotImplementedError
