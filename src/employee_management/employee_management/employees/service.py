from __future__ import annotations

from typing import Sequence

from ..auth.model import Credential
from ..auth.permissions import require_admin
from ..core.exceptions import AuthorizationError, NotFoundError
from .model import Employee
from .repository import EmployeeRepository


class EmployeeService:
    """Use cases: employee profile lookup (dashboard) and listing (admin)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def get_profile(self, *, actor: Credential, user_id: int) -> Employee:
        if not actor.is_admin and actor.user_id != int(user_id):
            raise AuthorizationError("You can only view your own profile")

        employee = self._employees.get_by_user_id(int(user_id))
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def get_my_profile(self, *, actor: Credential) -> Employee:
        return self.get_profile(actor=actor, user_id=actor.user_id)

    def list_employees(self, *, actor: Credential) -> Sequence[Employee]:
        require_admin(actor)
        return self._employees.list_all()
