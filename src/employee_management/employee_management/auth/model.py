from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Login identity. Pure data object, no DB access."""

    user_id: int
    name: str
    email: str
    password_hash: str
    role: Role
    is_active: bool = True

    def to_public_dict(self) -> dict:
        return {"id": self.user_id, "name": self.name, "email": self.email, "role": self.role.value}


@dataclass(frozen=True)
class Credential:
    """Request-scoped identity resolved from a bearer token.

    Passed explicitly from the view into each service call.
    """

    user_id: int
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
