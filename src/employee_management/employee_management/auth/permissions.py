from __future__ import annotations

from ..core.exceptions import AuthorizationError
from .model import Credential


def require_admin(actor: Credential) -> None:
    if not actor.is_admin:
        raise AuthorizationError("Admin access required")
