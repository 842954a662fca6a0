from __future__ import annotations

import logging
from dataclasses import dataclass

from werkzeug.security import check_password_hash

from ..common.validators import require_non_empty
from ..core.exceptions import AuthenticationError
from .model import Credential, User
from .repository import UserRepository
from .tokens import TokenService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    token: str
    user: User


class AuthService:
    """Use cases: login and bearer-token resolution."""

    def __init__(self, users: UserRepository, tokens: TokenService):
        self._users = users
        self._tokens = tokens

    def authenticate(self, email: str, password: str) -> LoginResult:
        email = require_non_empty(email, "Email")
        password = require_non_empty(password, "Password")

        user = self._users.get_by_email(email)
        if not user or not user.is_active:
            raise AuthenticationError("Invalid email or password")

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # placeholder or corrupted hashes
            ok = False

        if not ok:
            raise AuthenticationError("Invalid email or password")

        token = self._tokens.issue(Credential(user_id=user.user_id, role=user.role))
        logger.info("user %s logged in", user.user_id)
        return LoginResult(token=token, user=user)

    def resolve(self, token: str) -> Credential:
        """Verify the token and re-check the user, so deactivated accounts lose access immediately."""
        claimed = self._tokens.verify(token)
        user = self._users.get_by_id(claimed.user_id)
        if not user or not user.is_active:
            raise AuthenticationError("User not found")
        return Credential(user_id=user.user_id, role=user.role)

    def current_user(self, actor: Credential) -> User:
        user = self._users.get_by_id(actor.user_id)
        if not user:
            raise AuthenticationError("User not found")
        return user
