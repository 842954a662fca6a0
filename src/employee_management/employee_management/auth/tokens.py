from __future__ import annotations

from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer

from ..core.constants import DEFAULT_TOKEN_MAX_AGE_SECONDS, TOKEN_SALT
from ..core.enums import Role
from ..core.exceptions import AuthenticationError
from .model import Credential


class TokenService:
    """Issues and verifies signed, time-limited bearer tokens."""

    def __init__(self, secret_key: str, *, max_age_seconds: int = DEFAULT_TOKEN_MAX_AGE_SECONDS):
        self._serializer = URLSafeTimedSerializer(secret_key, salt=TOKEN_SALT)
        self._max_age = int(max_age_seconds)

    def issue(self, credential: Credential) -> str:
        return self._serializer.dumps({"uid": credential.user_id, "role": credential.role.value})

    def verify(self, token: str) -> Credential:
        try:
            payload = self._serializer.loads(token, max_age=self._max_age)
        except SignatureExpired:
            raise AuthenticationError("Token expired")
        except BadSignature:
            raise AuthenticationError("Invalid token")

        try:
            return Credential(user_id=int(payload["uid"]), role=Role(payload["role"]))
        except (KeyError, TypeError, ValueError):
            raise AuthenticationError("Invalid token")
