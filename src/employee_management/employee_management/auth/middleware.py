from __future__ import annotations

import logging
from functools import wraps

from flask import request

from ..common.responses import INTERNAL_ERROR_MESSAGE, domain_failure, fail
from ..core.exceptions import AuthenticationError, DomainError
from .service import AuthService

logger = logging.getLogger(__name__)


def bearer_token_from_request() -> str:
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthenticationError("No token provided")
    return token.strip()


def make_token_required(auth_service: AuthService):
    """Build a view decorator that resolves the bearer token into a Credential.

    The credential is handed to the view as the ``credential`` keyword argument.
    """

    def token_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                credential = auth_service.resolve(bearer_token_from_request())
            except DomainError as e:
                return domain_failure(e)
            except Exception:
                logger.exception("Error verifying token")
                return fail(INTERNAL_ERROR_MESSAGE, 500)
            return view(*args, credential=credential, **kwargs)

        return wrapper

    return token_required
