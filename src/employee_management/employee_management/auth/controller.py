from __future__ import annotations

import logging

from flask import Flask, request

from ..common.responses import INTERNAL_ERROR_MESSAGE, domain_failure, fail, ok
from ..core.exceptions import DomainError
from ..container import Container
from .middleware import make_token_required

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    token_required = make_token_required(container.auth_service)

    @app.route("/api/auth/login", methods=["POST"], endpoint="auth_login")
    def login():
        body = request.get_json(silent=True) or {}
        try:
            result = container.auth_service.authenticate(body.get("email"), body.get("password"))
            return ok(token=result.token, user=result.user.to_public_dict())
        except DomainError as e:
            return domain_failure(e)
        except Exception:
            logger.exception("Error during login")
            return fail(INTERNAL_ERROR_MESSAGE, 500)

    @app.route("/api/auth/verify", methods=["GET"], endpoint="auth_verify")
    @token_required
    def verify(credential):
        try:
            user = container.auth_service.current_user(credential)
            return ok(user=user.to_public_dict())
        except DomainError as e:
            return domain_failure(e)
        except Exception:
            logger.exception("Error verifying user")
            return fail(INTERNAL_ERROR_MESSAGE, 500)
