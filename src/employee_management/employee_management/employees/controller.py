from __future__ import annotations

import logging

from flask import Flask

from ..auth.middleware import make_token_required
from ..common.responses import INTERNAL_ERROR_MESSAGE, domain_failure, fail, ok
from ..core.exceptions import DomainError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    token_required = make_token_required(container.auth_service)

    @app.route("/api/employee", methods=["GET"], endpoint="list_employees")
    @token_required
    def list_employees(credential):
        try:
            employees = container.employee_service.list_employees(actor=credential)
            return ok(employees=[e.to_dict() for e in employees])
        except DomainError as e:
            return domain_failure(e)
        except Exception:
            logger.exception("Error fetching employees")
            return fail(INTERNAL_ERROR_MESSAGE, 500)

    @app.route("/api/employee/profile", methods=["GET"], endpoint="my_profile")
    @token_required
    def my_profile(credential):
        try:
            employee = container.employee_service.get_my_profile(actor=credential)
            return ok(employee=employee.to_dict())
        except DomainError as e:
            return domain_failure(e)
        except Exception:
            logger.exception("Error fetching employee profile")
            return fail(INTERNAL_ERROR_MESSAGE, 500)

    @app.route("/api/employee/profile/<int:user_id>", methods=["GET"], endpoint="employee_profile")
    @token_required
    def employee_profile(user_id: int, credential):
        try:
            employee = container.employee_service.get_profile(actor=credential, user_id=user_id)
            return ok(employee=employee.to_dict())
        except DomainError as e:
            return domain_failure(e)
        except Exception:
            logger.exception("Error fetching employee profile")
            return fail(INTERNAL_ERROR_MESSAGE, 500)
