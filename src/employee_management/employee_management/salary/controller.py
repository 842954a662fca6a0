from __future__ import annotations

import logging

from flask import Flask, request

from ..auth.middleware import make_token_required
from ..common.responses import INTERNAL_ERROR_MESSAGE, domain_failure, fail, ok
from ..core.exceptions import DomainError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    token_required = make_token_required(container.auth_service)
    salaries = container.salary_service

    @app.route("/api/salary", methods=["POST"], endpoint="add_salary")
    @token_required
    def add_salary(credential):
        try:
            salary = salaries.add_salary(actor=credential, payload=request.get_json(silent=True))
            return ok(201, message="Salary added successfully", salary=salary.to_dict())
        except DomainError as e:
            return domain_failure(e)
        except Exception:
            logger.exception("Error adding salary")
            return fail(INTERNAL_ERROR_MESSAGE, 500)

    @app.route("/api/salary", methods=["GET"], endpoint="list_salaries")
    @token_required
    def list_salaries(credential):
        try:
            rows = salaries.list_salaries(actor=credential)
            return ok(salaries=[s.to_dict() for s in rows])
        except DomainError as e:
            return domain_failure(e)
        except Exception:
            logger.exception("Error fetching salaries")
            return fail(INTERNAL_ERROR_MESSAGE, 500)

    @app.route("/api/salary/<int:salary_id>", methods=["GET"], endpoint="get_salary")
    @token_required
    def get_salary(salary_id: int, credential):
        try:
            salary = salaries.get_salary(actor=credential, salary_id=salary_id)
            return ok(salary=salary.to_dict())
        except DomainError as e:
            return domain_failure(e)
        except Exception:
            logger.exception("Error fetching salary %s", salary_id)
            return fail(INTERNAL_ERROR_MESSAGE, 500)

    @app.route("/api/salary/employee/<employee_id>", methods=["GET"], endpoint="employee_salaries")
    @token_required
    def employee_salaries(employee_id: str, credential):
        try:
            rows = salaries.list_by_employee(actor=credential, employee_id=employee_id)
            return ok(salaries=[s.to_dict() for s in rows])
        except DomainError as e:
            return domain_failure(e)
        except Exception:
            logger.exception("Error fetching salaries of employee %s", employee_id)
            return fail(INTERNAL_ERROR_MESSAGE, 500)

    @app.route("/api/salary/<int:salary_id>", methods=["PUT"], endpoint="update_salary")
    @token_required
    def update_salary(salary_id: int, credential):
        try:
            salary = salaries.update_salary(
                actor=credential,
                salary_id=salary_id,
                payload=request.get_json(silent=True),
            )
            return ok(message="Salary updated successfully", salary=salary.to_dict())
        except DomainError as e:
            return domain_failure(e)
        except Exception:
            logger.exception("Error updating salary %s", salary_id)
            return fail(INTERNAL_ERROR_MESSAGE, 500)

    @app.route("/api/salary/<int:salary_id>/status", methods=["PATCH"], endpoint="update_salary_status")
    @token_required
    def update_salary_status(salary_id: int, credential):
        body = request.get_json(silent=True) or {}
        try:
            salary = salaries.update_salary_status(
                actor=credential,
                salary_id=salary_id,
                status=body.get("status"),
            )
            return ok(message="Salary status updated successfully", salary=salary.to_dict())
        except DomainError as e:
            return domain_failure(e)
        except Exception:
            logger.exception("Error updating status of salary %s", salary_id)
            return fail(INTERNAL_ERROR_MESSAGE, 500)

    @app.route("/api/salary/<int:salary_id>", methods=["DELETE"], endpoint="delete_salary")
    @token_required
    def delete_salary(salary_id: int, credential):
        try:
            salaries.delete_salary(actor=credential, salary_id=salary_id)
            return ok(message="Salary deleted successfully")
        except DomainError as e:
            return domain_failure(e)
        except Exception:
            logger.exception("Error deleting salary %s", salary_id)
            return fail(INTERNAL_ERROR_MESSAGE, 500)
