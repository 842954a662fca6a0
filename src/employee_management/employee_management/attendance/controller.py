from __future__ import annotations

import csv
import io
import logging

from flask import Flask, request

from ..auth.middleware import make_token_required
from ..common.responses import INTERNAL_ERROR_MESSAGE, domain_failure, fail, ok
from ..core.constants import REPORT_CSV_FILENAME
from ..core.exceptions import DomainError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    token_required = make_token_required(container.auth_service)

    def _write_report_csv(rows, *, filename: str):
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=["date", "present", "absent"])
        writer.writeheader()
        for row in rows:
            writer.writerow(row.to_dict())

        # BOM so spreadsheet tools pick up UTF-8
        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/attendance", methods=["POST"], endpoint="save_attendance")
    @token_required
    def save_attendance(credential):
        body = request.get_json(silent=True) or {}
        try:
            container.attendance_service.save_attendance(
                actor=credential,
                date=body.get("date"),
                records=body.get("records"),
            )
            return ok(201, message="Attendance saved successfully")
        except DomainError as e:
            return domain_failure(e)
        except Exception:
            logger.exception("Error saving attendance")
            return fail(INTERNAL_ERROR_MESSAGE, 500)

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_by_date")
    @token_required
    def attendance_by_date(credential):
        try:
            sheet = container.attendance_service.get_attendance_by_date(
                actor=credential,
                date=request.args.get("date"),
            )
            return ok(attendance=sheet.to_dict() if sheet else None)
        except DomainError as e:
            return domain_failure(e)
        except Exception:
            logger.exception("Error fetching attendance")
            return fail(INTERNAL_ERROR_MESSAGE, 500)

    @app.route("/api/attendance/report", methods=["GET"], endpoint="attendance_report")
    @token_required
    def attendance_report(credential):
        try:
            rows = container.attendance_service.get_report(actor=credential)
            return ok(data=[r.to_dict() for r in rows])
        except DomainError as e:
            return domain_failure(e)
        except Exception:
            logger.exception("Error fetching attendance report")
            return fail(INTERNAL_ERROR_MESSAGE, 500)

    @app.route("/api/attendance/report/export", methods=["GET"], endpoint="attendance_report_export")
    @token_required
    def attendance_report_export(credential):
        try:
            rows = container.attendance_service.get_report(actor=credential)
            return _write_report_csv(rows, filename=REPORT_CSV_FILENAME)
        except DomainError as e:
            return domain_failure(e)
        except Exception:
            logger.exception("Error exporting attendance report")
            return fail(INTERNAL_ERROR_MESSAGE, 500)
