from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..auth.model import Credential
from ..auth.permissions import require_admin
from ..common.validators import require_choice, require_date, require_non_empty
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .model import AttendanceEntry, AttendanceReportRow, AttendanceSheet
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def _parse_entry(raw: Any, index: int) -> AttendanceEntry:
    if not isinstance(raw, dict):
        raise ValidationError(f"records[{index}] must be an object")

    employee = raw.get("employee")
    # Accept either the employee code or an already-resolved employee object.
    if isinstance(employee, dict):
        employee = employee.get("employeeId")

    return AttendanceEntry(
        employee_id=require_non_empty(employee, f"records[{index}].employee"),
        status=require_choice(raw.get("status"), AttendanceStatus, f"records[{index}].status"),
    )


class AttendanceService:
    """Daily attendance sheets: replace-by-date saving, lookup and reporting."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def save_attendance(self, *, actor: Credential, date: Any, records: Any) -> int:
        """Replace the whole sheet for ``date`` with ``records`` (never merges)."""
        require_admin(actor)

        if not date or not isinstance(records, list):
            raise ValidationError("Date and records are required")

        work_date = require_date(date, "Date")
        entries = [_parse_entry(r, i) for i, r in enumerate(records)]

        attendance_id = self._attendance.replace_for_date(work_date=work_date, entries=entries)
        logger.info(
            "attendance for %s saved by user %s (%d records)",
            work_date.isoformat(),
            actor.user_id,
            len(entries),
        )
        return attendance_id

    def get_attendance_by_date(self, *, actor: Credential, date: Any) -> Optional[AttendanceSheet]:
        if not date:
            raise ValidationError("Date is required")
        return self._attendance.get_by_date(require_date(date, "Date"))

    def get_report(self, *, actor: Credential) -> Sequence[AttendanceReportRow]:
        return self._attendance.daily_report()
