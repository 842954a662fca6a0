from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..employees.model import Employee


@dataclass(frozen=True)
class AttendanceEntry:
    """One employee's status within a day's sheet, as submitted."""

    employee_id: str
    status: AttendanceStatus


@dataclass(frozen=True)
class ResolvedAttendanceEntry:
    """Entry joined with its employee at read time (``employee`` is None for unknown codes)."""

    employee_id: str
    status: AttendanceStatus
    employee: Optional[Employee] = None

    def to_dict(self) -> dict:
        return {
            "employeeId": self.employee_id,
            "employee": self.employee.to_summary_dict() if self.employee else None,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class AttendanceSheet:
    attendance_id: int
    work_date: date
    records: Sequence[ResolvedAttendanceEntry]

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "date": self.work_date.strftime("%Y-%m-%d"),
            "records": [r.to_dict() for r in self.records],
        }


@dataclass(frozen=True)
class AttendanceReportRow:
    """Read-model: per-date present/absent counts produced by the store."""

    work_date: date
    present: int
    absent: int

    def to_dict(self) -> dict:
        return {"date": self.work_date.strftime("%Y-%m-%d"), "present": self.present, "absent": self.absent}
