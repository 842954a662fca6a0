from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceEntry, AttendanceReportRow, AttendanceSheet


class AttendanceRepository(Protocol):
    def replace_for_date(self, *, work_date: date, entries: Sequence[AttendanceEntry]) -> int:
        """Insert-or-replace the whole sheet for ``work_date`` atomically; returns the sheet id."""

        raise NotImplementedError

    def get_by_date(self, work_date: date) -> Optional[AttendanceSheet]:
        raise NotImplementedError

    def daily_report(self) -> Sequence[AttendanceReportRow]:
        """Present/absent counts per date, ascending by date."""

        raise NotImplementedError
