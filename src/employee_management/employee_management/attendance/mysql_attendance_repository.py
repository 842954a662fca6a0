from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_date
from ..employees.mysql_employee_repository import to_employee
from .model import AttendanceEntry, AttendanceReportRow, AttendanceSheet, ResolvedAttendanceEntry
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def replace_for_date(self, *, work_date: date, entries: Sequence[AttendanceEntry]) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            # Upsert keyed by the UNIQUE date; the row lock is held until commit so
            # concurrent saves for the same date cannot interleave.
            cur.execute(
                """
                INSERT INTO attendance_sheets (work_date) VALUES (%s)
                ON DUPLICATE KEY UPDATE attendance_id=LAST_INSERT_ID(attendance_id), updated_at=CURRENT_TIMESTAMP
                """,
                (work_date,),
            )
            attendance_id = int(cur.lastrowid)

            cur.execute("DELETE FROM attendance_entries WHERE attendance_id=%s", (attendance_id,))
            if entries:
                cur.executemany(
                    """
                    INSERT INTO attendance_entries (attendance_id, position, employee_id, status)
                    VALUES (%s, %s, %s, %s)
                    """,
                    [(attendance_id, i, e.employee_id, e.status.value) for i, e in enumerate(entries)],
                )
            return attendance_id

    def get_by_date(self, work_date: date) -> Optional[AttendanceSheet]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT attendance_id, work_date FROM attendance_sheets WHERE work_date=%s", (work_date,))
            sheet = fetchone(cur)
            if not sheet:
                return None

            cur.execute(
                """
                SELECT
                    ae.employee_id AS entry_employee_id, ae.status,
                    e.employee_id, e.user_id, e.name, e.email, e.salary,
                    d.department_id, d.name AS department_name
                FROM attendance_entries ae
                LEFT JOIN employees e ON e.employee_id = ae.employee_id
                LEFT JOIN departments d ON d.department_id = e.department_id
                WHERE ae.attendance_id=%s
                ORDER BY ae.position ASC
                """,
                (int(sheet["attendance_id"]),),
            )
            rows = fetchall(cur)

            return AttendanceSheet(
                attendance_id=int(sheet["attendance_id"]),
                work_date=to_date(sheet["work_date"]),
                records=[
                    ResolvedAttendanceEntry(
                        employee_id=r["entry_employee_id"],
                        status=AttendanceStatus(r["status"]),
                        employee=to_employee(r) if r.get("employee_id") is not None else None,
                    )
                    for r in rows
                ],
            )

    def daily_report(self) -> Sequence[AttendanceReportRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    s.work_date,
                    COALESCE(SUM(CASE WHEN ae.status=%s THEN 1 ELSE 0 END), 0) AS present,
                    COALESCE(SUM(CASE WHEN ae.status=%s THEN 1 ELSE 0 END), 0) AS absent
                FROM attendance_sheets s
                LEFT JOIN attendance_entries ae ON ae.attendance_id = s.attendance_id
                GROUP BY s.attendance_id, s.work_date
                ORDER BY s.work_date ASC
                """,
                (AttendanceStatus.PRESENT.value, AttendanceStatus.ABSENT.value),
            )
            return [
                AttendanceReportRow(
                    work_date=to_date(r["work_date"]),
                    present=int(r["present"]),
                    absent=int(r["absent"]),
                )
                for r in fetchall(cur)
            ]
