from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..core.enums import SalaryStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_date, to_float
from .model import Allowances, Deductions, Salary, SalaryDraft
from .repository import SalaryRepository

_SELECT = """
    SELECT salary_id, employee_id, basic_salary,
           hra, da, medical, ta, allowances_total,
           pf, tax, insurance, deductions_total,
           net_salary, month, year, payment_date, status, created_at, updated_at
    FROM salaries
"""

_ORDER = "ORDER BY year DESC, month DESC, salary_id DESC"


def _to_salary(r: Dict[str, Any]) -> Salary:
    return Salary(
        salary_id=int(r["salary_id"]),
        employee_id=r["employee_id"],
        basic_salary=to_float(r["basic_salary"]),
        allowances=Allowances(
            hra=to_float(r["hra"]),
            da=to_float(r["da"]),
            medical=to_float(r["medical"]),
            ta=to_float(r["ta"]),
            total=to_float(r["allowances_total"]),
        ),
        deductions=Deductions(
            pf=to_float(r["pf"]),
            tax=to_float(r["tax"]),
            insurance=to_float(r["insurance"]),
            total=to_float(r["deductions_total"]),
        ),
        net_salary=to_float(r["net_salary"]),
        month=int(r["month"]),
        year=int(r["year"]),
        status=SalaryStatus(r["status"]),
        payment_date=to_date(r.get("payment_date")),
        created_at=r.get("created_at"),
        updated_at=r.get("updated_at"),
    )


def _draft_params(d: SalaryDraft) -> tuple:
    a, x = d.allowances, d.deductions
    return (
        d.employee_id,
        d.basic_salary,
        a.hra, a.da, a.medical, a.ta, a.total,
        x.pf, x.tax, x.insurance, x.total,
        d.net_salary,
        d.month,
        d.year,
        d.payment_date,
        d.status.value,
    )


class MySQLSalaryRepository(SalaryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, draft: SalaryDraft) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO salaries (
                    employee_id, basic_salary,
                    hra, da, medical, ta, allowances_total,
                    pf, tax, insurance, deductions_total,
                    net_salary, month, year, payment_date, status
                )
                VALUES (%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                _draft_params(draft),
            )
            return int(cur.lastrowid)

    def get_by_id(self, salary_id: int) -> Optional[Salary]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE salary_id=%s", (int(salary_id),))
            row = fetchone(cur)
            return _to_salary(row) if row else None

    def list_all(self) -> Sequence[Salary]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} {_ORDER}")
            return [_to_salary(r) for r in fetchall(cur)]

    def list_by_employee(self, employee_id: str) -> Sequence[Salary]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE employee_id=%s {_ORDER}", (employee_id,))
            return [_to_salary(r) for r in fetchall(cur)]

    def replace(self, salary_id: int, draft: SalaryDraft) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE salaries
                SET employee_id=%s, basic_salary=%s,
                    hra=%s, da=%s, medical=%s, ta=%s, allowances_total=%s,
                    pf=%s, tax=%s, insurance=%s, deductions_total=%s,
                    net_salary=%s, month=%s, year=%s, payment_date=%s, status=%s
                WHERE salary_id=%s
                """,
                _draft_params(draft) + (int(salary_id),),
            )
            return cur.rowcount > 0

    def update_status(self, salary_id: int, status: SalaryStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE salaries SET status=%s WHERE salary_id=%s",
                (status.value, int(salary_id)),
            )
            return cur.rowcount > 0

    def delete(self, salary_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM salaries WHERE salary_id=%s", (int(salary_id),))
            return cur.rowcount > 0
