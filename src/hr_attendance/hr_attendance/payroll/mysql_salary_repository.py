from __future__ import annotations

from decimal import Decimal
from typing import Mapping

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .repository import SalaryAdjustmentRepository


class MySQLSalaryAdjustmentRepository(SalaryAdjustmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_sales_percentage(self, *, employee_id: int, year: int, month: int) -> Decimal:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT sales_percentage
                FROM salary_adjustments
                WHERE employee_id=%s AND year=%s AND month=%s
                """,
                (int(employee_id), int(year), int(month)),
            )
            r = fetchone(cur)
            return Decimal(str(r["sales_percentage"])) if r else Decimal("0")

    def list_sales_percentages(self, *, year: int, month: int) -> Mapping[int, Decimal]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT employee_id, sales_percentage FROM salary_adjustments WHERE year=%s AND month=%s",
                (int(year), int(month)),
            )
            return {int(r["employee_id"]): Decimal(str(r["sales_percentage"])) for r in fetchall(cur)}

    def set_sales_percentage(self, *, employee_id: int, year: int, month: int, percentage: Decimal) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO salary_adjustments(employee_id, year, month, sales_percentage)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE sales_percentage=VALUES(sales_percentage)
                """,
                (int(employee_id), int(year), int(month), percentage),
            )
