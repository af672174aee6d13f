from __future__ import annotations

from datetime import time
from typing import Optional, Sequence

from mysql.connector import errors as mysql_errors

from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time
from .model import Shift
from .repository import ShiftRepository

_COLUMNS = "shift_id, employee_id, shift_name, start_time, end_time, break_minutes"


def _to_shift(r: dict) -> Shift:
    return Shift(
        shift_id=int(r["shift_id"]),
        employee_id=int(r["employee_id"]) if r.get("employee_id") is not None else None,
        shift_name=r["shift_name"],
        start_time=normalize_mysql_time(r["start_time"]),
        end_time=normalize_mysql_time(r["end_time"]),
        break_minutes=int(r.get("break_minutes") or 0),
    )


class MySQLShiftRepository(ShiftRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Shift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM shifts ORDER BY employee_id, start_time")
            return [_to_shift(r) for r in fetchall(cur)]

    def get_by_id(self, shift_id: int) -> Optional[Shift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM shifts WHERE shift_id=%s", (shift_id,))
            r = fetchone(cur)
            return _to_shift(r) if r else None

    def list_for_employee(self, employee_id: int) -> Sequence[Shift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM shifts
                WHERE employee_id=%s
                ORDER BY start_time
                """,
                (employee_id,),
            )
            return [_to_shift(r) for r in fetchall(cur)]

    def create(
        self,
        *,
        employee_id: int,
        shift_name: str,
        start_time: time,
        end_time: time,
        break_minutes: int = 0,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO shifts(employee_id, shift_name, start_time, end_time, break_minutes)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (employee_id, shift_name, start_time, end_time, int(break_minutes)),
            )
            return int(cur.lastrowid)

    def delete(self, *, shift_id: int) -> bool:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute("DELETE FROM shifts WHERE shift_id=%s", (shift_id,))
                return cur.rowcount > 0
        except mysql_errors.IntegrityError:
            # fk_attendance_shift is ON DELETE RESTRICT
            raise ConflictError("Shift has attendance records and cannot be deleted")
