from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import Holiday
from .repository import HolidayRepository


def _to_holiday(r: dict) -> Holiday:
    return Holiday(holiday_id=int(r["holiday_id"]), name=r["name"], day=normalize_mysql_date(r["day"]))


class MySQLHolidayRepository(HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_range(self, *, start: date, end: date) -> Sequence[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT holiday_id, name, day FROM holidays WHERE day BETWEEN %s AND %s ORDER BY day",
                (start, end),
            )
            return [_to_holiday(r) for r in fetchall(cur)]

    def get_by_day(self, day: date) -> Optional[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT holiday_id, name, day FROM holidays WHERE day=%s", (day,))
            r = fetchone(cur)
            return _to_holiday(r) if r else None

    def create(self, *, name: str, day: date) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO holidays(name, day) VALUES(%s,%s)", (name, day))
            return int(cur.lastrowid)

    def delete(self, *, holiday_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM holidays WHERE holiday_id=%s", (holiday_id,))
            return cur.rowcount > 0
