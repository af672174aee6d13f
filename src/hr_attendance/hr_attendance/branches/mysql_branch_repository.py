from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Branch
from .repository import BranchRepository


def _to_branch(r: dict) -> Branch:
    return Branch(
        branch_id=int(r["branch_id"]),
        name=r["name"],
        latitude=float(r["latitude"]),
        longitude=float(r["longitude"]),
        radius=float(r["radius"]),
    )


class MySQLBranchRepository(BranchRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Branch]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT branch_id, name, latitude, longitude, radius FROM branches ORDER BY name")
            return [_to_branch(r) for r in fetchall(cur)]

    def get_by_id(self, branch_id: int) -> Optional[Branch]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT branch_id, name, latitude, longitude, radius FROM branches WHERE branch_id=%s",
                (branch_id,),
            )
            r = fetchone(cur)
            return _to_branch(r) if r else None

    def create(self, *, name: str, latitude: float, longitude: float, radius: float) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO branches(name, latitude, longitude, radius) VALUES(%s,%s,%s,%s)",
                (name, latitude, longitude, radius),
            )
            return int(cur.lastrowid)

    def update(self, branch: Branch) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE branches
                SET name=%s, latitude=%s, longitude=%s, radius=%s
                WHERE branch_id=%s
                """,
                (branch.name, branch.latitude, branch.longitude, branch.radius, branch.branch_id),
            )
            return cur.rowcount > 0

    def delete(self, *, branch_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM branches WHERE branch_id=%s", (branch_id,))
            return cur.rowcount > 0
