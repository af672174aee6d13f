from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import RequestStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import LeaveRequest
from .repository import RequestRepository

_COLUMNS = """
    request_id, employee_id, start_date, end_date, reason, status,
    created_at, decided_by, decided_at, admin_note
"""


def _to_leave(r: dict) -> LeaveRequest:
    return LeaveRequest(
        request_id=int(r["request_id"]),
        employee_id=int(r["employee_id"]),
        start_date=normalize_mysql_date(r["start_date"]),
        end_date=normalize_mysql_date(r["end_date"]),
        reason=r["reason"],
        status=RequestStatus(r["status"]),
        created_at=r["created_at"],
        decided_by=int(r["decided_by"]) if r.get("decided_by") is not None else None,
        decided_at=r.get("decided_at"),
        admin_note=r.get("admin_note"),
    )


class MySQLRequestRepository(RequestRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_leave(self, *, employee_id: int, start_date: date, end_date: date, reason: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO leave_requests(employee_id, start_date, end_date, reason, status)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (int(employee_id), start_date, end_date, reason, RequestStatus.PENDING.value),
            )
            return int(cur.lastrowid)

    def get_leave(self, *, request_id: int) -> Optional[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM leave_requests WHERE request_id=%s", (int(request_id),))
            r = fetchone(cur)
            return _to_leave(r) if r else None

    def list_leave_requests(
        self,
        *,
        status: Optional[RequestStatus] = None,
        employee_id: Optional[int] = None,
        limit: int = 200,
    ) -> Sequence[dict]:
        clauses = ["1=1"]
        params: list[object] = []

        if status is not None:
            clauses.append("r.status=%s")
            params.append(status.value)
        if employee_id is not None:
            clauses.append("r.employee_id=%s")
            params.append(int(employee_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT r.request_id, r.employee_id, e.name AS employee_name, e.email,
                       r.start_date, r.end_date, r.reason,
                       r.status, r.created_at, r.admin_note
                FROM leave_requests r
                JOIN employees e ON e.employee_id = r.employee_id
                WHERE {where}
                ORDER BY r.created_at DESC
                LIMIT %s
                """,
                tuple(params + [int(limit)]),
            )
            return [
                {
                    "request_id": int(r["request_id"]),
                    "employee_id": int(r["employee_id"]),
                    "employee_name": r["employee_name"],
                    "email": r["email"],
                    "start_date": r["start_date"].strftime("%Y-%m-%d"),
                    "end_date": r["end_date"].strftime("%Y-%m-%d"),
                    "reason": r["reason"],
                    "status": r["status"],
                    "created_at": r["created_at"].strftime("%Y-%m-%d %H:%M"),
                    "admin_note": r.get("admin_note") or "",
                }
                for r in fetchall(cur)
            ]

    def list_approved_between(
        self,
        *,
        start: date,
        end: date,
        employee_id: Optional[int] = None,
    ) -> Sequence[LeaveRequest]:
        sql = f"""
            SELECT {_COLUMNS}
            FROM leave_requests
            WHERE status=%s AND start_date <= %s AND end_date >= %s
        """
        params: list[object] = [RequestStatus.APPROVED.value, end, start]
        if employee_id is not None:
            sql += " AND employee_id=%s"
            params.append(int(employee_id))
        sql += " ORDER BY start_date"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [_to_leave(r) for r in fetchall(cur)]

    def decide_leave(
        self,
        *,
        request_id: int,
        status: RequestStatus,
        decided_by: int,
        admin_note: Optional[str] = None,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE leave_requests
                SET status=%s, decided_by=%s, decided_at=NOW(), admin_note=%s
                WHERE request_id=%s AND status=%s
                """,
                (
                    status.value,
                    int(decided_by),
                    admin_note,
                    int(request_id),
                    RequestStatus.PENDING.value,
                ),
            )
            return cur.rowcount > 0
