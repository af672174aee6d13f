from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from mysql.connector import errors as mysql_errors

from ..core.enums import AttendanceStatus
from ..core.exceptions import ConflictError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date, optional_float
from .model import AttendanceRecord, AttendanceReportRow
from .repository import AttendanceRepository

_COLUMNS = """
    attendance_id, employee_id, shift_id, work_date, check_in_time, check_out_time, status,
    check_in_latitude, check_in_longitude, check_out_latitude, check_out_longitude,
    late_minutes, overtime_minutes, note
"""


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        employee_id=int(r["employee_id"]),
        shift_id=int(r["shift_id"]),
        work_date=normalize_mysql_date(r["work_date"]),
        check_in_time=r["check_in_time"],
        check_out_time=r.get("check_out_time"),
        status=AttendanceStatus(r["status"]),
        check_in_latitude=optional_float(r.get("check_in_latitude")),
        check_in_longitude=optional_float(r.get("check_in_longitude")),
        check_out_latitude=optional_float(r.get("check_out_latitude")),
        check_out_longitude=optional_float(r.get("check_out_longitude")),
        late_minutes=int(r.get("late_minutes") or 0),
        overtime_minutes=int(r.get("overtime_minutes") or 0),
        note=r.get("note"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_recent_for_employee(self, employee_id: int, limit: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE employee_id=%s
                ORDER BY check_in_time DESC
                LIMIT %s
                """,
                (employee_id, int(limit)),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def get_for_shift(self, *, employee_id: int, shift_id: int, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE employee_id=%s AND shift_id=%s AND work_date=%s
                """,
                (employee_id, shift_id, work_date),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance_records WHERE work_date=%s ORDER BY check_in_time",
                (work_date,),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def count_for_shift(self, shift_id: int) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS n FROM attendance_records WHERE shift_id=%s", (int(shift_id),))
            r = fetchone(cur)
            return int(r["n"]) if r else 0

    def create_checkin(
        self,
        *,
        employee_id: int,
        shift_id: int,
        work_date: date,
        check_in_time: datetime,
        status: AttendanceStatus,
        latitude: Optional[float],
        longitude: Optional[float],
        late_minutes: int = 0,
        note: Optional[str] = None,
    ) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO attendance_records(
                        employee_id, shift_id, work_date, check_in_time, status,
                        check_in_latitude, check_in_longitude, late_minutes, note
                    )
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (employee_id, shift_id, work_date, check_in_time, status.value, latitude, longitude, late_minutes, note),
                )
                return int(cur.lastrowid)
        except mysql_errors.IntegrityError:
            # uq_attendance_shift_day: a concurrent check-in won
            raise ConflictError("Attendance already recorded for this shift")

    def update_checkout(
        self,
        *,
        attendance_id: int,
        check_out_time: datetime,
        status: AttendanceStatus,
        latitude: Optional[float],
        longitude: Optional[float],
        overtime_minutes: int = 0,
        note: Optional[str] = None,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_records
                SET check_out_time=%s, status=%s, check_out_latitude=%s, check_out_longitude=%s,
                    overtime_minutes=%s, note=%s
                WHERE attendance_id=%s AND check_out_time IS NULL
                """,
                (check_out_time, status.value, latitude, longitude, overtime_minutes, note, attendance_id),
            )
            return cur.rowcount > 0

    def get_report_rows(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[int] = None,
    ) -> Sequence[AttendanceReportRow]:
        sql = """
            SELECT e.employee_id, e.name AS employee_name, e.email, b.name AS branch_name,
                   s.shift_name, COALESCE(s.break_minutes, 0) AS break_minutes,
                   a.work_date, a.check_in_time, a.check_out_time, a.status,
                   a.late_minutes, a.overtime_minutes, a.note
            FROM attendance_records a
            JOIN employees e ON e.employee_id = a.employee_id
            LEFT JOIN branches b ON b.branch_id = e.branch_id
            LEFT JOIN shifts s ON s.shift_id = a.shift_id
            WHERE a.work_date BETWEEN %s AND %s
        """
        params: list = [start_date, end_date]
        if employee_id:
            sql += " AND a.employee_id=%s"
            params.append(int(employee_id))
        sql += " ORDER BY a.work_date, e.name, a.check_in_time"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [
                AttendanceReportRow(
                    employee_id=int(r["employee_id"]),
                    employee_name=r["employee_name"],
                    email=r["email"],
                    branch_name=r.get("branch_name"),
                    shift_name=r.get("shift_name"),
                    break_minutes=int(r.get("break_minutes") or 0),
                    work_date=normalize_mysql_date(r["work_date"]),
                    check_in_time=r["check_in_time"],
                    check_out_time=r.get("check_out_time"),
                    status=AttendanceStatus(r["status"]),
                    late_minutes=int(r.get("late_minutes") or 0),
                    overtime_minutes=int(r.get("overtime_minutes") or 0),
                    note=r.get("note"),
                )
                for r in fetchall(cur)
            ]
