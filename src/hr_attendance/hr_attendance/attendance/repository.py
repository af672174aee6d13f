from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, AttendanceReportRow


class AttendanceRepository(Protocol):
    def get_recent_for_employee(self, employee_id: int, limit: int) -> Sequence[AttendanceRecord]:
        """Most recent records first (by check-in time)."""

        raise NotImplementedError

    def get_for_shift(self, *, employee_id: int, shift_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def count_for_shift(self, shift_id: int) -> int:
        raise NotImplementedError

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
        raise NotImplementedError

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
        raise NotImplementedError

    def get_report_rows(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[int] = None,
    ) -> Sequence[AttendanceReportRow]:
        raise NotImplementedError
