from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one check-in (and later check-out) for a shift occurrence."""

    attendance_id: int
    employee_id: int
    shift_id: int
    work_date: date
    check_in_time: datetime
    check_out_time: Optional[datetime]
    status: AttendanceStatus
    check_in_latitude: Optional[float] = None
    check_in_longitude: Optional[float] = None
    check_out_latitude: Optional[float] = None
    check_out_longitude: Optional[float] = None
    late_minutes: int = 0
    overtime_minutes: int = 0
    note: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.check_out_time is None


@dataclass(frozen=True)
class AttendanceReportRow:
    """Read-model for reports and salary computation (joined with employee/shift/branch)."""

    employee_id: int
    employee_name: str
    email: str
    branch_name: Optional[str]
    shift_name: Optional[str]
    break_minutes: int
    work_date: date
    check_in_time: datetime
    check_out_time: Optional[datetime]
    status: AttendanceStatus
    late_minutes: int = 0
    overtime_minutes: int = 0
    note: Optional[str] = None


@dataclass(frozen=True)
class AttendanceActionState:
    """Which tracker action is currently allowed for an employee, and why."""

    can_check_in: bool
    can_check_out: bool
    shift_id: Optional[int]
    message: str
