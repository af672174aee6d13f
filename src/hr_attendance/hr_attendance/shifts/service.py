from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import parse_time
from ..common.validators import require_int, require_non_empty, require_range
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ConflictError, NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import Shift
from .repository import ShiftRepository

logger = logging.getLogger(__name__)


class ShiftService:
    def __init__(self, shifts: ShiftRepository, employees: EmployeeRepository, attendance: AttendanceRepository):
        self._shifts = shifts
        self._employees = employees
        self._attendance = attendance

    def list_all(self, *, current_role: Role) -> Sequence[Shift]:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Unauthorized: Admin access required.")
        return list(self._shifts.list_all())

    def list_for_employee(self, employee_id: int, *, current_user_id: int, current_role: Role) -> Sequence[Shift]:
        if current_role != Role.ADMIN and int(current_user_id) != int(employee_id):
            raise AuthorizationError("Forbidden: You do not have permission to perform this action.")
        return list(self._shifts.list_for_employee(int(employee_id)))

    def add_shift(
        self,
        *,
        current_role: Role,
        employee_id: int,
        start_time: str,
        end_time: str,
        shift_name: Optional[str] = None,
        break_minutes: int = 0,
    ) -> int:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Unauthorized: Admin access required.")

        employee_id = require_int(employee_id, "Employee id")
        break_minutes = require_int(break_minutes, "Break minutes")
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found")

        start = parse_time(start_time)
        end = parse_time(end_time)
        if start == end:
            raise ValidationError("Shift start and end time must differ")
        require_range(break_minutes, "Break minutes", minimum=0, maximum=24 * 60)

        name = require_non_empty(shift_name, "Shift name") if shift_name else f"{start:%H:%M}-{end:%H:%M}"
        shift_id = self._shifts.create(
            employee_id=employee_id,
            shift_name=name,
            start_time=start,
            end_time=end,
            break_minutes=break_minutes,
        )
        logger.info("Shift %s (%s) created for employee %s", shift_id, name, employee_id)
        return shift_id

    def delete_shift(self, *, current_role: Role, shift_id: int) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Unauthorized: Admin access required.")

        # attendance history and payroll keep referring to the shift
        if self._attendance.count_for_shift(int(shift_id)):
            raise ConflictError("Shift has attendance records and cannot be deleted")
        if not self._shifts.delete(shift_id=int(shift_id)):
            raise NotFoundError("Shift not found")
