from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional, Sequence

from ..branches.geo import validate_coordinates, validate_location
from ..branches.model import LocationCheck, LocationData
from ..branches.repository import BranchRepository
from ..common.datetime_utils import now_local
from ..core.constants import (
    DEFAULT_EARLY_CHECKIN_MINUTES,
    DEFAULT_HISTORY_LIMIT,
    DEFAULT_LATE_GRACE_MINUTES,
    DEFAULT_MIN_REST_MINUTES,
    DEFAULT_TIMEZONE,
)
from ..core.enums import AttendanceStatus, Role
from ..core.exceptions import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    OutOfRangeError,
    ShiftNotFoundError,
    ValidationError,
)
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..shifts.matching import find_current_shift, find_recently_ended_shift, next_shift_start
from ..shifts.model import Shift, ShiftOccurrence
from ..shifts.repository import ShiftRepository
from .factory import AttendanceStrategyFactory
from .model import AttendanceActionState, AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttendancePolicy:
    """Tunable attendance rules (loaded from the settings module)."""

    grace_minutes: int = DEFAULT_LATE_GRACE_MINUTES
    early_checkin_minutes: int = DEFAULT_EARLY_CHECKIN_MINUTES
    min_rest_minutes: int = DEFAULT_MIN_REST_MINUTES
    require_branch: bool = True
    timezone: Optional[str] = DEFAULT_TIMEZONE


class AttendanceService:
    """Check-in / check-out use cases.

    The server clock is authoritative: ``now`` is only passed explicitly by
    tests and maintenance scripts.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        shifts: ShiftRepository,
        branches: BranchRepository,
        *,
        strategy_factory: AttendanceStrategyFactory | None = None,
        policy: AttendancePolicy | None = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._shifts = shifts
        self._branches = branches
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._policy = policy or AttendancePolicy()

    @property
    def policy(self) -> AttendancePolicy:
        return self._policy

    def now(self) -> datetime:
        """Current wall-clock time in the configured timezone."""
        return now_local(self._policy.timezone)

    def _now(self, now: datetime | None) -> datetime:
        return now or self.now()

    def _load_employee(self, actor_id: int | None, employee_id: int) -> Employee:
        if actor_id is None or int(actor_id) != int(employee_id):
            raise AuthorizationError("Unauthorized: Invalid user ID")

        employee = self._employees.get_by_id(int(employee_id))
        if not employee or not employee.is_active:
            raise NotFoundError("Employee not found")
        return employee

    def _load_shifts(self, employee_id: int) -> list[Shift]:
        shifts = [s for s in self._shifts.list_for_employee(employee_id) if s is not None]
        if not shifts:
            raise ShiftNotFoundError("No shifts available")
        return shifts

    def _check_geofence(self, employee: Employee, location: LocationData, *, shift_id: int) -> Optional[LocationCheck]:
        validate_coordinates(location.latitude, location.longitude)

        branch = self._branches.get_by_id(employee.branch_id) if employee.branch_id else None
        if not branch:
            if self._policy.require_branch:
                raise ValidationError("Branch data is not available")
            return None

        result = validate_location(location, branch)
        if not result.is_within_location:
            logger.warning(
                "Employee %s is %.1fm from branch %s (radius %.0fm), shift %s rejected",
                employee.employee_id,
                result.distance,
                branch.name,
                branch.radius,
                shift_id,
            )
            raise OutOfRangeError(result.error_message, distance=result.distance)
        return result

    def _enforce_rest_period(self, employee_id: int, shifts: Sequence[Shift], occurrence: ShiftOccurrence, now: datetime) -> None:
        if self._policy.min_rest_minutes <= 0:
            return

        shifts_by_id = {s.shift_id: s for s in shifts}
        for record in self._attendance.get_recent_for_employee(employee_id, DEFAULT_HISTORY_LIMIT):
            if record.shift_id == occurrence.shift_id:
                continue

            previous = shifts_by_id.get(record.shift_id)
            if not previous:
                return

            previous_end = previous.occurrence_on(record.work_date).end
            if now < previous_end + timedelta(minutes=self._policy.min_rest_minutes):
                raise ValidationError("Cannot check in. It is too soon after the previous shift ended.")
            return

    def _within_checkout_window(self, shifts: Sequence[Shift], occurrence: ShiftOccurrence, now: datetime) -> bool:
        upcoming = next_shift_start(shifts, occurrence.end)
        return upcoming is None or now < upcoming

    def check_in(
        self,
        actor_id: int | None,
        employee_id: int,
        location: LocationData,
        *,
        now: datetime | None = None,
    ) -> AttendanceRecord:
        now = self._now(now)
        employee = self._load_employee(actor_id, employee_id)
        shifts = self._load_shifts(employee.employee_id)

        occurrence = find_current_shift(shifts, now, early_minutes=self._policy.early_checkin_minutes)
        if not occurrence:
            raise ShiftNotFoundError("No active shift found for the current time")

        existing = self._attendance.get_for_shift(
            employee_id=employee.employee_id,
            shift_id=occurrence.shift_id,
            work_date=occurrence.work_date,
        )
        if existing:
            raise ConflictError("Attendance already recorded for this shift")

        self._enforce_rest_period(employee.employee_id, shifts, occurrence, now)
        self._check_geofence(employee, location, shift_id=occurrence.shift_id)

        strategy = self._factory.for_checkin(now=now, occurrence=occurrence, grace_minutes=self._policy.grace_minutes)
        decision = strategy.decide_checkin(now=now, occurrence=occurrence, grace_minutes=self._policy.grace_minutes)

        attendance_id = self._attendance.create_checkin(
            employee_id=employee.employee_id,
            shift_id=occurrence.shift_id,
            work_date=occurrence.work_date,
            check_in_time=now,
            status=decision.status,
            latitude=location.latitude,
            longitude=location.longitude,
            late_minutes=decision.late_minutes,
            note=decision.note,
        )
        logger.info(
            "Check-in %s: employee %s shift %s (%s) status=%s",
            attendance_id,
            employee.employee_id,
            occurrence.shift_id,
            occurrence.work_date,
            decision.status.value,
        )

        return AttendanceRecord(
            attendance_id=attendance_id,
            employee_id=employee.employee_id,
            shift_id=occurrence.shift_id,
            work_date=occurrence.work_date,
            check_in_time=now,
            check_out_time=None,
            status=decision.status,
            check_in_latitude=location.latitude,
            check_in_longitude=location.longitude,
            late_minutes=decision.late_minutes,
            note=decision.note,
        )

    def check_out(
        self,
        actor_id: int | None,
        employee_id: int,
        location: LocationData,
        *,
        now: datetime | None = None,
    ) -> AttendanceRecord:
        now = self._now(now)
        employee = self._load_employee(actor_id, employee_id)
        shifts = self._load_shifts(employee.employee_id)

        occurrence = find_recently_ended_shift(shifts, now)
        if not occurrence:
            raise ShiftNotFoundError("No recently ended shift found for the current time")

        if not self._within_checkout_window(shifts, occurrence, now):
            raise ValidationError(f"Check-out time is outside the allowed window for shift {occurrence.shift_id}")

        record = self._attendance.get_for_shift(
            employee_id=employee.employee_id,
            shift_id=occurrence.shift_id,
            work_date=occurrence.work_date,
        )
        if not record:
            raise ValidationError("No active check-in found for this shift")
        if not record.is_open:
            raise ConflictError("Leave already recorded for this shift")

        self._check_geofence(employee, location, shift_id=occurrence.shift_id)

        strategy = self._factory.for_checkout(now=now, occurrence=occurrence)
        decision = strategy.decide_checkout(now=now, occurrence=occurrence, current=record.status)
        note = "; ".join(n for n in (record.note, decision.note) if n) or None

        updated = self._attendance.update_checkout(
            attendance_id=record.attendance_id,
            check_out_time=now,
            status=decision.status,
            latitude=location.latitude,
            longitude=location.longitude,
            overtime_minutes=decision.overtime_minutes,
            note=note,
        )
        if not updated:
            # another check-out closed the record since it was read
            raise ConflictError("Leave already recorded for this shift")
        logger.info(
            "Check-out %s: employee %s shift %s overtime=%smin",
            record.attendance_id,
            employee.employee_id,
            occurrence.shift_id,
            decision.overtime_minutes,
        )

        return AttendanceRecord(
            attendance_id=record.attendance_id,
            employee_id=record.employee_id,
            shift_id=record.shift_id,
            work_date=record.work_date,
            check_in_time=record.check_in_time,
            check_out_time=now,
            status=decision.status,
            check_in_latitude=record.check_in_latitude,
            check_in_longitude=record.check_in_longitude,
            check_out_latitude=location.latitude,
            check_out_longitude=location.longitude,
            late_minutes=record.late_minutes,
            overtime_minutes=decision.overtime_minutes,
            note=note,
        )

    def action_state(self, employee_id: int, *, now: datetime | None = None) -> AttendanceActionState:
        now = self._now(now)
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError("Employee not found")

        if self._policy.require_branch and not employee.branch_id:
            return AttendanceActionState(False, False, None, "Branch data is not available")

        shifts = [s for s in self._shifts.list_for_employee(employee.employee_id) if s is not None]
        if not shifts:
            return AttendanceActionState(False, False, None, "No shifts available")

        can_check_in = False
        can_check_out = False
        shift_id = None

        current = find_current_shift(shifts, now, early_minutes=self._policy.early_checkin_minutes)
        if current and not self._attendance.get_for_shift(
            employee_id=employee.employee_id, shift_id=current.shift_id, work_date=current.work_date
        ):
            can_check_in = True
            shift_id = current.shift_id

        ended = find_recently_ended_shift(shifts, now)
        if ended and self._within_checkout_window(shifts, ended, now):
            record = self._attendance.get_for_shift(
                employee_id=employee.employee_id, shift_id=ended.shift_id, work_date=ended.work_date
            )
            if record and record.is_open:
                can_check_out = True
                shift_id = shift_id or ended.shift_id

        if can_check_in:
            message = f"Check-in enabled (during shift {shift_id})"
        elif can_check_out:
            message = "Check-out enabled (after a shift with check-in, before the next shift)"
        else:
            message = "No valid shift, no check-in recorded, or the next shift has started"
        return AttendanceActionState(can_check_in, can_check_out, shift_id, message)

    def is_employee_present(self, employee_id: int, shift_id: int, at: datetime) -> bool:
        shift = self._shifts.get_by_id(int(shift_id))
        if not shift or shift.employee_id != int(employee_id):
            return False

        employee = self._employees.get_by_id(int(employee_id))
        branch = self._branches.get_by_id(employee.branch_id) if employee and employee.branch_id else None

        for offset in (0, -1):
            occurrence = shift.occurrence_on(at.date() + timedelta(days=offset))
            record = self._attendance.get_for_shift(
                employee_id=int(employee_id), shift_id=shift.shift_id, work_date=occurrence.work_date
            )
            if not record:
                continue
            if not occurrence.contains(record.check_in_time, early_minutes=self._policy.early_checkin_minutes):
                continue
            if record.check_in_time > at:
                continue
            if branch and record.check_in_latitude is not None and record.check_in_longitude is not None:
                check = validate_location(LocationData(record.check_in_latitude, record.check_in_longitude), branch)
                if not check.is_within_location:
                    continue
            return True
        return False

    def get_history(
        self,
        *,
        current_user_id: int,
        current_role: Role,
        employee_id: int,
        limit: int = DEFAULT_HISTORY_LIMIT,
    ) -> list[dict]:
        if current_role != Role.ADMIN and int(current_user_id) != int(employee_id):
            raise AuthorizationError("Forbidden: You do not have permission to perform this action.")
        rows = self._attendance.get_recent_for_employee(int(employee_id), int(limit))
        return [self.to_dict(r) for r in rows]

    def today_stats(self, *, now: datetime | None = None) -> dict:
        now = self._now(now)
        today: date = now.date()

        employees = [e for e in self._employees.list_active() if e.role != Role.ADMIN]
        records = self._attendance.list_for_date(today)
        present_ids = {r.employee_id for r in records}
        late_ids = {r.employee_id for r in records if r.status == AttendanceStatus.LATE}

        absent = 0
        for employee in employees:
            if employee.employee_id in present_ids:
                continue
            started = [
                s for s in self._shifts.list_for_employee(employee.employee_id) if s.occurrence_on(today).start <= now
            ]
            if started:
                absent += 1

        return {
            "date": today.isoformat(),
            "total_employees": len(employees),
            "present": len(present_ids),
            "late": len(late_ids),
            "absent": absent,
        }

    @staticmethod
    def to_dict(r: AttendanceRecord) -> dict:
        return {
            "id": r.attendance_id,
            "employee_id": r.employee_id,
            "shift_id": r.shift_id,
            "date": r.work_date.strftime("%Y-%m-%d"),
            "time_of_attend": r.check_in_time.isoformat(timespec="seconds"),
            "time_of_leave": r.check_out_time.isoformat(timespec="seconds") if r.check_out_time else None,
            "status": r.status.value,
            "late_minutes": r.late_minutes,
            "overtime_minutes": r.overtime_minutes,
            "note": r.note or "",
        }
