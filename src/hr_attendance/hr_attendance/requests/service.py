from __future__ import annotations

import logging
from datetime import date

from ..common.validators import require_non_empty
from ..core.enums import RequestStatus, Role
from ..core.exceptions import AuthorizationError, ConflictError, NotFoundError, ValidationError
from ..payroll.calendar import WorkCalendar
from ..settings.repository import SettingsRepository
from .repository import RequestRepository

logger = logging.getLogger(__name__)


class RequestService:
    def __init__(self, requests: RequestRepository, settings: SettingsRepository, calendar: WorkCalendar):
        self._requests = requests
        self._settings = settings
        self._calendar = calendar

    def approved_days_in_year(self, employee_id: int, year: int) -> int:
        """Working days covered by approved leaves in ``year``."""

        start, end = date(year, 1, 1), date(year, 12, 31)
        days: set[date] = set()
        for leave in self._requests.list_approved_between(start=start, end=end, employee_id=employee_id):
            lo = max(leave.start_date, start)
            hi = min(leave.end_date, end)
            days.update(self._calendar.working_days(lo, hi))
        return len(days)

    def _check_quota(self, employee_id: int, start_date: date, end_date: date) -> None:
        quota = self._settings.get().number_of_vacations_in_year
        # A leave spanning new year is charged to each year separately.
        for year in range(start_date.year, end_date.year + 1):
            lo = max(start_date, date(year, 1, 1))
            hi = min(end_date, date(year, 12, 31))
            requested = self._calendar.count_working_days(lo, hi)
            used = self.approved_days_in_year(employee_id, year)
            if requested + used > quota:
                raise ValidationError(
                    f"Vacation balance exceeded for {year}: requested {requested} day(s), "
                    f"already approved {used}, allowed {quota}"
                )

    def create_leave(
        self,
        *,
        current_role: Role,
        employee_id: int,
        start_date: date,
        end_date: date,
        reason: str,
    ) -> int:
        if current_role not in {Role.USER, Role.ADMIN}:
            raise AuthorizationError("Forbidden: You do not have permission to perform this action.")

        if end_date < start_date:
            raise ValidationError("End date must be on or after start date")

        reason = require_non_empty(reason, "Reason")
        if self._calendar.count_working_days(start_date, end_date) == 0:
            raise ValidationError("The requested period contains no working days")

        self._check_quota(int(employee_id), start_date, end_date)

        request_id = self._requests.create_leave(
            employee_id=int(employee_id),
            start_date=start_date,
            end_date=end_date,
            reason=reason,
        )
        logger.info("Leave request %s created for employee %s (%s..%s)", request_id, employee_id, start_date, end_date)
        return request_id

    def _decide(self, *, admin_id: int, request_id: int, status: RequestStatus, admin_note: str) -> None:
        req = self._requests.get_leave(request_id=int(request_id))
        if not req:
            raise NotFoundError("Leave request not found")
        if req.status != RequestStatus.PENDING:
            raise ConflictError("Leave request has already been processed")

        if status == RequestStatus.APPROVED:
            self._check_quota(req.employee_id, req.start_date, req.end_date)

        decided = self._requests.decide_leave(
            request_id=int(request_id),
            status=status,
            decided_by=int(admin_id),
            admin_note=(admin_note or "").strip() or None,
        )
        if not decided:
            raise ConflictError("Leave request has already been processed")
        logger.info("Leave request %s %s by %s", request_id, status.value, admin_id)

    def approve_leave(self, *, current_role: Role, admin_id: int, request_id: int, admin_note: str = "") -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Forbidden: You do not have permission to perform this action.")
        self._decide(admin_id=admin_id, request_id=request_id, status=RequestStatus.APPROVED, admin_note=admin_note)

    def reject_leave(self, *, current_role: Role, admin_id: int, request_id: int, admin_note: str = "") -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Forbidden: You do not have permission to perform this action.")
        self._decide(admin_id=admin_id, request_id=request_id, status=RequestStatus.REJECTED, admin_note=admin_note)

    def list_my_requests(self, *, employee_id: int) -> list[dict]:
        return list(self._requests.list_leave_requests(employee_id=int(employee_id), limit=200))

    def list_pending(self) -> list[dict]:
        return list(self._requests.list_leave_requests(status=RequestStatus.PENDING, limit=500))
