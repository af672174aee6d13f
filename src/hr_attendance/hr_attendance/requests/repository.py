from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import RequestStatus
from .model import LeaveRequest


class RequestRepository(Protocol):
    def create_leave(
        self,
        *,
        employee_id: int,
        start_date: date,
        end_date: date,
        reason: str,
    ) -> int:
        raise NotImplementedError

    def get_leave(self, *, request_id: int) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def list_leave_requests(
        self,
        *,
        status: Optional[RequestStatus] = None,
        employee_id: Optional[int] = None,
        limit: int = 200,
    ) -> Sequence[dict]:
        """Return API rows (joined with employee)."""

        raise NotImplementedError

    def list_approved_between(
        self,
        *,
        start: date,
        end: date,
        employee_id: Optional[int] = None,
    ) -> Sequence[LeaveRequest]:
        """Approved leaves overlapping [start, end]."""

        raise NotImplementedError

    def decide_leave(
        self,
        *,
        request_id: int,
        status: RequestStatus,
        decided_by: int,
        admin_note: Optional[str] = None,
    ) -> bool:
        raise NotImplementedError
