from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import RequestStatus


@dataclass(frozen=True)
class LeaveRequest:
    request_id: int
    employee_id: int
    start_date: date
    end_date: date
    reason: str
    status: RequestStatus
    created_at: datetime
    decided_by: Optional[int] = None
    decided_at: Optional[datetime] = None
    admin_note: Optional[str] = None

    def covers(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date
