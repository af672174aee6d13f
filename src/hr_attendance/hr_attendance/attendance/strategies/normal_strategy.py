from __future__ import annotations

from datetime import datetime

from ...core.enums import AttendanceStatus
from ...shifts.model import ShiftOccurrence
from .base import AttendanceStrategy, StatusDecision


class NormalStrategy(AttendanceStrategy):
    """On-time check-in, plain check-out."""

    def decide_checkin(self, *, now: datetime, occurrence: ShiftOccurrence, grace_minutes: int) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.ON_TIME)

    def decide_checkout(
        self,
        *,
        now: datetime,
        occurrence: ShiftOccurrence,
        current: AttendanceStatus,
    ) -> StatusDecision:
        return StatusDecision(status=current)
