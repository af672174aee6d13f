from __future__ import annotations

from datetime import datetime

from ...core.enums import AttendanceStatus
from ...shifts.model import ShiftOccurrence
from .base import AttendanceStrategy, StatusDecision, whole_minutes


class LateStrategy(AttendanceStrategy):
    """Check-in after the grace period; lateness counts from the shift start."""

    def decide_checkin(self, *, now: datetime, occurrence: ShiftOccurrence, grace_minutes: int) -> StatusDecision:
        late = whole_minutes(now, occurrence.start)
        return StatusDecision(status=AttendanceStatus.LATE, late_minutes=late, note=f"Late by {late} min")

    def decide_checkout(
        self,
        *,
        now: datetime,
        occurrence: ShiftOccurrence,
        current: AttendanceStatus,
    ) -> StatusDecision:
        return StatusDecision(status=current)
