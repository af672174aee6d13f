from __future__ import annotations

from datetime import datetime

from ...core.enums import AttendanceStatus
from ...shifts.model import ShiftOccurrence
from .base import AttendanceStrategy, StatusDecision, whole_minutes


class OvertimeStrategy(AttendanceStrategy):
    """Check-out past the overtime threshold; overtime counts from the shift end."""

    def decide_checkin(self, *, now: datetime, occurrence: ShiftOccurrence, grace_minutes: int) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.UNKNOWN)

    def decide_checkout(
        self,
        *,
        now: datetime,
        occurrence: ShiftOccurrence,
        current: AttendanceStatus,
    ) -> StatusDecision:
        overtime = whole_minutes(now, occurrence.end)
        return StatusDecision(status=current, overtime_minutes=overtime, note=f"Overtime {overtime} min")
