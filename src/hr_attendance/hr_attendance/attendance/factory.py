from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from ..core.constants import DEFAULT_OVERTIME_THRESHOLD_MINUTES
from ..shifts.model import ShiftOccurrence
from .strategies.base import AttendanceStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.normal_strategy import NormalStrategy
from .strategies.overtime_strategy import OvertimeStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    overtime_threshold_minutes: int = DEFAULT_OVERTIME_THRESHOLD_MINUTES

    def for_checkin(self, *, now: datetime, occurrence: ShiftOccurrence, grace_minutes: int) -> AttendanceStrategy:
        if now <= occurrence.start + timedelta(minutes=grace_minutes):
            return NormalStrategy()
        return LateStrategy()

    def for_checkout(self, *, now: datetime, occurrence: ShiftOccurrence) -> AttendanceStrategy:
        if now > occurrence.end + timedelta(minutes=self.overtime_threshold_minutes):
            return OvertimeStrategy()
        return NormalStrategy()
