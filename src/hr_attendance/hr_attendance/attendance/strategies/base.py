from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ...core.enums import AttendanceStatus
from ...shifts.model import ShiftOccurrence


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus
    note: Optional[str] = None
    late_minutes: int = 0
    overtime_minutes: int = 0


def whole_minutes(later: datetime, earlier: datetime) -> int:
    return max(int((later - earlier).total_seconds() // 60), 0)


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide an attendance status."""

    @abstractmethod
    def decide_checkin(self, *, now: datetime, occurrence: ShiftOccurrence, grace_minutes: int) -> StatusDecision:
        raise NotImplementedError

    @abstractmethod
    def decide_checkout(
        self,
        *,
        now: datetime,
        occurrence: ShiftOccurrence,
        current: AttendanceStatus,
    ) -> StatusDecision:
        raise NotImplementedError
