from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Optional


@dataclass(frozen=True)
class Shift:
    """Domain entity: a recurring daily shift assigned to an employee."""

    shift_id: int
    employee_id: Optional[int]
    shift_name: str
    start_time: time
    end_time: time
    break_minutes: int = 0

    @property
    def spans_midnight(self) -> bool:
        """True when the shift ends on the calendar day after it starts.

        A shift whose end equals its start lasts a full day.
        """
        return self.end_time <= self.start_time

    def occurrence_on(self, day: date) -> "ShiftOccurrence":
        start = datetime.combine(day, self.start_time)
        end = datetime.combine(day, self.end_time)
        if self.spans_midnight:
            end += timedelta(days=1)
        return ShiftOccurrence(shift=self, work_date=day, start=start, end=end)

    def label(self) -> str:
        return f"{self.shift_name} ({self.start_time.strftime('%H:%M')} - {self.end_time.strftime('%H:%M')})"

    def to_dict(self) -> dict:
        return {
            "id": self.shift_id,
            "employee_id": self.employee_id,
            "name": self.shift_name,
            "start_time": self.start_time.strftime("%H:%M:%S"),
            "end_time": self.end_time.strftime("%H:%M:%S"),
            "break_minutes": self.break_minutes,
            "spans_midnight": self.spans_midnight,
        }


@dataclass(frozen=True)
class ShiftOccurrence:
    """One concrete run of a shift, anchored on the day it starts."""

    shift: Shift
    work_date: date
    start: datetime
    end: datetime

    @property
    def shift_id(self) -> int:
        return self.shift.shift_id

    def contains(self, moment: datetime, *, early_minutes: int = 0) -> bool:
        return self.start - timedelta(minutes=early_minutes) <= moment <= self.end
