"""Shift matching for check-in and check-out.

Two families of helpers live here:

* clock-only checks (``is_within_shift_time``, ``is_shift_time_end``) that look
  at the time of day and treat shifts crossing midnight as wrapping around;
* calendar-aware lookups (``find_current_shift``, ``find_recently_ended_shift``,
  ``next_shift_start``) that build concrete occurrences for the neighbouring
  days, so a check-out at 01:30 is matched to the 21:00-01:00 shift that
  started the evening before.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterable, Optional

from ..common.datetime_utils import time_to_seconds
from .model import Shift, ShiftOccurrence


def _clock_seconds(moment: datetime) -> int:
    return moment.hour * 3600 + moment.minute * 60 + moment.second


def is_within_shift_time(moment: datetime, shift: Shift) -> bool:
    current = _clock_seconds(moment)
    start = time_to_seconds(shift.start_time)
    end = time_to_seconds(shift.end_time)

    if shift.spans_midnight:
        return current >= start or current <= end
    return start <= current <= end


def is_shift_time_end(moment: datetime, shift: Shift) -> bool:
    """Whether the clock time of ``moment`` lies after the end of ``shift``.

    For a shift crossing midnight "after the end" means the gap between its end
    and its next start.
    """

    current = _clock_seconds(moment)
    start = time_to_seconds(shift.start_time)
    end = time_to_seconds(shift.end_time)

    if shift.spans_midnight:
        return end < current < start
    return current > end


def _occurrences_around(shifts: Iterable[Shift], moment: datetime, day_offsets: Iterable[int]):
    offsets = tuple(day_offsets)
    for shift in shifts:
        if shift is None:
            continue
        for offset in offsets:
            yield shift.occurrence_on(moment.date() + timedelta(days=offset))


def find_current_shift(shifts: Iterable[Shift], moment: datetime, *, early_minutes: int = 0) -> Optional[ShiftOccurrence]:
    """First shift (in the given order) running at ``moment``.

    ``early_minutes`` widens the window before the shift start so an employee
    may check in slightly ahead of time.
    """

    for shift in shifts:
        if shift is None:
            continue
        # yesterday first: a midnight shift still running takes precedence
        # over today's run of the same shift starting later in the evening.
        for offset in (-1, 0, 1):
            occurrence = shift.occurrence_on(moment.date() + timedelta(days=offset))
            if occurrence.contains(moment, early_minutes=early_minutes):
                return occurrence
    return None


def find_recently_ended_shift(shifts: Iterable[Shift], moment: datetime) -> Optional[ShiftOccurrence]:
    """Occurrence whose end is the latest one not after ``moment``."""

    ended = [o for o in _occurrences_around(shifts, moment, (-1, 0)) if o.end <= moment]
    if not ended:
        return None
    return max(ended, key=lambda o: o.end)


def next_shift_start(shifts: Iterable[Shift], moment: datetime) -> Optional[datetime]:
    starts = [o.start for o in _occurrences_around(shifts, moment, (0, 1)) if o.start > moment]
    return min(starts) if starts else None
