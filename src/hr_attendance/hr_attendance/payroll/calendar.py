from __future__ import annotations

import calendar
from datetime import date, timedelta
from typing import Iterator

from ..holidays.repository import HolidayRepository
from ..settings.repository import SettingsRepository


def month_bounds(year: int, month: int) -> tuple[date, date]:
    last = calendar.monthrange(int(year), int(month))[1]
    return date(int(year), int(month), 1), date(int(year), int(month), last)


def iter_days(start: date, end: date) -> Iterator[date]:
    day = start
    while day <= end:
        yield day
        day += timedelta(days=1)


class WorkCalendar:
    """Working-day arithmetic: weekend days come from the general settings,
    official holidays from the holiday table.
    """

    def __init__(self, settings: SettingsRepository, holidays: HolidayRepository):
        self._settings = settings
        self._holidays = holidays

    def is_working_day(self, day: date) -> bool:
        if day.weekday() in self._settings.get().weekend_days:
            return False
        return not self._holidays.list_range(start=day, end=day)

    def working_days(self, start: date, end: date) -> list[date]:
        if end < start:
            return []
        weekend = set(self._settings.get().weekend_days)
        off = {h.day for h in self._holidays.list_range(start=start, end=end)}
        return [d for d in iter_days(start, end) if d.weekday() not in weekend and d not in off]

    def count_working_days(self, start: date, end: date) -> int:
        return len(self.working_days(start, end))
