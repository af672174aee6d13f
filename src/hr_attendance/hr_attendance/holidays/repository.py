from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Holiday


class HolidayRepository(Protocol):
    def list_range(self, *, start: date, end: date) -> Sequence[Holiday]:
        raise NotImplementedError

    def get_by_day(self, day: date) -> Optional[Holiday]:
        raise NotImplementedError

    def create(self, *, name: str, day: date) -> int:
        raise NotImplementedError

    def delete(self, *, holiday_id: int) -> bool:
        raise NotImplementedError
