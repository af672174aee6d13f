from __future__ import annotations

from datetime import date
from typing import Sequence

from ..common.validators import require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ConflictError, NotFoundError, ValidationError
from .model import Holiday
from .repository import HolidayRepository


class HolidayService:
    def __init__(self, holidays: HolidayRepository):
        self._holidays = holidays

    def list_range(self, *, start: date, end: date) -> Sequence[Holiday]:
        if end < start:
            raise ValidationError("End date must be on or after start date")
        return list(self._holidays.list_range(start=start, end=end))

    def add(self, *, current_role: Role, name: str, day: date) -> int:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Forbidden: You do not have permission to perform this action.")

        name = require_non_empty(name, "Holiday name")
        if self._holidays.get_by_day(day):
            raise ConflictError(f"A holiday is already registered on {day.isoformat()}")
        return self._holidays.create(name=name, day=day)

    def delete(self, *, current_role: Role, holiday_id: int) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Forbidden: You do not have permission to perform this action.")
        if not self._holidays.delete(holiday_id=int(holiday_id)):
            raise NotFoundError("Holiday not found")
