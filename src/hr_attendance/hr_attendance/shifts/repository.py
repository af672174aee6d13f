from __future__ import annotations

from datetime import time
from typing import Optional, Protocol, Sequence

from .model import Shift


class ShiftRepository(Protocol):
    def list_all(self) -> Sequence[Shift]:
        raise NotImplementedError

    def get_by_id(self, shift_id: int) -> Optional[Shift]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: int) -> Sequence[Shift]:
        """Shifts of one employee, ordered by start time."""

        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        shift_name: str,
        start_time: time,
        end_time: time,
        break_minutes: int = 0,
    ) -> int:
        raise NotImplementedError

    def delete(self, *, shift_id: int) -> bool:
        raise NotImplementedError
