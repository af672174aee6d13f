from __future__ import annotations

from decimal import Decimal
from typing import Mapping, Protocol


class SalaryAdjustmentRepository(Protocol):
    def get_sales_percentage(self, *, employee_id: int, year: int, month: int) -> Decimal:
        """Zero when nothing was recorded for the month."""

        raise NotImplementedError

    def list_sales_percentages(self, *, year: int, month: int) -> Mapping[int, Decimal]:
        raise NotImplementedError

    def set_sales_percentage(self, *, employee_id: int, year: int, month: int, percentage: Decimal) -> None:
        raise NotImplementedError
