from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from ..core.constants import (
    DEFAULT_DAY_WORKING_HOURS,
    DEFAULT_EXTRA_AND_LATE_HOUR_RATE,
    DEFAULT_VACATIONS_IN_YEAR,
    DEFAULT_WEEKEND_DAYS,
)


@dataclass(frozen=True)
class GeneralSettings:
    """Company-wide payroll rules.

    ``weekend_days`` holds ``date.weekday()`` numbers (Monday=0).
    """

    number_of_vacations_in_year: int = DEFAULT_VACATIONS_IN_YEAR
    rate_of_extra_and_late_hour: Decimal = Decimal(str(DEFAULT_EXTRA_AND_LATE_HOUR_RATE))
    number_of_day_working_hours: int = DEFAULT_DAY_WORKING_HOURS
    weekend_days: tuple[int, ...] = field(default=DEFAULT_WEEKEND_DAYS)

    def to_dict(self) -> dict:
        return {
            "number_of_vacations_in_year": self.number_of_vacations_in_year,
            "rate_of_extra_and_late_hour": float(self.rate_of_extra_and_late_hour),
            "number_of_day_working_hours": self.number_of_day_working_hours,
            "weekend_days": list(self.weekend_days),
        }
