from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Iterable, Optional

from ..common.validators import require_int, require_range
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from .model import GeneralSettings
from .repository import SettingsRepository


class SettingsService:
    def __init__(self, settings: SettingsRepository):
        self._settings = settings

    def get(self) -> GeneralSettings:
        return self._settings.get()

    def update(
        self,
        *,
        current_role: Role,
        number_of_vacations_in_year=None,
        rate_of_extra_and_late_hour=None,
        number_of_day_working_hours=None,
        weekend_days: Optional[Iterable] = None,
    ) -> GeneralSettings:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Forbidden: You do not have permission to perform this action.")

        current = self._settings.get()

        vacations = current.number_of_vacations_in_year
        if number_of_vacations_in_year is not None:
            vacations = require_int(number_of_vacations_in_year, "Number of vacations in year")
            require_range(vacations, "Number of vacations in year", minimum=0, maximum=365)

        rate = current.rate_of_extra_and_late_hour
        if rate_of_extra_and_late_hour is not None:
            try:
                rate = Decimal(str(rate_of_extra_and_late_hour))
            except InvalidOperation:
                raise ValidationError("Rate of extra and late hour must be a number")
            if not rate.is_finite():
                raise ValidationError("Rate of extra and late hour must be a finite number")
            require_range(rate, "Rate of extra and late hour", minimum=0)

        hours = current.number_of_day_working_hours
        if number_of_day_working_hours is not None:
            hours = require_int(number_of_day_working_hours, "Number of day working hours")
            require_range(hours, "Number of day working hours", minimum=1, maximum=24)

        weekend = current.weekend_days
        if weekend_days is not None:
            weekend = tuple(sorted({require_int(d, "Weekend day") for d in weekend_days}))
            for d in weekend:
                require_range(d, "Weekend day", minimum=0, maximum=6)
            if len(weekend) == 7:
                raise ValidationError("At least one working day is required")

        updated = GeneralSettings(
            number_of_vacations_in_year=vacations,
            rate_of_extra_and_late_hour=rate,
            number_of_day_working_hours=hours,
            weekend_days=weekend,
        )
        self._settings.save(updated)
        return updated
