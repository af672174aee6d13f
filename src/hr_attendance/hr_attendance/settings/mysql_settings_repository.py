from __future__ import annotations

from decimal import Decimal

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import GeneralSettings
from .repository import SettingsRepository


class MySQLSettingsRepository(SettingsRepository):
    """Single-row table (``settings_id = 1``)."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self) -> GeneralSettings:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT number_of_vacations_in_year, rate_of_extra_and_late_hour,
                       number_of_day_working_hours, weekend_days
                FROM general_settings
                WHERE settings_id=1
                """
            )
            r = fetchone(cur)
            if not r:
                return GeneralSettings()
            weekend = tuple(int(d) for d in str(r.get("weekend_days") or "").split(",") if d.strip())
            return GeneralSettings(
                number_of_vacations_in_year=int(r["number_of_vacations_in_year"]),
                rate_of_extra_and_late_hour=Decimal(str(r["rate_of_extra_and_late_hour"])),
                number_of_day_working_hours=int(r["number_of_day_working_hours"]),
                weekend_days=weekend,
            )

    def save(self, settings: GeneralSettings) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO general_settings(
                    settings_id, number_of_vacations_in_year, rate_of_extra_and_late_hour,
                    number_of_day_working_hours, weekend_days
                )
                VALUES(1,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    number_of_vacations_in_year=VALUES(number_of_vacations_in_year),
                    rate_of_extra_and_late_hour=VALUES(rate_of_extra_and_late_hour),
                    number_of_day_working_hours=VALUES(number_of_day_working_hours),
                    weekend_days=VALUES(weekend_days)
                """,
                (
                    settings.number_of_vacations_in_year,
                    settings.rate_of_extra_and_late_hour,
                    settings.number_of_day_working_hours,
                    ",".join(str(d) for d in settings.weekend_days),
                ),
            )
