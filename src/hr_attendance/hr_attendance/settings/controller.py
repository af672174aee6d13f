from __future__ import annotations

from flask import Flask

from ..common.guards import admin_required, current_role, json_body, login_required
from ..common.responses import ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.settings_service

    @app.route("/api/settings", methods=["GET"], endpoint="get_settings")
    @login_required
    def get_settings():
        return ok(service.get().to_dict())

    @app.route("/api/settings", methods=["PUT"], endpoint="update_settings")
    @admin_required
    def update_settings():
        body = json_body()
        updated = service.update(
            current_role=current_role(),
            number_of_vacations_in_year=body.get("number_of_vacations_in_year"),
            rate_of_extra_and_late_hour=body.get("rate_of_extra_and_late_hour"),
            number_of_day_working_hours=body.get("number_of_day_working_hours"),
            weekend_days=body.get("weekend_days"),
        )
        return ok(updated.to_dict(), "Settings updated")
