from __future__ import annotations

from datetime import date

from flask import Flask, request

from ..common.datetime_utils import parse_iso_date
from ..common.guards import admin_required, current_role, json_body, login_required
from ..common.responses import ok
from ..common.validators import require_int, require_range
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.holiday_service

    @app.route("/api/holidays", methods=["GET"], endpoint="list_holidays")
    @login_required
    def list_holidays():
        year = require_range(require_int(request.args.get("year") or container.attendance_service.now().year, "Year"), "Year", minimum=1, maximum=9999)
        start = parse_iso_date(request.args["from"]) if request.args.get("from") else date(year, 1, 1)
        end = parse_iso_date(request.args["to"]) if request.args.get("to") else date(year, 12, 31)
        holidays = service.list_range(start=start, end=end)
        return ok([{"id": h.holiday_id, "name": h.name, "date": h.day.isoformat()} for h in holidays])

    @app.route("/api/holidays", methods=["POST"], endpoint="create_holiday")
    @admin_required
    def create_holiday():
        body = json_body()
        holiday_id = service.add(
            current_role=current_role(),
            name=body.get("name") or "",
            day=parse_iso_date(body.get("date")),
        )
        return ok({"id": holiday_id}, "Holiday added", 201)

    @app.route("/api/holidays/<int:holiday_id>", methods=["DELETE"], endpoint="delete_holiday")
    @admin_required
    def delete_holiday(holiday_id: int):
        service.delete(current_role=current_role(), holiday_id=holiday_id)
        return ok(message="Holiday deleted")
