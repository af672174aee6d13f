from __future__ import annotations

from flask import Flask, request

from ..branches.model import LocationData
from ..common.guards import admin_required, current_role, current_user_id, json_body, login_required
from ..common.responses import ok
from ..common.validators import require_float, require_int
from ..core.constants import DEFAULT_HISTORY_LIMIT
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..container import Container


def _location_from(body: dict) -> LocationData:
    if body.get("latitude") is None or body.get("longitude") is None:
        raise ValidationError("Location is required")
    accuracy = body.get("accuracy")
    timestamp = body.get("timestamp")
    return LocationData(
        latitude=require_float(body.get("latitude"), "Latitude"),
        longitude=require_float(body.get("longitude"), "Longitude"),
        accuracy=require_float(accuracy, "Accuracy") if accuracy is not None else None,
        timestamp=require_int(timestamp, "Timestamp") if timestamp is not None else None,
    )


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/api/attendance/check-in", methods=["POST"], endpoint="check_in")
    @login_required
    def check_in():
        body = json_body()
        employee_id = require_int(body.get("employee_id", current_user_id()), "Employee id")
        record = service.check_in(current_user_id(), employee_id, _location_from(body))
        return ok(service.to_dict(record), "Attendance recorded successfully", 201)

    @app.route("/api/attendance/check-out", methods=["POST"], endpoint="check_out")
    @login_required
    def check_out():
        body = json_body()
        employee_id = require_int(body.get("employee_id", current_user_id()), "Employee id")
        record = service.check_out(current_user_id(), employee_id, _location_from(body))
        return ok(service.to_dict(record), "Leave recorded successfully")

    @app.route("/api/attendance/state", methods=["GET"], endpoint="attendance_state")
    @login_required
    def attendance_state():
        state = service.action_state(current_user_id())
        return ok(
            {
                "can_check_in": state.can_check_in,
                "can_check_out": state.can_check_out,
                "shift_id": state.shift_id,
            },
            state.message,
        )

    @app.route("/api/attendance/history", methods=["GET"], endpoint="attendance_history")
    @login_required
    def attendance_history():
        employee_id = require_int(request.args.get("employee_id", current_user_id()), "Employee id")
        limit = require_int(request.args.get("limit", DEFAULT_HISTORY_LIMIT), "Limit")
        rows = service.get_history(
            current_user_id=current_user_id(),
            current_role=current_role(),
            employee_id=employee_id,
            limit=limit,
        )
        return ok(rows)

    @app.route("/api/attendance/presence", methods=["GET"], endpoint="attendance_presence")
    @login_required
    def attendance_presence():
        employee_id = require_int(request.args.get("employee_id", current_user_id()), "Employee id")
        shift_id = require_int(request.args.get("shift_id"), "Shift id")
        if current_role() != Role.ADMIN and employee_id != current_user_id():
            raise AuthorizationError("Forbidden: You do not have permission to perform this action.")
        present = service.is_employee_present(employee_id, shift_id, service.now())
        return ok({"employee_id": employee_id, "shift_id": shift_id, "present": present})

    @app.route("/api/dashboard/stats", methods=["GET"], endpoint="dashboard_stats")
    @admin_required
    def dashboard_stats():
        return ok(service.today_stats())
