from __future__ import annotations

from flask import Flask

from ..common.guards import admin_required, current_role, current_user_id, json_body, login_required
from ..common.responses import ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.shift_service

    @app.route("/api/shifts", methods=["GET"], endpoint="list_shifts")
    @admin_required
    def list_shifts():
        return ok([s.to_dict() for s in service.list_all(current_role=current_role())])

    @app.route("/api/employees/<int:employee_id>/shifts", methods=["GET"], endpoint="employee_shifts")
    @login_required
    def employee_shifts(employee_id: int):
        shifts = service.list_for_employee(employee_id, current_user_id=current_user_id(), current_role=current_role())
        return ok([s.to_dict() for s in shifts])

    @app.route("/api/shifts", methods=["POST"], endpoint="create_shift")
    @admin_required
    def create_shift():
        body = json_body()
        shift_id = service.add_shift(
            current_role=current_role(),
            employee_id=body.get("employee_id"),
            start_time=body.get("start_time") or "",
            end_time=body.get("end_time") or "",
            shift_name=body.get("name"),
            break_minutes=body.get("break_minutes") or 0,
        )
        return ok({"id": shift_id}, "Shift created", 201)

    @app.route("/api/shifts/<int:shift_id>", methods=["DELETE"], endpoint="delete_shift")
    @admin_required
    def delete_shift(shift_id: int):
        service.delete_shift(current_role=current_role(), shift_id=shift_id)
        return ok(message="Shift deleted")
