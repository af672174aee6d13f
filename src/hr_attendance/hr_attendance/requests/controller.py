from __future__ import annotations

from flask import Flask

from ..common.datetime_utils import parse_iso_date
from ..common.guards import admin_required, current_role, current_user_id, json_body, login_required
from ..common.responses import ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.request_service

    @app.route("/api/leave-requests", methods=["POST"], endpoint="create_leave")
    @login_required
    def create_leave():
        body = json_body()
        request_id = service.create_leave(
            current_role=current_role(),
            employee_id=current_user_id(),
            start_date=parse_iso_date(body.get("start_date")),
            end_date=parse_iso_date(body.get("end_date")),
            reason=body.get("reason") or "",
        )
        return ok({"id": request_id}, "Leave request submitted", 201)

    @app.route("/api/leave-requests/mine", methods=["GET"], endpoint="my_leave_requests")
    @login_required
    def my_leave_requests():
        return ok(service.list_my_requests(employee_id=current_user_id()))

    @app.route("/api/leave-requests/pending", methods=["GET"], endpoint="pending_leave_requests")
    @admin_required
    def pending_leave_requests():
        return ok(service.list_pending())

    @app.route("/api/leave-requests/<int:request_id>/approve", methods=["POST"], endpoint="approve_leave")
    @admin_required
    def approve_leave(request_id: int):
        service.approve_leave(
            current_role=current_role(),
            admin_id=current_user_id(),
            request_id=request_id,
            admin_note=json_body().get("admin_note", ""),
        )
        return ok(message="Leave request approved")

    @app.route("/api/leave-requests/<int:request_id>/reject", methods=["POST"], endpoint="reject_leave")
    @admin_required
    def reject_leave(request_id: int):
        service.reject_leave(
            current_role=current_role(),
            admin_id=current_user_id(),
            request_id=request_id,
            admin_note=json_body().get("admin_note", ""),
        )
        return ok(message="Leave request rejected")
