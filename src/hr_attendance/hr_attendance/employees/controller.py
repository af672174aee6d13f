from __future__ import annotations

from flask import Flask, session

from ..common.guards import current_role, current_user_id, json_body, login_required
from ..common.responses import ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    def login():
        body = json_body()
        user = container.auth_service.authenticate(body.get("email", ""), body.get("password", ""))

        session.clear()
        session["user_id"] = user.employee_id
        session["name"] = user.name
        session["email"] = user.email
        session["role"] = user.role.value
        session["branch_id"] = user.branch_id
        session.permanent = True

        return ok(
            {
                "id": user.employee_id,
                "name": user.name,
                "email": user.email,
                "role": user.role.value,
                "branch_id": user.branch_id,
                "branch_name": user.branch_name,
                "shift_info": user.shift_info,
            },
            "Login successful",
        )

    @app.route("/api/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return ok(message="Logged out")

    @app.route("/api/auth/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        profile = container.employee_service.get_profile(
            current_user_id=current_user_id(),
            current_role=current_role(),
            employee_id=current_user_id(),
        )
        return ok(profile)

    @app.route("/api/employees/<int:employee_id>", methods=["GET"], endpoint="employee_profile")
    @login_required
    def employee_profile(employee_id: int):
        profile = container.employee_service.get_profile(
            current_user_id=current_user_id(),
            current_role=current_role(),
            employee_id=employee_id,
        )
        return ok(profile)
