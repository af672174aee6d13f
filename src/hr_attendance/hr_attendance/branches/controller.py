from __future__ import annotations

from flask import Flask

from ..common.guards import admin_required, current_role, json_body, login_required
from ..common.responses import ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.branch_service

    @app.route("/api/branches", methods=["GET"], endpoint="list_branches")
    @login_required
    def list_branches():
        return ok([b.to_dict() for b in service.list_all()])

    @app.route("/api/branches/<int:branch_id>", methods=["GET"], endpoint="get_branch")
    @login_required
    def get_branch(branch_id: int):
        return ok(service.get(branch_id).to_dict())

    @app.route("/api/branches", methods=["POST"], endpoint="create_branch")
    @admin_required
    def create_branch():
        body = json_body()
        branch_id = service.create(
            current_role=current_role(),
            name=body.get("name") or "",
            latitude=body.get("latitude"),
            longitude=body.get("longitude"),
            radius=body.get("radius"),
        )
        return ok({"id": branch_id}, "Branch created", 201)

    @app.route("/api/branches/<int:branch_id>", methods=["PUT"], endpoint="update_branch")
    @admin_required
    def update_branch(branch_id: int):
        body = json_body()
        branch = service.update(
            current_role=current_role(),
            branch_id=branch_id,
            name=body.get("name"),
            latitude=body.get("latitude"),
            longitude=body.get("longitude"),
            radius=body.get("radius"),
        )
        return ok(branch.to_dict(), "Branch updated")

    @app.route("/api/branches/<int:branch_id>", methods=["DELETE"], endpoint="delete_branch")
    @admin_required
    def delete_branch(branch_id: int):
        service.delete(current_role=current_role(), branch_id=branch_id)
        return ok(message="Branch deleted")
