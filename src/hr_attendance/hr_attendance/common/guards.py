from __future__ import annotations

from functools import wraps

from flask import request, session

from ..core.enums import Role
from .responses import fail


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return fail("Please log in to continue", 401)
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return fail("Please log in to continue", 401)
        if session.get("role") != Role.ADMIN.value:
            return fail("Forbidden: You do not have permission to perform this action.", 403)
        return view(*args, **kwargs)

    return wrapper


def current_user_id() -> int:
    return int(session["user_id"])


def current_role() -> Role:
    return Role(session.get("role"))


def json_body() -> dict:
    return request.get_json(silent=True) or {}
