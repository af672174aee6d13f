from __future__ import annotations

from flask import jsonify


def ok(data=None, message: str = "OK", code: int = 200, **extra):
    payload = {"success": True, "message": message, "data": data}
    payload.update(extra)
    return jsonify(payload), code


def fail(message: str = "Bad Request", code: int = 400, errors=None, **extra):
    payload = {"success": False, "message": message}
    if errors is not None:
        payload["errors"] = errors
    payload.update(extra)
    return jsonify(payload), code
