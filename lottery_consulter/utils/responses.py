"""Helpers for consistent JSON response schema."""

from __future__ import annotations

from typing import Any

from flask import Response, jsonify


def ok(data: Any, status_code: int = 200, **extra: Any) -> Response:
    """Success response.

    Extra keyword arguments become top-level keys next to ``data``
    (e.g. ``source`` for random draws, ``metadata`` for the lucky index).
    """

    body = {"success": True, "data": data, "error": None}
    body.update(extra)
    return jsonify(body), status_code


def fail(code: str, message: str, status_code: int, details: Any | None = None) -> Response:
    """Error response."""

    return (
        jsonify(
            {
                "success": False,
                "data": None,
                "error": {"code": code, "message": message, "details": details},
            }
        ),
        status_code,
    )
