"""Health check routes."""

from __future__ import annotations

from flask import Blueprint, current_app

from lottery_consulter.utils.responses import ok

health_bp = Blueprint("health", __name__)


@health_bp.get("/health")
def health_check():
    """Health check endpoint. Reports which randomness provider is configured."""

    provider = "random.org" if current_app.config.get("RANDOM_ORG_ENABLED", True) else "local"
    return ok({"status": "ok", "randomProvider": provider})
