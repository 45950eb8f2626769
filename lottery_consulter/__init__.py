"""Flask application package."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from flask import Flask

try:
    from dotenv import load_dotenv
except Exception:  # pragma: no cover
    load_dotenv = None  # type: ignore[assignment]


def create_app(overrides: Mapping[str, Any] | None = None) -> Flask:
    """Application factory.

    Args:
        overrides: optional config values applied after the environment config.

    Returns:
        Configured Flask application.
    """
    if load_dotenv is not None:
        load_dotenv()

    from lottery_consulter.config import get_config
    from lottery_consulter.error_handlers import register_error_handlers
    from lottery_consulter.logging_config import configure_logging
    from lottery_consulter.routes.fortune import fortune_bp
    from lottery_consulter.routes.health import health_bp
    from lottery_consulter.routes.lottery import lottery_bp
    from lottery_consulter.routes.lucky_index import lucky_index_bp
    from lottery_consulter.routes.random_seed import random_bp
    from lottery_consulter.routes.web import web_bp

    app = Flask(__name__)
    app.config.from_object(get_config())
    if overrides:
        app.config.update(overrides)

    configure_logging(app)
    register_error_handlers(app)

    app.register_blueprint(health_bp)
    app.register_blueprint(web_bp)
    app.register_blueprint(random_bp, url_prefix="/api")
    app.register_blueprint(lottery_bp, url_prefix="/api")
    app.register_blueprint(lucky_index_bp, url_prefix="/api")
    app.register_blueprint(fortune_bp, url_prefix="/api")

    return app
