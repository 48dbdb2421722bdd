# --------------------------------------------------------------
#  __init__.py (package root)
# --------------------------------------------------------------
import sys
from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from .config import Config
from .routes.routes import bp as main_bp
from .services.logging_config import configure_logging

__all__ = ["create_app"]


def create_app(config_overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    """Factory for the Flask WSGI application.

    ``config_overrides`` is applied on top of :class:`Config`, which lets
    tests point ``LOG_DIR`` at a temporary directory or swap the engine.
    """
    app: Flask | None = None
    try:
        app = Flask(__name__)
        app.config.from_object(Config)
        if config_overrides:
            app.config.update(config_overrides)

        # Configure logging early to capture all messages
        configure_logging(app)

        app.logger.info("[INIT] Enabling CORS...")
        CORS(app, origins=app.config["CORS_ORIGINS"])

        app.logger.info("[INIT] Registering blueprints...")
        app.register_blueprint(main_bp)

        app.logger.info("[INIT] Flask app creation complete")
        return app
    except Exception as e:
        if app is not None and hasattr(app, "logger"):
            app.logger.error(f"[INIT ERROR] Failed to create app: {e}", exc_info=True)
        else:
            print(f"[INIT ERROR] Failed to create app: {e}", file=sys.stderr)
        raise
