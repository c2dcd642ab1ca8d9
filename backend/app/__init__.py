"""Application factory and app-wide configuration."""

from typing import Optional

from flask import Flask, request
from flask_cors import CORS

from backend.app.api.routes import api_bp
from backend.core.config import Settings, load_settings
from backend.core.log import get_logger, set_request_id, setup_logging

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or load_settings()
    setup_logging(settings.log_level)

    app = Flask(__name__)
    app.config["SETTINGS"] = settings
    app.config["SCHEME"] = settings.scheme

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins}},
        supports_credentials=True,
    )

    @app.before_request
    def _bind_request_id() -> None:
        set_request_id(request.headers.get("X-Request-ID"))

    app.register_blueprint(api_bp, url_prefix="/api")
    logger.info("app created env=%s origins=%s", settings.env, ",".join(settings.cors_origins))
    return app
