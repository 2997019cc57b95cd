"""Application factory and app-wide configuration."""

import logging
from typing import Any, Dict, Optional

from flask import Flask
from flask_cors import CORS

from interest_calculator import config
from interest_calculator.app.api.routes import api_bp


def create_app(config_overrides: Optional[Dict[str, Any]] = None) -> Flask:
    """Build the Flask app instance."""
    app = Flask(__name__)
    app.config.from_mapping(
        CORS_ORIGINS=config.CORS_ORIGINS,
        LOG_LEVEL=config.LOG_LEVEL,
    )
    if config_overrides:
        app.config.update(config_overrides)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
