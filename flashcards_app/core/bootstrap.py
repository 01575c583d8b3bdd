"""Bootstrap helpers for configuring the Flask application."""

from __future__ import annotations

import logging

from flask import Flask

from .error_handlers import register_error_handlers as _register_error_handlers
from .extensions import cors, db
from .logging_config import setup_logging
from .module_registry import register_default_modules


def configure_logging(app: Flask) -> None:
    """Configure application logging if no handlers are present."""

    if app.config.get("LOG_TO_FILE"):
        setup_logging(
            app,
            log_level=app.config.get("LOG_LEVEL", "INFO"),
            log_dir=app.config.get("LOG_DIR"),
        )

    if app.logger.handlers:
        return

    app.logger.setLevel(getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO))
    handler = logging.StreamHandler()
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    handler.setFormatter(formatter)
    app.logger.addHandler(handler)
    app.logger.propagate = False
    app.logger.info("Flask app logger configured successfully.")


def register_extensions(app: Flask) -> None:
    """Initialize shared extensions with the Flask app instance."""

    db.init_app(app)
    cors.init_app(app, resources={r"/api/*": {"origins": "*"}, r"/study/api/*": {"origins": "*"}})


def register_error_handlers(app: Flask) -> None:
    """Install the JSON error envelope for API routes."""

    _register_error_handlers(app)


def register_blueprints(app: Flask) -> None:
    """Register all default blueprints with the app."""

    register_default_modules(app)


def initialize_database(app: Flask) -> None:
    """Create the key-value table backing session and dataset persistence."""

    from ..models import KeyValueEntry  # noqa: F401  (registers the table)

    db.create_all()
    app.logger.info("Key-value store ready at %s", app.config.get("SQLALCHEMY_DATABASE_URI"))
