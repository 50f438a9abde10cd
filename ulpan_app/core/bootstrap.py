"""Bootstrap helpers for configuring the Flask application."""

from __future__ import annotations

import logging

from flask import Flask

from ..modules.content import load_pools
from ..modules.exercises.session import SessionRegistry
from .error_handlers import register_error_handlers
from .logging_config import setup_logging
from .module_registry import register_default_modules


def configure_logging(app: Flask) -> None:
    """Configure the package logger and, if it has none, the Flask app logger."""

    setup_logging(
        app,
        log_level=app.config.get("LOG_LEVEL", "INFO"),
        log_dir=app.config.get("LOG_DIR"),
        json_format=app.config.get("LOG_JSON", False),
    )

    if app.logger.handlers:
        return

    app.logger.setLevel(logging.DEBUG if app.debug else logging.INFO)
    handler = logging.StreamHandler()
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    handler.setFormatter(formatter)
    app.logger.addHandler(handler)
    app.logger.propagate = False
    app.logger.info("Flask app logger configured successfully.")


def load_content(app: Flask) -> None:
    """Load the JSON pools once and attach a session registry to the app."""

    pools = load_pools(app.config["CONTENT_DIR"])
    app.extensions["ulpan_pools"] = pools
    app.extensions["ulpan_sessions"] = SessionRegistry(pools, config=app.config)


def register_blueprints(app: Flask) -> None:
    """Register all default blueprints with the app."""

    register_default_modules(app)


__all__ = [
    "configure_logging",
    "load_content",
    "register_blueprints",
    "register_error_handlers",
]
