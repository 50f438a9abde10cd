"""Application factory for the Ulpan practice app."""

from __future__ import annotations

from flask import Flask

from .config import Config
from .core.bootstrap import (
    configure_logging,
    load_content,
    register_blueprints,
    register_error_handlers,
)

__all__ = ["create_app"]


def create_app(config_class: type[Config] = Config) -> Flask:
    """Create and configure a Flask application instance."""

    app = Flask(__name__)
    app.config.from_object(config_class)
    config_class.init_app(app)

    configure_logging(app)
    register_error_handlers(app)
    load_content(app)
    register_blueprints(app)

    return app
