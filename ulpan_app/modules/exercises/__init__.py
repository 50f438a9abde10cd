"""Practice exercises: generation, evaluation, session orchestration and the JSON API."""

from flask import Blueprint

practice_bp = Blueprint('practice', __name__)


def register_practice_routes():
    """Import routes to attach them to the blueprint."""
    from .routes import api  # noqa: F401


register_practice_routes()
