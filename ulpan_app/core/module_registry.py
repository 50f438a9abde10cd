"""Declarative registration of blueprint-backed modules.

Each module is described by where its blueprint lives and the URL prefix it
is mounted under, so adding a module is a one-line change here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from flask import Blueprint, Flask
from werkzeug.utils import import_string


@dataclass(frozen=True)
class ModuleDefinition:
    """Describe how a blueprint-backed module is registered with the app."""

    import_path: str
    attribute: str
    url_prefix: Optional[str] = None
    version: str = "1.0"

    def load_blueprint(self) -> Blueprint:
        """Import and return the blueprint described by this definition."""

        module = import_string(self.import_path)
        blueprint = getattr(module, self.attribute, None)
        if not isinstance(blueprint, Blueprint):
            raise TypeError(
                "Expected attribute '%s' in '%s' to be a Flask Blueprint, got %r instead"
                % (self.attribute, self.import_path, type(blueprint))
            )
        return blueprint


def register_modules(app: Flask, modules: Sequence[ModuleDefinition]) -> None:
    for module in modules:
        app.register_blueprint(module.load_blueprint(), url_prefix=module.url_prefix)
        app.logger.debug(
            "Registered module %s (version %s) at prefix %s",
            module.import_path,
            module.version,
            module.url_prefix or "<root>",
        )


def register_default_modules(app: Flask) -> None:
    register_modules(app, tuple(DEFAULT_MODULES))


DEFAULT_MODULES: Iterable[ModuleDefinition] = (
    ModuleDefinition("ulpan_app.modules.exercises", "practice_bp", url_prefix="/api/practice", version="1.0"),
)
