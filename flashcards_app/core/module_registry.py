"""Utilities for declaratively registering application modules.

Each blueprint-backed module is described with metadata so that registration
stays in one place instead of being scattered through the app factory.
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

    def load_blueprint(self, app: Optional[Flask] = None) -> Blueprint:
        """Import the module, run its ``setup_module`` hook and return the blueprint."""

        module = import_string(self.import_path)
        blueprint = getattr(module, self.attribute, None)
        if not isinstance(blueprint, Blueprint):
            raise TypeError(
                "Expected attribute '%s' in '%s' to be a Flask Blueprint, got %r instead"
                % (self.attribute, self.import_path, type(blueprint))
            )
        setup = getattr(module, "setup_module", None)
        if callable(setup):
            setup(app)
        return blueprint


def register_modules(app: Flask, modules: Sequence[ModuleDefinition]) -> None:
    """Register all modules in the provided iterable with the Flask app."""

    for module in modules:
        blueprint = module.load_blueprint(app)
        app.register_blueprint(blueprint, url_prefix=module.url_prefix)
        app.logger.debug(
            "Registered module %s (version %s) at prefix %s",
            module.import_path,
            module.version,
            module.url_prefix or "<root>",
        )


def register_default_modules(app: Flask) -> None:
    """Convenience helper that registers the built-in Flashcards modules."""

    register_modules(app, DEFAULT_MODULES)


DEFAULT_MODULES: Iterable[ModuleDefinition] = (
    ModuleDefinition("flashcards_app.modules.landing", "blueprint", version="1.0"),
    ModuleDefinition("flashcards_app.modules.importer", "blueprint", url_prefix="/api", version="1.0"),
    ModuleDefinition("flashcards_app.modules.study", "blueprint", url_prefix="/study", version="1.0"),
)
