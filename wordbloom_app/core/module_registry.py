"""Utilities for declaratively registering application modules.

Each feature package under ``wordbloom_app.modules`` exposes a blueprint that
is described here with metadata, so registration stays a single loop.
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
    """Register all modules in the provided iterable with the Flask app."""

    for module in modules:
        blueprint = module.load_blueprint()
        app.register_blueprint(blueprint, url_prefix=module.url_prefix)
        app.logger.debug(
            "Registered module %s (version %s) at prefix %s",
            module.import_path,
            module.version,
            module.url_prefix or "<root>",
        )


def register_default_modules(app: Flask) -> None:
    """Convenience helper that registers the built-in WordBloom modules."""

    register_modules(app, DEFAULT_MODULES)


DEFAULT_MODULES: Iterable[ModuleDefinition] = (
    ModuleDefinition("wordbloom_app.modules.vocabulary", "vocabulary_bp", url_prefix="/api/words"),
    ModuleDefinition("wordbloom_app.modules.learning", "learning_bp", url_prefix="/api/learning"),
    ModuleDefinition("wordbloom_app.modules.progress", "progress_bp", url_prefix="/api/progress"),
    ModuleDefinition("wordbloom_app.modules.quiz", "quiz_bp", url_prefix="/api/quiz"),
    ModuleDefinition("wordbloom_app.modules.gamification", "gamification_api_bp", url_prefix="/api/gamification"),
    ModuleDefinition("wordbloom_app.modules.user_profile", "user_profile_bp", url_prefix="/api/settings"),
    ModuleDefinition("wordbloom_app.modules.AI", "ai_bp", url_prefix="/api/ai"),
)
