"""Bootstrap helpers for configuring the Flask application."""

from __future__ import annotations

import logging
from datetime import timedelta

from flask import Flask

from .error_handlers import register_error_handlers as _register_error_handlers
from .extensions import db
from .logging_config import setup_logging
from .module_registry import register_default_modules


def configure_logging(app: Flask) -> None:
    """Configure application logging if no handlers are present."""

    if app.config.get("LOG_DIR"):
        setup_logging(app, app.config.get("LOG_LEVEL", "INFO"), app.config["LOG_DIR"])

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

    from ..modules.AI.logics.cooldown import QuotaCooldown
    from .signals import ai_cooldown_expired

    db.init_app(app)

    # One cooldown per application; every AI feature consults it.
    app.extensions["quota_cooldown"] = QuotaCooldown(
        timedelta(minutes=app.config.get("AI_QUOTA_COOLDOWN_MINUTES", 15)),
        on_expire=lambda: ai_cooldown_expired.send(app),
    )


def register_error_handlers(app: Flask) -> None:
    """Map WordBloom exceptions to JSON responses."""

    _register_error_handlers(app)


def register_blueprints(app: Flask) -> None:
    """Register all default blueprints with the app."""

    register_default_modules(app)


def initialize_database(app: Flask) -> None:
    """Create database tables, seed the built-in catalog and correct the streak."""

    from ..modules.progress.interface import load_progress
    from ..modules.vocabulary.interface import seed_builtin_words

    db.create_all()

    created = seed_builtin_words()
    if created:
        app.logger.info("Seeded %d built-in words.", created)

    # Load-time streak correction and daily counter rollover
    load_progress()
