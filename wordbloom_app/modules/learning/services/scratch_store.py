"""
Session scratch stores.

A tiny key/value area scoped to the learner's browser session, used only to
resume a daily session. Failures surface as ``StorageAccessError``.
"""
from typing import Any, Dict

from flask import session

from wordbloom_app.core.error_handlers import StorageAccessError


class FlaskSessionScratchStore:
    """Scratch values kept in the signed Flask session cookie."""

    PREFIX = 'scratch.'

    def get(self, key: str, default: Any = None) -> Any:
        try:
            return session.get(self.PREFIX + key, default)
        except RuntimeError as exc:
            raise StorageAccessError(str(exc), store='session') from exc

    def set(self, key: str, value: Any) -> None:
        try:
            session[self.PREFIX + key] = value
        except RuntimeError as exc:
            raise StorageAccessError(str(exc), store='session') from exc

    def remove(self, key: str) -> None:
        try:
            session.pop(self.PREFIX + key, None)
        except RuntimeError as exc:
            raise StorageAccessError(str(exc), store='session') from exc


class MemoryScratchStore:
    """In-process scratch store."""

    def __init__(self, initial: Dict[str, Any] = None):
        self.data: Dict[str, Any] = dict(initial or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.data.pop(key, None)
