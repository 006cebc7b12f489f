"""Database models package for WordBloom."""

from ..core.extensions import db

from .app_state import AppState
from .vocabulary import Word, WordStat

__all__ = [
    "db",
    "AppState",
    "Word",
    "WordStat",
]
