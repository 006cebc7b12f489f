"""Key/value model holding the learner's settings and progress aggregate."""

from __future__ import annotations

import copy
from typing import Any

from sqlalchemy.orm.attributes import flag_modified
from sqlalchemy.sql import func

from wordbloom_app.core.extensions import db


class AppState(db.Model):
    """JSON key/value store for everything that is not a word or a word stat.

    Keys are listed in ``core/defaults.py``.
    """

    __tablename__ = 'app_state'

    key = db.Column(db.String(100), primary_key=True)
    value = db.Column(db.JSON, nullable=True)
    updated_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """Get a value by key with code-level default fallback.

        Returns a copy, so callers may mutate the result and ``set`` it back.
        """
        row = db.session.get(cls, key)

        # 1. Check Database
        if row is not None and row.value is not None:
            return copy.deepcopy(row.value)

        # 2. Check Code-Level Defaults
        from wordbloom_app.core.defaults import DEFAULT_APP_STATE
        if key in DEFAULT_APP_STATE:
            return copy.deepcopy(DEFAULT_APP_STATE[key])

        # 3. Fallback to manual default
        return default

    @classmethod
    def set(cls, key: str, value: Any) -> 'AppState':
        """Set or update a value. The caller commits."""
        row = db.session.get(cls, key)
        if row is None:
            row = cls(key=key, value=value)
            db.session.add(row)
        else:
            row.value = value
            flag_modified(row, 'value')
        return row

    @classmethod
    def clear_all(cls) -> int:
        """Delete every stored key. The caller commits."""
        return cls.query.delete()

    def __repr__(self) -> str:
        return f'<AppState {self.key}={self.value!r}>'
