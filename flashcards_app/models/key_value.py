"""Key-value model backing the durable session and dataset slots."""

from __future__ import annotations

from typing import Any

from sqlalchemy.sql import func

from flashcards_app.core.extensions import db


class KeyValueEntry(db.Model):
    """One durable slot: a fixed key holding a JSON document.

    The study session and the dataset registry each live in their own row,
    the server-side counterpart of two browser local-storage entries.
    """

    __tablename__ = 'key_value_store'

    key = db.Column(db.String(100), primary_key=True)
    value = db.Column(db.JSON, nullable=True)
    updated_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        """Return the stored value for ``key`` or ``default`` when absent."""
        entry = db.session.get(cls, key)
        if entry is None or entry.value is None:
            return default
        return entry.value

    @classmethod
    def set(cls, key: str, value: Any) -> 'KeyValueEntry':
        """Insert or overwrite ``key``. The caller commits."""
        entry = db.session.get(cls, key)
        if entry is None:
            entry = cls(key=key, value=value)
            db.session.add(entry)
        else:
            entry.value = value
        return entry

    @classmethod
    def remove(cls, key: str) -> bool:
        entry = db.session.get(cls, key)
        if entry is None:
            return False
        db.session.delete(entry)
        return True

    def __repr__(self) -> str:
        return f'<KeyValueEntry {self.key}>'
