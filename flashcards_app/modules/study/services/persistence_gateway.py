# File: flashcards_app/modules/study/services/persistence_gateway.py
"""
Persistence Gateway
===================
Whole-state save/load of the live session and of the dataset registry into
a durable key-value store, one fixed key each. Loads never fail the caller:
a missing or unreadable value comes back as ``None`` (session) or an empty
registry, and the reason is logged.
"""

from __future__ import annotations

import copy
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from flashcards_app.models import KeyValueEntry, db
from flashcards_app.utils.db_session import safe_commit

from ..logics.dataset_registry import DatasetRegistry
from ..schemas import SessionState

logger = logging.getLogger(__name__)

SESSION_KEY = 'flashcards.session'
DATASETS_KEY = 'flashcards.datasets'


class BaseKeyValueStore(ABC):
    """Contract for a durable slot store holding JSON-compatible values."""

    @abstractmethod
    def get(self, key: str) -> Any:
        """Return the value stored under ``key`` or ``None``."""

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Durably overwrite ``key``."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove ``key`` if present."""


class MemoryKeyValueStore(BaseKeyValueStore):
    """Dict-backed store. Values are deep-copied so callers never share state with it."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = copy.deepcopy(initial or {})

    def get(self, key: str) -> Any:
        return copy.deepcopy(self._data.get(key))

    def set(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class DatabaseKeyValueStore(BaseKeyValueStore):
    """Store backed by the ``key_value_store`` table; each write commits."""

    def get(self, key: str) -> Any:
        return KeyValueEntry.get(key)

    def set(self, key: str, value: Any) -> None:
        KeyValueEntry.set(key, value)
        try:
            safe_commit(db.session)
        except Exception:
            db.session.rollback()
            raise

    def delete(self, key: str) -> None:
        if KeyValueEntry.remove(key):
            safe_commit(db.session)


class PersistenceGateway:
    """Serialize the session and the registry into a ``BaseKeyValueStore``."""

    def __init__(self, store: BaseKeyValueStore):
        self.store = store

    def save_session(self, state: SessionState) -> None:
        self.store.set(SESSION_KEY, state.to_dict())

    def load_session(self) -> Optional[SessionState]:
        raw = self.store.get(SESSION_KEY)
        if raw is None:
            return None
        try:
            return SessionState.from_dict(raw)
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("Stored session is unreadable, starting empty: %s", exc)
            return None

    def save_registry(self, registry: DatasetRegistry) -> None:
        self.store.set(DATASETS_KEY, registry.to_list())

    def load_registry(self) -> DatasetRegistry:
        raw = self.store.get(DATASETS_KEY)
        if raw is None:
            return DatasetRegistry()
        try:
            return DatasetRegistry.from_list(raw)
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("Stored dataset registry is unreadable, starting empty: %s", exc)
            return DatasetRegistry()

    def clear(self) -> None:
        self.store.delete(SESSION_KEY)
        self.store.delete(DATASETS_KEY)
