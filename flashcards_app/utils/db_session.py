"""Commit helper for the SQLite-backed key-value store.

Every study action writes the session slot and the registry slot back to
SQLite. Two requests landing at the same moment can hit ``database is
locked``; :func:`safe_commit` retries such commits with exponential backoff
and re-raises anything else.
"""

from __future__ import annotations

import time

from sqlalchemy.exc import OperationalError
from sqlalchemy.orm.session import Session

LOCKED_MESSAGES = ("database is locked", "database is busy")


def is_lock_error(error: OperationalError) -> bool:
    """Return ``True`` when SQLite rejected the commit because of a lock."""

    message = str(error).lower()
    return any(token in message for token in LOCKED_MESSAGES)


def safe_commit(session: Session, retries: int = 5, initial_delay: float = 0.1) -> None:
    """Commit ``session``, retrying while SQLite reports a lock.

    Raises:
        OperationalError: when the retries are exhausted or the failure is
            not lock related.
    """

    delay = initial_delay
    for attempt in range(retries):
        try:
            session.commit()
            return
        except OperationalError as exc:  # pragma: no cover - retriable path
            session.rollback()
            if attempt == retries - 1 or not is_lock_error(exc):
                raise
            time.sleep(delay)
            delay *= 2
