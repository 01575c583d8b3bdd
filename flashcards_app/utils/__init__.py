"""Shared utilities."""

from .db_session import safe_commit

__all__ = ["safe_commit"]
