"""Database models package for the Flashcards app."""

from ..core.extensions import db
from .key_value import KeyValueEntry

__all__ = ["db", "KeyValueEntry"]
