"""Pure study logic: no Flask request context, no database access."""

from . import csv_codec
from .card_store import CardStore
from .dataset_registry import DatasetRegistry
from .session_cursor import SessionCursor, reveal_text
from .view_model import build_view_model

__all__ = [
    'csv_codec',
    'CardStore',
    'DatasetRegistry',
    'SessionCursor',
    'reveal_text',
    'build_view_model',
]
