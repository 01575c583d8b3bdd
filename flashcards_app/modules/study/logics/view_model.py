"""Pure projection of the study state into what the study screen renders."""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..schemas import SessionState, StudyDirection
from .dataset_registry import DatasetRegistry
from .session_cursor import SessionCursor

EMPTY_MESSAGE = "Select a CSV file to start learning."

DIRECTION_TOGGLE_LABELS = {
    StudyDirection.NORMAL: "Switch to Translation → Pinyin → Character",
    StudyDirection.REVERSE: "Switch to Character → Pinyin → Translation",
}


def _card_rows(cards):
    return [dict(card.to_dict(), index=index) for index, card in enumerate(cards)]


def build_view_model(state: SessionState, registry: Optional[DatasetRegistry] = None) -> Dict[str, Any]:
    """Describe the screen for ``state``. Reads only; never mutates."""
    cursor = SessionCursor(state)
    has_cards = bool(state.unknown_cards)
    return {
        'has_cards': has_cards,
        'display_text': cursor.displayed_text() if has_cards else None,
        'empty_message': None if has_cards else EMPTY_MESSAGE,
        'position': cursor.position_label(),
        'cursor_index': state.cursor_index,
        'stage': state.stage.value,
        'direction': state.direction.value,
        'direction_toggle_label': DIRECTION_TOGGLE_LABELS[state.direction],
        'unknown_cards': _card_rows(state.unknown_cards),
        'known_cards': _card_rows(state.known_cards),
        'datasets': registry.names() if registry is not None else [],
        'current_dataset_name': state.current_dataset_name,
        'import_generation': state.import_generation,
    }
