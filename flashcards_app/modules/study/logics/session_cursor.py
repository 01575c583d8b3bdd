"""
Session Cursor - navigation, reveal stage and study direction.

Pure logic over a ``SessionState``; the cursor only ever indexes the
unknown list.
"""

from __future__ import annotations

from ..schemas import Card, RevealStage, SessionState, StudyDirection

# (direction, stage) -> Card attribute shown
REVEAL_FIELDS = {
    (StudyDirection.NORMAL, RevealStage.FIRST): 'word',
    (StudyDirection.NORMAL, RevealStage.SECOND): 'pinyin',
    (StudyDirection.NORMAL, RevealStage.THIRD): 'translation',
    (StudyDirection.REVERSE, RevealStage.FIRST): 'translation',
    (StudyDirection.REVERSE, RevealStage.SECOND): 'pinyin',
    (StudyDirection.REVERSE, RevealStage.THIRD): 'word',
}


def reveal_text(card: Card, direction: StudyDirection, stage: RevealStage) -> str:
    """Text of ``card`` shown at ``stage``; a missing pinyin shows as ''."""
    return getattr(card, REVEAL_FIELDS[(direction, stage)]) or ''


class SessionCursor:
    """Navigation over the unknown list of one session."""

    def __init__(self, state: SessionState):
        self.state = state

    def advance(self) -> bool:
        count = len(self.state.unknown_cards)
        if not count:
            return False
        self.state.cursor_index = (self.state.cursor_index + 1) % count
        self.state.stage = RevealStage.FIRST
        return True

    def retreat(self) -> bool:
        count = len(self.state.unknown_cards)
        if not count:
            return False
        self.state.cursor_index = (self.state.cursor_index - 1 + count) % count
        self.state.stage = RevealStage.FIRST
        return True

    def cycle_stage(self) -> RevealStage:
        self.state.stage = self.state.stage.next()
        return self.state.stage

    def toggle_direction(self) -> StudyDirection:
        """Flip the direction; the reveal sequence always starts over."""
        self.state.direction = self.state.direction.flipped()
        self.state.stage = RevealStage.FIRST
        return self.state.direction

    def displayed_text(self) -> str:
        card = self.state.current_card
        if card is None:
            return ''
        return reveal_text(card, self.state.direction, self.state.stage)

    def position_label(self) -> str:
        count = len(self.state.unknown_cards)
        if not count:
            return '0/0'
        return f"{self.state.cursor_index + 1}/{count}"
