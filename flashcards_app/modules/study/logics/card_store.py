"""
Card Store - mutations of the unknown/known partitions.

Pure logic over a uniquely owned ``SessionState``. Every index-bearing
operation treats an out-of-range index (including any index into an empty
list) as a no-op and reports it by returning ``False``; callers are expected
to carry on silently. Indices are positional: any index taken before a
remove, shuffle or load refers to whatever card sits there afterwards.
"""

from __future__ import annotations

import random
from typing import Iterable, Optional

from ..schemas import Card, RevealStage, SessionState, normalize_pinyin


class CardStore:
    """Mutation operations on the card lists of one session."""

    def __init__(self, state: SessionState):
        self.state = state

    @property
    def unknown(self):
        return self.state.unknown_cards

    @property
    def known(self):
        return self.state.known_cards

    def _reset_view(self) -> None:
        self.state.cursor_index = 0
        self.state.stage = RevealStage.FIRST

    def _clamp_after_removal(self) -> None:
        # The cursor keeps its position unless it fell off the end.
        if not self.unknown or self.state.cursor_index >= len(self.unknown):
            self.state.cursor_index = 0
        self.state.stage = RevealStage.FIRST

    def load(self, cards: Iterable[Card]) -> None:
        """Replace both lists with ``cards`` partitioned by their ``known`` flag."""
        unknown, known = [], []
        for card in cards:
            card = card.copy()
            (known if card.known else unknown).append(card)
        self.state.unknown_cards = unknown
        self.state.known_cards = known
        self._reset_view()

    def mark_known(self, index: int) -> bool:
        if not 0 <= index < len(self.unknown):
            return False
        card = self.unknown.pop(index)
        card.known = True
        self.known.append(card)
        self._clamp_after_removal()
        return True

    def restore(self, index: int) -> bool:
        """Move a known card to the end of the unknown list. The cursor stays put."""
        if not 0 <= index < len(self.known):
            return False
        card = self.known.pop(index)
        card.known = False
        self.unknown.append(card)
        return True

    def delete_unknown(self, index: int) -> bool:
        if not 0 <= index < len(self.unknown):
            return False
        del self.unknown[index]
        self._clamp_after_removal()
        return True

    def delete_known(self, index: int) -> bool:
        if not 0 <= index < len(self.known):
            return False
        del self.known[index]
        return True

    def add(self, word: str, pinyin: Optional[str], translation: str) -> Card:
        card = Card(word=word, pinyin=normalize_pinyin(pinyin), translation=translation, known=False)
        self.unknown.append(card)
        return card

    def shuffle(self, rng: Optional[random.Random] = None) -> bool:
        """Uniformly permute the unknown list; the known list keeps its order."""
        if not self.unknown:
            return False
        (rng or random).shuffle(self.unknown)
        self._reset_view()
        return True
