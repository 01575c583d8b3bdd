# File: flashcards_app/modules/study/services/study_controller.py
"""
Study Controller
================
Single owner of one ``SessionState`` and one ``DatasetRegistry``.

Every public method applies exactly one user action and then runs the
write-through effects in a fixed order:

1. ``registry.sync_active`` when the card lists changed,
2. ``save_session`` and ``save_registry`` through the gateway,
3. the matching signal from ``flashcards_app.core.signals``.

Imports follow a last-started-wins policy: ``begin_import`` hands out a
ticket (the next ``import_generation``); a result carrying a ticket that is no
longer the latest generation is discarded. A result without a ticket is
applied at once and makes every outstanding ticket stale.
"""

from __future__ import annotations

import logging
import random
from typing import Any, Dict, Iterable, List, Optional

from flashcards_app.core.signals import (
    cards_changed,
    cards_imported,
    dataset_created,
    dataset_deleted,
    dataset_selected,
    import_discarded,
)

from ..logics import csv_codec
from ..logics.card_store import CardStore
from ..logics.dataset_registry import DatasetRegistry
from ..logics.session_cursor import SessionCursor
from ..logics.view_model import build_view_model
from ..schemas import Card, SessionState
from .import_source import ImportPayload, fetch_remote_source
from .persistence_gateway import PersistenceGateway

logger = logging.getLogger(__name__)


class StudyController:
    """Applies study actions to the live session and persists the result."""

    def __init__(
        self,
        gateway: PersistenceGateway,
        state: Optional[SessionState] = None,
        registry: Optional[DatasetRegistry] = None,
        rng: Optional[random.Random] = None,
    ):
        self.gateway = gateway
        self.state = state if state is not None else SessionState()
        self.registry = registry if registry is not None else DatasetRegistry()
        self.rng = rng
        self.cards = CardStore(self.state)
        self.cursor = SessionCursor(self.state)

    @classmethod
    def load(cls, gateway: PersistenceGateway, rng: Optional[random.Random] = None) -> 'StudyController':
        """Restore the stored session and registry, or start from empty defaults."""
        state = gateway.load_session() or SessionState()
        registry = gateway.load_registry()
        return cls(gateway, state, registry, rng=rng)

    # --- Effects ---

    def _persist(self, cards_mutated: bool = False, action: Optional[str] = None) -> None:
        if cards_mutated:
            self.registry.sync_active(self.state)
        self.gateway.save_session(self.state)
        self.gateway.save_registry(self.registry)
        if cards_mutated and action:
            cards_changed.send(
                self,
                action=action,
                unknown_count=len(self.state.unknown_cards),
                known_count=len(self.state.known_cards),
                dataset_name=self.state.current_dataset_name,
            )

    def _apply(self, changed: bool, action: str) -> bool:
        # No-ops still write the session back so the store mirrors memory.
        self._persist(cards_mutated=changed, action=action)
        return changed

    # --- Import ---

    def begin_import(self) -> int:
        """Issue a ticket for an import whose result will arrive later."""
        self.state.import_generation += 1
        self._persist()
        return self.state.import_generation

    def import_cards(self, cards: Iterable[Card], ticket: Optional[int] = None, source: str = 'cards') -> bool:
        """Replace the live lists with ``cards`` unless ``ticket`` is stale."""
        if ticket is not None and ticket != self.state.import_generation:
            logger.info(
                "Discarding %s import with ticket %s (latest is %s)",
                source, ticket, self.state.import_generation,
            )
            import_discarded.send(self, ticket=ticket, latest_ticket=self.state.import_generation)
            return False

        cards = list(cards)
        self.cards.load(cards)
        self.state.import_generation += 1
        self._persist(cards_mutated=True, action='import')
        cards_imported.send(self, source=source, card_count=len(cards), ticket=ticket)
        logger.info("Imported %d cards from %s", len(cards), source)
        return True

    def import_payload(self, payload: ImportPayload, ticket: Optional[int] = None) -> bool:
        return self.import_cards(payload.to_cards(), ticket=ticket, source=payload.source)

    def import_csv(self, text: str, ticket: Optional[int] = None, source: str = 'text') -> bool:
        return self.import_payload(ImportPayload(source=source, text=text), ticket=ticket)

    # --- Card Store ---

    def mark_known(self, index: int) -> bool:
        return self._apply(self.cards.mark_known(index), 'mark_known')

    def restore(self, index: int) -> bool:
        return self._apply(self.cards.restore(index), 'restore')

    def delete_unknown(self, index: int) -> bool:
        return self._apply(self.cards.delete_unknown(index), 'delete_unknown')

    def delete_known(self, index: int) -> bool:
        return self._apply(self.cards.delete_known(index), 'delete_known')

    def add_card(self, word: str, pinyin: Optional[str], translation: str) -> Card:
        card = self.cards.add(word, pinyin, translation)
        self._apply(True, 'add')
        return card

    def shuffle(self) -> bool:
        return self._apply(self.cards.shuffle(self.rng), 'shuffle')

    # --- Session Cursor ---

    def advance(self) -> bool:
        moved = self.cursor.advance()
        self._persist()
        return moved

    def retreat(self) -> bool:
        moved = self.cursor.retreat()
        self._persist()
        return moved

    def cycle_stage(self):
        stage = self.cursor.cycle_stage()
        self._persist()
        return stage

    def toggle_direction(self):
        direction = self.cursor.toggle_direction()
        self._persist()
        return direction

    # --- Dataset Registry ---

    def create_dataset(self, name: str):
        dataset = self.registry.create(name, self.state)
        self._persist()
        dataset_created.send(self, name=dataset.name)
        logger.info("Created dataset %s", dataset.name)
        return dataset

    def select_dataset(self, name: str):
        dataset = self.registry.select(name, self.state)
        self._persist()
        dataset_selected.send(self, name=dataset.name)
        return dataset

    def delete_dataset(self, name: str) -> bool:
        was_active = self.state.current_dataset_name == name
        removed = self.registry.delete(name, self.state)
        self._persist()
        if removed:
            dataset_deleted.send(self, name=name, was_active=was_active)
        return removed

    # --- Read side ---

    def view(self) -> Dict[str, Any]:
        return build_view_model(self.state, self.registry)

    def export_csv(self) -> str:
        return csv_codec.export_text(self.state)

    def dataset_summaries(self) -> List[Dict[str, Any]]:
        return [
            {
                'name': dataset.name,
                'unknown_count': len(dataset.unknown_cards),
                'known_count': len(dataset.known_cards),
                'active': dataset.name == self.state.current_dataset_name,
            }
            for dataset in self.registry.datasets
        ]


def run_remote_import(
    gateway: PersistenceGateway,
    url: str,
    timeout: float = 10,
    ticket: Optional[int] = None,
) -> Dict[str, Any]:
    """Fetch ``url`` and apply the result under a ticket.

    The session is reloaded after the fetch so that anything which happened
    while the request was in flight (including a newer import) is respected.
    """
    if ticket is None:
        ticket = StudyController.load(gateway).begin_import()

    payload = fetch_remote_source(url, timeout=timeout)
    controller = StudyController.load(gateway)
    if payload is None:
        return {'applied': False, 'ticket': ticket, 'card_count': 0, 'controller': controller}

    cards = payload.to_cards()
    applied = controller.import_cards(cards, ticket=ticket, source=payload.source)
    return {'applied': applied, 'ticket': ticket, 'card_count': len(cards), 'controller': controller}
