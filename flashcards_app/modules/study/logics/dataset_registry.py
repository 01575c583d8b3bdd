"""
Dataset Registry - named snapshots of the card lists.

The registry keeps datasets in creation order. The live session points at
the active one through ``SessionState.current_dataset_name`` ("" = none), and
``sync_active`` copies the live lists back after every card mutation; that
copy is the only way edits reach a saved dataset.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from flashcards_app.core.error_handlers import DuplicateNameError, NotFoundError

from ..schemas import Dataset, RevealStage, SessionState


def _clone(cards):
    return [card.copy() for card in cards]


class DatasetRegistry:
    """Ordered collection of datasets keyed by unique name."""

    def __init__(self, datasets: Optional[Iterable[Dataset]] = None):
        self.datasets: List[Dataset] = list(datasets or [])

    def __len__(self) -> int:
        return len(self.datasets)

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None

    def get(self, name: str) -> Optional[Dataset]:
        return next((dataset for dataset in self.datasets if dataset.name == name), None)

    def names(self) -> List[str]:
        return [dataset.name for dataset in self.datasets]

    def create(self, name: str, session: SessionState) -> Dataset:
        """Add an empty dataset and make it the active, freshly cleared session.

        Raises:
            DuplicateNameError: if ``name`` is blank or already registered.
        """
        name = (name or '').strip()
        if not name:
            raise DuplicateNameError('Dataset name must not be empty.', name=name)
        if name in self:
            raise DuplicateNameError(f"Dataset '{name}' already exists.", name=name)

        dataset = Dataset(name=name)
        self.datasets.append(dataset)

        session.unknown_cards = []
        session.known_cards = []
        session.cursor_index = 0
        session.stage = RevealStage.FIRST
        session.current_dataset_name = name
        return dataset

    def select(self, name: str, session: SessionState) -> Dataset:
        """Load a saved dataset into the live session.

        Raises:
            NotFoundError: if no dataset carries ``name``.
        """
        dataset = self.get(name)
        if dataset is None:
            raise NotFoundError(f"Dataset '{name}' does not exist.", resource=name)

        session.unknown_cards = _clone(dataset.unknown_cards)
        session.known_cards = _clone(dataset.known_cards)
        session.cursor_index = 0
        session.stage = RevealStage.FIRST
        session.current_dataset_name = dataset.name
        session.normalize()
        return dataset

    def delete(self, name: str, session: SessionState) -> bool:
        """Drop a dataset. Deleting the active one detaches the session but keeps its cards."""
        dataset = self.get(name)
        if dataset is None:
            return False
        self.datasets.remove(dataset)
        if session.current_dataset_name == name:
            session.current_dataset_name = ''
        return True

    def sync_active(self, session: SessionState) -> bool:
        """Overwrite the active dataset's stored lists with the live ones."""
        if not session.current_dataset_name:
            return False
        dataset = self.get(session.current_dataset_name)
        if dataset is None:
            return False
        dataset.unknown_cards = _clone(session.unknown_cards)
        dataset.known_cards = _clone(session.known_cards)
        return True

    def to_list(self) -> List[dict]:
        return [dataset.to_dict() for dataset in self.datasets]

    @classmethod
    def from_list(cls, raw: Any) -> 'DatasetRegistry':
        """Rebuild from stored JSON.

        Raises:
            KeyError, TypeError, ValueError: on a document this version cannot read.
        """
        if not isinstance(raw, list):
            raise TypeError("stored dataset registry must be a list")
        registry = cls()
        for item in raw:
            dataset = Dataset.from_dict(item)
            if dataset.name and dataset.name not in registry:
                registry.datasets.append(dataset)
        return registry
