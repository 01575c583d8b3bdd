# File: flashcards_app/modules/study/schemas.py
"""
Study data types.

Plain dataclasses for cards, the live session and saved datasets, plus the
marshmallow schemas validating API request bodies. Nothing here touches Flask
or the database; the ``to_dict``/``from_dict`` pairs define the JSON layout
written to the key-value store.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from marshmallow import EXCLUDE, Schema, fields, validate


class RevealStage(Enum):
    """Which field of the current card is showing. Cyclic, no terminal state."""
    FIRST = "first"
    SECOND = "second"
    THIRD = "third"

    def next(self) -> 'RevealStage':
        order = (RevealStage.FIRST, RevealStage.SECOND, RevealStage.THIRD)
        return order[(order.index(self) + 1) % len(order)]


class StudyDirection(Enum):
    """Field order for the reveal sequence."""
    NORMAL = "normal"    # word -> pinyin -> translation
    REVERSE = "reverse"  # translation -> pinyin -> word

    def flipped(self) -> 'StudyDirection':
        return StudyDirection.REVERSE if self is StudyDirection.NORMAL else StudyDirection.NORMAL


def coerce_known(value: Any) -> bool:
    """``"true"`` in any case (or a real ``True``) means known; everything else does not."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return False


def normalize_pinyin(value: Any) -> Optional[str]:
    if value is None:
        return None
    value = str(value)
    return value or None


@dataclass
class Card:
    """One study unit. Identity is its position in the containing list."""
    word: str
    pinyin: Optional[str]
    translation: str
    known: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            'word': self.word,
            'pinyin': self.pinyin,
            'translation': self.translation,
            'known': self.known,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Card':
        """Build a card from a loosely shaped mapping.

        Missing text fields become empty strings, an empty pinyin becomes
        ``None`` and ``known`` defaults to ``False``.

        Raises:
            TypeError: if ``data`` is not a mapping.
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"card entry must be an object, got {type(data).__name__}")
        word = data.get('word')
        translation = data.get('translation')
        return cls(
            word='' if word is None else str(word),
            pinyin=normalize_pinyin(data.get('pinyin')),
            translation='' if translation is None else str(translation),
            known=coerce_known(data.get('known', False)),
        )

    def copy(self) -> 'Card':
        return Card(self.word, self.pinyin, self.translation, self.known)


def _cards_from_list(raw: Any) -> List[Card]:
    if not isinstance(raw, list):
        raise TypeError(f"card list expected, got {type(raw).__name__}")
    return [Card.from_dict(item) for item in raw]


@dataclass
class SessionState:
    """The live study session.

    ``cursor_index`` is meaningful only while ``unknown_cards`` is non-empty
    and is 0 otherwise. Cards in ``unknown_cards`` carry ``known=False`` and
    cards in ``known_cards`` carry ``known=True``.
    """
    unknown_cards: List[Card] = field(default_factory=list)
    known_cards: List[Card] = field(default_factory=list)
    cursor_index: int = 0
    stage: RevealStage = RevealStage.FIRST
    direction: StudyDirection = StudyDirection.NORMAL
    current_dataset_name: str = ""
    import_generation: int = 0

    @property
    def current_card(self) -> Optional[Card]:
        if not self.unknown_cards:
            return None
        return self.unknown_cards[self.cursor_index]

    def normalize(self) -> 'SessionState':
        """Re-establish the partition flags and the cursor bounds."""
        for card in self.unknown_cards:
            card.known = False
        for card in self.known_cards:
            card.known = True
        if not self.unknown_cards or not 0 <= self.cursor_index < len(self.unknown_cards):
            self.cursor_index = 0
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            'unknown_cards': [card.to_dict() for card in self.unknown_cards],
            'known_cards': [card.to_dict() for card in self.known_cards],
            'cursor_index': self.cursor_index,
            'stage': self.stage.value,
            'direction': self.direction.value,
            'current_dataset_name': self.current_dataset_name,
            'import_generation': self.import_generation,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'SessionState':
        """Rebuild a stored session.

        Raises:
            KeyError, TypeError, ValueError: when the stored document is not a
                session this version can read.
        """
        if not isinstance(data, Mapping):
            raise TypeError("stored session must be an object")
        state = cls(
            unknown_cards=_cards_from_list(data['unknown_cards']),
            known_cards=_cards_from_list(data['known_cards']),
            cursor_index=int(data.get('cursor_index', 0)),
            stage=RevealStage(data.get('stage', RevealStage.FIRST.value)),
            direction=StudyDirection(data.get('direction', StudyDirection.NORMAL.value)),
            current_dataset_name=str(data.get('current_dataset_name') or ''),
            import_generation=int(data.get('import_generation', 0)),
        )
        return state.normalize()


@dataclass
class Dataset:
    """A named snapshot of the two card lists. Cursor and stage are not saved."""
    name: str
    unknown_cards: List[Card] = field(default_factory=list)
    known_cards: List[Card] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'unknown_cards': [card.to_dict() for card in self.unknown_cards],
            'known_cards': [card.to_dict() for card in self.known_cards],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Dataset':
        if not isinstance(data, Mapping):
            raise TypeError("stored dataset must be an object")
        return cls(
            name=str(data['name']),
            unknown_cards=_cards_from_list(data.get('unknown_cards', [])),
            known_cards=_cards_from_list(data.get('known_cards', [])),
        )


# --- Request Schemas ---

class RequestSchema(Schema):
    class Meta:
        unknown = EXCLUDE


class AddCardSchema(RequestSchema):
    word = fields.Str(required=True)
    pinyin = fields.Str(load_default=None, allow_none=True)
    translation = fields.Str(required=True)


class DatasetNameSchema(RequestSchema):
    # Emptiness is the registry's call (DuplicateNameError), not a schema error.
    name = fields.Str(required=True)


class ImportRequestSchema(RequestSchema):
    csv = fields.Str(load_default=None, allow_none=True)
    cards = fields.List(fields.Raw(), load_default=None, allow_none=True)
    ticket = fields.Int(load_default=None, allow_none=True, validate=validate.Range(min=0))


class RemoteImportSchema(RequestSchema):
    url = fields.Url(load_default=None, allow_none=True, require_tld=False, schemes={'http', 'https'})
    ticket = fields.Int(load_default=None, allow_none=True, validate=validate.Range(min=0))
