"""Tests for the Dataset Registry."""

import pytest

from flashcards_app.core.error_handlers import DuplicateNameError, NotFoundError
from flashcards_app.modules.study.logics.dataset_registry import DatasetRegistry
from flashcards_app.modules.study.schemas import Card, Dataset, RevealStage, SessionState


def live_session():
    return SessionState(
        unknown_cards=[Card('a', None, 'A', False), Card('b', 'bb', 'B', False)],
        known_cards=[Card('c', None, 'C', True)],
        cursor_index=1,
        stage=RevealStage.THIRD,
    )


class TestCreate:

    def test_create_switches_to_empty_dataset(self):
        registry = DatasetRegistry()
        session = live_session()

        registry.create('HSK1', session)

        assert registry.names() == ['HSK1']
        assert session.current_dataset_name == 'HSK1'
        assert session.unknown_cards == []
        assert session.known_cards == []
        assert session.cursor_index == 0
        assert session.stage is RevealStage.FIRST

    def test_duplicate_name_rejected(self):
        registry = DatasetRegistry()
        session = SessionState()
        registry.create('HSK1', session)

        with pytest.raises(DuplicateNameError):
            registry.create('HSK1', session)

        assert len(registry) == 1

    @pytest.mark.parametrize('name', ['', '   '])
    def test_empty_name_rejected(self, name):
        registry = DatasetRegistry()
        session = live_session()

        with pytest.raises(DuplicateNameError):
            registry.create(name, session)

        assert len(registry) == 0
        assert len(session.unknown_cards) == 2


class TestSelect:

    def test_select_loads_copies(self):
        registry = DatasetRegistry([
            Dataset('HSK2', [Card('x', None, 'X', False)], [Card('y', None, 'Y', True)]),
        ])
        session = live_session()

        registry.select('HSK2', session)

        assert session.current_dataset_name == 'HSK2'
        assert [card.word for card in session.unknown_cards] == ['x']
        assert [card.word for card in session.known_cards] == ['y']
        assert session.cursor_index == 0
        assert session.stage is RevealStage.FIRST

        session.unknown_cards[0].word = 'changed'
        assert registry.get('HSK2').unknown_cards[0].word == 'x'

    def test_select_missing_raises(self):
        with pytest.raises(NotFoundError):
            DatasetRegistry().select('nope', SessionState())


class TestDeleteAndSync:

    def test_delete_active_keeps_live_cards(self):
        registry = DatasetRegistry()
        session = SessionState()
        registry.create('HSK1', session)
        session.unknown_cards.append(Card('a', None, 'A', False))

        assert registry.delete('HSK1', session) is True

        assert session.current_dataset_name == ''
        assert [card.word for card in session.unknown_cards] == ['a']
        assert registry.names() == []

    def test_delete_inactive_leaves_selection(self):
        registry = DatasetRegistry()
        session = SessionState()
        registry.create('one', session)
        registry.create('two', session)

        registry.delete('one', session)

        assert session.current_dataset_name == 'two'

    def test_delete_unknown_name_is_noop(self):
        assert DatasetRegistry().delete('ghost', SessionState()) is False

    def test_sync_active_overwrites_stored_lists(self):
        registry = DatasetRegistry()
        session = SessionState()
        registry.create('HSK1', session)
        session.unknown_cards.append(Card('a', None, 'A', False))

        assert registry.sync_active(session) is True

        assert [card.word for card in registry.get('HSK1').unknown_cards] == ['a']

    def test_sync_without_active_dataset(self):
        registry = DatasetRegistry([Dataset('HSK1')])
        session = live_session()

        assert registry.sync_active(session) is False
        assert registry.get('HSK1').unknown_cards == []


class TestSerialization:

    def test_from_list_skips_duplicates(self):
        raw = [
            {'name': 'a', 'unknown_cards': [], 'known_cards': []},
            {'name': 'a', 'unknown_cards': [{'word': 'x', 'translation': 'X'}], 'known_cards': []},
        ]

        registry = DatasetRegistry.from_list(raw)

        assert registry.names() == ['a']
        assert registry.get('a').unknown_cards == []

    def test_from_list_rejects_non_list(self):
        with pytest.raises(TypeError):
            DatasetRegistry.from_list({'name': 'a'})
