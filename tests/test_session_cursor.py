"""Tests for the Session Cursor: navigation, stage cycle, direction and reveal table."""

import pytest

from flashcards_app.modules.study.logics.session_cursor import SessionCursor, reveal_text
from flashcards_app.modules.study.schemas import Card, RevealStage, SessionState, StudyDirection


def make_state(count=3, **kwargs):
    cards = [Card(f'w{i}', f'p{i}', f't{i}', False) for i in range(count)]
    return SessionState(unknown_cards=cards, **kwargs)


class TestNavigation:

    def test_advance_wraps(self):
        state = make_state(3, cursor_index=2)
        SessionCursor(state).advance()

        assert state.cursor_index == 0

    def test_retreat_wraps(self):
        state = make_state(3, cursor_index=0)
        SessionCursor(state).retreat()

        assert state.cursor_index == 2

    def test_navigation_resets_stage(self):
        state = make_state(3, stage=RevealStage.THIRD)
        cursor = SessionCursor(state)

        cursor.advance()
        assert state.stage is RevealStage.FIRST

        state.stage = RevealStage.SECOND
        cursor.retreat()
        assert state.stage is RevealStage.FIRST

    def test_empty_list_is_noop(self):
        state = SessionState(stage=RevealStage.SECOND)
        cursor = SessionCursor(state)

        assert cursor.advance() is False
        assert cursor.retreat() is False
        assert state.cursor_index == 0
        assert state.stage is RevealStage.SECOND

    def test_position_label(self):
        state = make_state(5, cursor_index=1)

        assert SessionCursor(state).position_label() == '2/5'
        assert SessionCursor(SessionState()).position_label() == '0/0'


class TestStageAndDirection:

    def test_cycle_is_cyclic(self):
        state = make_state(1)
        cursor = SessionCursor(state)

        seen = [cursor.cycle_stage() for _ in range(4)]

        assert seen == [RevealStage.SECOND, RevealStage.THIRD, RevealStage.FIRST, RevealStage.SECOND]
        assert state.cursor_index == 0

    @pytest.mark.parametrize('stage', list(RevealStage))
    def test_toggle_direction_restarts_reveal(self, stage):
        state = make_state(1, stage=stage, direction=StudyDirection.NORMAL)

        SessionCursor(state).toggle_direction()

        assert state.direction is StudyDirection.REVERSE
        assert state.stage is RevealStage.FIRST

    def test_toggle_twice_returns_to_normal(self):
        state = make_state(1)
        cursor = SessionCursor(state)
        cursor.toggle_direction()
        cursor.toggle_direction()

        assert state.direction is StudyDirection.NORMAL


class TestDisplayedText:

    @pytest.mark.parametrize('direction, stage, expected', [
        (StudyDirection.NORMAL, RevealStage.FIRST, '你好'),
        (StudyDirection.NORMAL, RevealStage.SECOND, 'nǐ hǎo'),
        (StudyDirection.NORMAL, RevealStage.THIRD, 'hello'),
        (StudyDirection.REVERSE, RevealStage.FIRST, 'hello'),
        (StudyDirection.REVERSE, RevealStage.SECOND, 'nǐ hǎo'),
        (StudyDirection.REVERSE, RevealStage.THIRD, '你好'),
    ])
    def test_reveal_table(self, direction, stage, expected):
        card = Card('你好', 'nǐ hǎo', 'hello', False)

        assert reveal_text(card, direction, stage) == expected

    def test_missing_pinyin_shows_empty(self):
        state = SessionState(unknown_cards=[Card('再见', None, 'goodbye', False)], stage=RevealStage.SECOND)

        assert SessionCursor(state).displayed_text() == ''

    def test_follows_cursor(self):
        state = make_state(3, cursor_index=2)

        assert SessionCursor(state).displayed_text() == 'w2'

    def test_empty_session(self):
        assert SessionCursor(SessionState()).displayed_text() == ''
