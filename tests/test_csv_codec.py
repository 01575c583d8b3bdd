"""
Tests for the CSV codec.

Covers lenient parsing (short rows, malformed quoting, known flag),
serialization order and the parse/serialize round trip with its one
documented exception.
"""

from flashcards_app.modules.study.logics import csv_codec
from flashcards_app.modules.study.schemas import Card, SessionState


class TestParse:

    def test_scenario_import_partitions_flags(self):
        cards = csv_codec.parse("你好,nǐ hǎo,hello\n再见,,goodbye,true")

        assert cards == [
            Card('你好', 'nǐ hǎo', 'hello', False),
            Card('再见', None, 'goodbye', True),
        ]

    def test_short_rows_are_padded(self):
        cards = csv_codec.parse("only-word\nword,pin\n")

        assert cards[0] == Card('only-word', None, '', False)
        assert cards[1] == Card('word', 'pin', '', False)

    def test_known_is_case_insensitive_and_strict(self):
        cards = csv_codec.parse("a,,x,TRUE\nb,,y,True\nc,,z,yes\nd,,w,1\ne,,v,false")

        assert [card.known for card in cards] == [True, True, False, False, False]

    def test_malformed_record_is_skipped(self):
        cards = csv_codec.parse('"bad"x,p,t\ngood,g,ok\n')

        assert cards == [Card('good', 'g', 'ok', False)]

    def test_quoted_fields_with_commas(self):
        cards = csv_codec.parse('"to be, or not",,"hello, world"\n')

        assert cards == [Card('to be, or not', None, 'hello, world', False)]

    def test_blank_lines_and_bom_ignored(self):
        cards = csv_codec.parse("\ufeff你好,nǐ hǎo,hello\n\n\n谢谢,xiè xie,thanks\n")

        assert [card.word for card in cards] == ['你好', '谢谢']

    def test_crlf_line_endings(self):
        cards = csv_codec.parse("a,b,c\r\nd,e,f\r\n")

        assert [card.translation for card in cards] == ['c', 'f']

    def test_long_field_is_kept(self):
        cards = csv_codec.parse('"' + 'w' * 150000 + '",pin,trans\n')

        assert len(cards) == 1
        assert len(cards[0].word) == 150000

    def test_empty_text(self):
        assert csv_codec.parse('') == []


class TestSerialize:

    def test_writes_four_fields(self):
        text = csv_codec.serialize([
            Card('你好', 'nǐ hǎo', 'hello', False),
            Card('再见', None, 'goodbye', True),
        ])

        assert text == "你好,nǐ hǎo,hello,false\r\n再见,,goodbye,true\r\n"

    def test_export_puts_unknown_before_known(self):
        state = SessionState(
            unknown_cards=[Card('b', None, 'B', False)],
            known_cards=[Card('a', None, 'A', True)],
        )

        assert csv_codec.export_text(state) == "b,,B,false\r\na,,A,true\r\n"

    def test_import_payload_drops_known(self):
        payload = csv_codec.cards_to_import_payload([Card('w', None, 't', True)])

        assert payload == [{'word': 'w', 'pinyin': None, 'translation': 't'}]


class TestRoundTrip:

    def test_round_trip_reproduces_cards(self):
        cards = [
            Card('你好', 'nǐ hǎo', 'hello', False),
            Card('quote "me"', 'p, q', 'line\nbreak', True),
            Card('', None, '', False),
        ]

        assert csv_codec.parse(csv_codec.serialize(cards)) == cards

    def test_carriage_returns_survive(self):
        cards = [Card('a\rb', 'p', 't', False), Card('c', 'line\r\nend', 'd\r', True)]

        assert csv_codec.parse(csv_codec.serialize(cards)) == cards

    def test_fields_beyond_default_csv_limit(self):
        cards = [Card('x' * 200000, 'p', 't', False), Card('y', None, 'z', True)]

        assert csv_codec.parse(csv_codec.serialize(cards)) == cards

    def test_empty_pinyin_collapses_to_none(self):
        cards = [Card('w', '', 't', False)]

        assert csv_codec.parse(csv_codec.serialize(cards)) == [Card('w', None, 't', False)]
