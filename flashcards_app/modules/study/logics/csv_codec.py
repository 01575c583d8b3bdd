"""
CSV Codec - card rows to Card records and back.

This module contains ONLY pure Python logic.
NO database, NO Flask dependencies allowed.

Row format (no header): ``word,pinyin,translation[,known]``

Parsing is lenient:
- short rows are padded (missing word/translation -> "", missing pinyin -> None)
- a row whose quoting cannot be parsed is dropped without surfacing an error
- ``known`` is true only for the text "true" (any case)

Serialization always writes four fields. An empty-string pinyin and a missing
pinyin both serialize to an empty field and both parse back as ``None``; that
is the one difference a parse/serialize round trip can introduce.
"""

from __future__ import annotations

import csv
import io
import logging
import sys
from typing import Any, Dict, Iterable, List

from ..schemas import Card, SessionState, coerce_known, normalize_pinyin

logger = logging.getLogger(__name__)

BOM = '\ufeff'

# RFC 4180 record separator. The writer quotes only characters found in its
# line terminator, so '\r' must be part of it.
LINE_TERMINATOR = '\r\n'


def _lift_field_size_limit() -> None:
    """Remove the csv module's 128 KiB per-field cap. Only ever raises the limit."""
    limit = sys.maxsize
    while csv.field_size_limit() < limit:
        try:
            csv.field_size_limit(limit)
        except OverflowError:
            # C long is 32 bits on some platforms.
            limit = 2 ** 31 - 1


def _row_to_card(row: List[str]) -> Card:
    def column(position: int) -> str:
        return row[position] if len(row) > position else ''

    return Card(
        word=column(0),
        pinyin=normalize_pinyin(column(1)),
        translation=column(2),
        known=coerce_known(column(3)),
    )


def parse(text: str) -> List[Card]:
    """Parse CSV text into cards, skipping blank and malformed records."""
    if not text:
        return []
    if text.startswith(BOM):
        text = text[len(BOM):]

    _lift_field_size_limit()
    reader = csv.reader(io.StringIO(text, newline=''), strict=True)
    cards: List[Card] = []
    skipped = 0
    while True:
        try:
            row = next(reader)
        except StopIteration:
            break
        except csv.Error as exc:
            skipped += 1
            logger.debug("Skipping malformed CSV record near line %s: %s", reader.line_num, exc)
            continue
        if not row:
            continue
        cards.append(_row_to_card(row))

    if skipped:
        logger.debug("Parsed %d cards, dropped %d malformed records", len(cards), skipped)
    return cards


def serialize(cards: Iterable[Card]) -> str:
    """Write one ``word,pinyin,translation,true|false`` record per card."""
    output = io.StringIO()
    writer = csv.writer(output, quoting=csv.QUOTE_MINIMAL, lineterminator=LINE_TERMINATOR)
    for card in cards:
        writer.writerow([
            card.word,
            card.pinyin or '',
            card.translation,
            'true' if card.known else 'false',
        ])
    return output.getvalue()


def export_text(state: SessionState) -> str:
    """Export content: every unknown card, then every known card."""
    return serialize(list(state.unknown_cards) + list(state.known_cards))


def cards_to_import_payload(cards: Iterable[Card]) -> List[Dict[str, Any]]:
    """JSON shape served by the server-side import endpoint."""
    return [
        {'word': card.word, 'pinyin': card.pinyin, 'translation': card.translation}
        for card in cards
    ]
