# File: flashcards_app/modules/study/services/import_source.py
"""
Import Source
=============
Where imported cards come from: a local CSV file, an uploaded file, or a
network fetch. Each source yields an :class:`ImportPayload` holding either raw
CSV text or a pre-parsed card list. A source that fails (missing file,
network error, bad status) yields nothing and leaves the caller's state alone.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, List, Optional

import requests

from ..logics import csv_codec
from ..schemas import Card

logger = logging.getLogger(__name__)


@dataclass
class ImportPayload:
    """Raw CSV text or an already parsed list of card objects."""
    source: str
    text: Optional[str] = None
    cards: Optional[List[Any]] = field(default=None)

    def to_cards(self) -> List[Card]:
        if self.cards is not None:
            parsed = []
            for entry in self.cards:
                try:
                    parsed.append(Card.from_dict(entry))
                except TypeError:
                    logger.debug("Skipping non-object card entry from %s import", self.source)
            return parsed
        return csv_codec.parse(self.text or '')


def decode_bytes(raw: bytes) -> str:
    """UTF-8 with an optional BOM; undecodable bytes are replaced."""
    return raw.decode('utf-8-sig', errors='replace')


def read_file_source(path: str) -> str:
    """Return the file's text, or '' when it does not exist or cannot be read."""
    if not path or not os.path.isfile(path):
        logger.info("Import file %s not found, using empty card list", path)
        return ''
    try:
        with open(path, 'rb') as handle:
            return decode_bytes(handle.read())
    except OSError as exc:
        logger.warning("Could not read import file %s: %s", path, exc)
        return ''


def read_upload(file_storage) -> str:
    """Text of an uploaded ``werkzeug`` file."""
    return decode_bytes(file_storage.read())


def fetch_remote_source(url: str, timeout: float = 10) -> Optional[ImportPayload]:
    """GET ``url``. A JSON array response is a pre-parsed card list, anything else is CSV.

    Returns ``None`` when the fetch does not deliver a result.
    """
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as exc:
        logger.warning("Remote import from %s failed: %s", url, exc)
        return None

    if not response.ok:
        logger.warning("Remote import from %s returned HTTP %s", url, response.status_code)
        return None

    content_type = response.headers.get('Content-Type', '')
    if 'json' in content_type:
        try:
            body = response.json()
        except ValueError as exc:
            logger.warning("Remote import from %s sent invalid JSON: %s", url, exc)
            return None
        if isinstance(body, list):
            return ImportPayload(source='remote', cards=body)
        logger.warning("Remote import from %s sent JSON that is not a card list", url)
        return None

    return ImportPayload(source='remote', text=decode_bytes(response.content))
