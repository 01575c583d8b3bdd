"""Public interface for the study module."""

from typing import List

from .logics import csv_codec
from .schemas import Card


class StudyInterface:
    @staticmethod
    def parse_csv(text: str) -> List[Card]:
        """Lenient CSV parse shared with the server-side import endpoint."""
        return csv_codec.parse(text)

    @staticmethod
    def cards_to_import_payload(cards: List[Card]) -> list:
        return csv_codec.cards_to_import_payload(cards)
