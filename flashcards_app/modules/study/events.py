# File: flashcards_app/modules/study/events.py
"""Signal subscribers for the study module."""

import logging

from flashcards_app.core.signals import (
    cards_changed,
    cards_imported,
    dataset_created,
    dataset_deleted,
    dataset_selected,
    import_discarded,
)

logger = logging.getLogger(__name__)


@cards_changed.connect
def on_cards_changed(sender, **kwargs):
    logger.debug(
        "Cards changed by %s: %s unknown / %s known (dataset=%r)",
        kwargs.get('action'),
        kwargs.get('unknown_count'),
        kwargs.get('known_count'),
        kwargs.get('dataset_name') or None,
    )


@cards_imported.connect
def on_cards_imported(sender, **kwargs):
    logger.debug("Import applied: %s cards from %s", kwargs.get('card_count'), kwargs.get('source'))


@import_discarded.connect
def on_import_discarded(sender, **kwargs):
    logger.debug("Stale import ticket %s ignored (latest %s)", kwargs.get('ticket'), kwargs.get('latest_ticket'))


@dataset_created.connect
def on_dataset_created(sender, **kwargs):
    logger.debug("Dataset created: %s", kwargs.get('name'))


@dataset_selected.connect
def on_dataset_selected(sender, **kwargs):
    logger.debug("Dataset selected: %s", kwargs.get('name'))


@dataset_deleted.connect
def on_dataset_deleted(sender, **kwargs):
    logger.debug("Dataset deleted: %s (was active: %s)", kwargs.get('name'), kwargs.get('was_active'))
