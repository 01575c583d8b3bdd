"""
Central Signal Registry for study events.

Uses blinker (Flask's signal backend) so that modules can react to study
events without the controller knowing about them.

Usage:
    # Publisher (sender)
    from flashcards_app.core.signals import cards_changed
    cards_changed.send(None, action='mark_known', unknown_count=3, known_count=1)

    # Subscriber (receiver) - in a module's events.py
    @cards_changed.connect
    def on_cards_changed(sender, **kwargs):
        ...
"""
from blinker import Namespace

study_signals = Namespace()

# Fired after any Card Store mutation has been persisted
# Payload: action, unknown_count, known_count, dataset_name
cards_changed = study_signals.signal('cards_changed')

# Fired after an import replaced the live card lists
# Payload: source ('text', 'cards', 'file', 'remote'), card_count, ticket
cards_imported = study_signals.signal('cards_imported')

# Fired when an import result arrives with an outdated ticket
# Payload: ticket, latest_ticket
import_discarded = study_signals.signal('import_discarded')

# ============================================
# Dataset Registry Signals
# ============================================
dataset_signals = Namespace()

# Payload: name
dataset_created = dataset_signals.signal('dataset_created')
dataset_selected = dataset_signals.signal('dataset_selected')

# Payload: name, was_active
dataset_deleted = dataset_signals.signal('dataset_deleted')
