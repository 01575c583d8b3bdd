"""Study module: card session, datasets, import/export."""

from flask import Blueprint

blueprint = Blueprint('study', __name__)

# Module Metadata
module_metadata = {
    'name': 'Study',
    'icon': 'clone',
    'category': 'Learning',
    'url_prefix': '/study',
    'enabled': True
}


def setup_module(app=None):
    """Attach routes and signal subscribers (imports are cached, so repeat calls are no-ops)."""
    from .routes import api  # noqa: F401  (registers routes on the blueprint)
    from . import events  # noqa: F401
