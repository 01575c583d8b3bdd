"""Server-side import: serves the fixed CSV file as a JSON card list."""

from flask import Blueprint

blueprint = Blueprint('importer', __name__)

module_metadata = {
    'name': 'CSV Import',
    'icon': 'file-import',
    'category': 'Core',
    'url_prefix': '/api',
    'enabled': True
}


def setup_module(app=None):
    from . import routes  # noqa: F401
