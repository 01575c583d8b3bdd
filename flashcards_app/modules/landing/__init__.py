"""Landing module: backend health banner."""

from flask import Blueprint

blueprint = Blueprint('landing', __name__)


@blueprint.route('/')
def health():
    return "<h1>Backend is running 🚀</h1>"
