# File: flashcards_app/core/config.py
# Core Infrastructure Layer: environment-driven settings

import os
from dotenv import load_dotenv

load_dotenv()

# Project root: flashcards_app/core/ -> two levels up
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))

# SQLite file backing the key-value store
DATABASE_PATH = os.path.join(BASE_DIR, "database", "flashcards.db")


class Config:
    """Flashcards app configuration."""

    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        # Fallback for development, though env is preferred
        SECRET_KEY = 'dev-secret-key-replace-in-production'

    SQLALCHEMY_DATABASE_URI = os.environ.get('SQLALCHEMY_DATABASE_URI') or f'sqlite:///{DATABASE_PATH}'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'connect_args': {'timeout': 30},
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Server-side import: one fixed CSV file, read on every GET /api/import
    FLASHCARDS_CSV_PATH = os.environ.get('FLASHCARDS_CSV_PATH') or os.path.join(BASE_DIR, 'flashcards.csv')

    # Remote import defaults to the server-side endpoint of a running backend
    FLASHCARDS_IMPORT_URL = os.environ.get('FLASHCARDS_IMPORT_URL', 'http://127.0.0.1:8080/api/import')
    IMPORT_FETCH_TIMEOUT = float(os.environ.get('IMPORT_FETCH_TIMEOUT', '10'))

    EXPORT_FILENAME = 'updated_flashcards.csv'

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_TO_FILE = os.environ.get('LOG_TO_FILE', '').lower() in ('1', 'true', 'yes')
    LOG_DIR = os.environ.get('LOG_DIR') or os.path.join(BASE_DIR, 'logs')

    @classmethod
    def init_app(cls, app):
        """Create the directories the configured paths need."""
        uri = app.config.get('SQLALCHEMY_DATABASE_URI', '')
        if uri == f'sqlite:///{DATABASE_PATH}':
            os.makedirs(os.path.dirname(DATABASE_PATH), exist_ok=True)
        if app.config.get('LOG_TO_FILE'):
            os.makedirs(app.config['LOG_DIR'], exist_ok=True)
