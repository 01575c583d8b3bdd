import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from flashcards_app import create_app, db
from flashcards_app.core.config import Config
from flashcards_app.modules.study.services import MemoryKeyValueStore, PersistenceGateway


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'connect_args': {'check_same_thread': False}
    }
    LOG_TO_FILE = False
    FLASHCARDS_CSV_PATH = os.path.join(os.path.dirname(__file__), 'does_not_exist.csv')
    FLASHCARDS_IMPORT_URL = 'http://flashcards.test/api/import'


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def memory_gateway():
    return PersistenceGateway(MemoryKeyValueStore())
