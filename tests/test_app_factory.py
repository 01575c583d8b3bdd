import logging

import pytest

from flashcards_app import create_app
from flashcards_app.core.config import Config
from flashcards_app.core.logging_config import LOGGER_NAME, setup_logging
from flashcards_app.core.module_registry import DEFAULT_MODULES, ModuleDefinition, register_modules


@pytest.fixture
def restore_loggers():
    logger = logging.getLogger(LOGGER_NAME)
    handlers, level = list(logger.handlers), logger.level
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_default_modules_are_registered(app):
    assert {'landing', 'importer', 'study'} <= set(app.blueprints)
    assert len(DEFAULT_MODULES) == 3


def test_register_rejects_non_blueprint(app):
    bogus = ModuleDefinition('flashcards_app.modules.study.schemas', 'Card')

    with pytest.raises(TypeError):
        register_modules(app, [bogus])


def test_setup_logging_writes_rotating_file(tmp_path, restore_loggers):
    logger = setup_logging(log_level='DEBUG', log_dir=str(tmp_path))
    logging.getLogger('flashcards_app.modules.study').debug('hello from study')

    for handler in logger.handlers:
        handler.flush()

    content = (tmp_path / 'flashcards.log').read_text(encoding='utf-8')
    assert 'Logging initialized' in content
    assert 'hello from study' in content
    assert 'flashcards_app.modules.study: hello from study' in content


def test_factory_enables_file_logging(tmp_path, restore_loggers):
    class FileLoggingConfig(Config):
        TESTING = True
        SQLALCHEMY_DATABASE_URI = 'sqlite://'
        LOG_TO_FILE = True
        LOG_DIR = str(tmp_path / 'logs')

    app = create_app(FileLoggingConfig)

    assert app.config['LOG_TO_FILE'] is True
    assert (tmp_path / 'logs' / 'flashcards.log').exists()


def test_setup_logging_replaces_handlers(tmp_path, restore_loggers):
    setup_logging(log_dir=str(tmp_path / 'first'))
    logger = setup_logging(log_dir=str(tmp_path / 'second'))

    assert len(logger.handlers) == 2
    assert (tmp_path / 'second' / 'flashcards.log').exists()
