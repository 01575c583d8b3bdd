"""
File logging for the Flashcards app.

Every module logs through ``logging.getLogger(__name__)``, so all records end
up in the ``flashcards_app`` package logger. ``setup_logging`` gives that
logger a console handler and a size-rotated ``flashcards.log``.
"""

import os
import logging
import logging.handlers
from typing import List, Optional

LOGGER_NAME = 'flashcards_app'
LOG_FILENAME = 'flashcards.log'
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 3


def _default_log_dir() -> str:
    project_root = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
    return os.path.join(project_root, 'logs')


def _build_handlers(log_dir: str, level: int) -> List[logging.Handler]:
    formatter = logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')
    rotating = logging.handlers.RotatingFileHandler(
        os.path.join(log_dir, LOG_FILENAME),
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUPS,
        encoding='utf-8',
    )
    handlers = [logging.StreamHandler(), rotating]
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
    return handlers


def setup_logging(app=None, log_level: str = 'INFO', log_dir: Optional[str] = None) -> logging.Logger:
    """
    Route package logs to the console and a rotating file.

    Args:
        app: Flask application; when given, werkzeug request lines are
            limited to warnings.
        log_level: Level name (DEBUG, INFO, WARNING, ERROR).
        log_dir: Directory for ``flashcards.log`` (default: ``logs/`` in the
            project root).

    Returns:
        The configured package logger.
    """
    log_dir = log_dir or _default_log_dir()
    os.makedirs(log_dir, exist_ok=True)
    level = getattr(logging, log_level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)
    for handler in _build_handlers(log_dir, level):
        logger.addHandler(handler)

    if app is not None:
        logging.getLogger('werkzeug').setLevel(logging.WARNING)

    logger.info("Logging initialized: level=%s, dir=%s", log_level, log_dir)
    return logger
