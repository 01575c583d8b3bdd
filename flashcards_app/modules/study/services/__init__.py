# File: flashcards_app/modules/study/services/__init__.py
"""
Study Services
==============
Orchestration around the pure study logic: persistence, import sources and
the controller that ties them together.
"""

from .import_source import ImportPayload, fetch_remote_source, read_file_source, read_upload
from .persistence_gateway import (
    DATASETS_KEY,
    SESSION_KEY,
    BaseKeyValueStore,
    DatabaseKeyValueStore,
    MemoryKeyValueStore,
    PersistenceGateway,
)
from .study_controller import StudyController, run_remote_import

__all__ = [
    'ImportPayload',
    'fetch_remote_source',
    'read_file_source',
    'read_upload',
    'DATASETS_KEY',
    'SESSION_KEY',
    'BaseKeyValueStore',
    'DatabaseKeyValueStore',
    'MemoryKeyValueStore',
    'PersistenceGateway',
    'StudyController',
    'run_remote_import',
]
