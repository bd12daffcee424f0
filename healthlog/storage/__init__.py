"""
Record store selection and request-time accessors.
"""
import logging
from flask import current_app
from .base import RecordStore, RECORD_KINDS
from .document import DocumentStore
from .sql import SqlRecordStore

logger = logging.getLogger(__name__)


def build_store(app) -> RecordStore:
    """Create the store named by STORAGE_BACKEND for ``app``."""
    backend = app.config['STORAGE_BACKEND']
    if backend == 'document':
        path = app.config.get('DOCUMENT_STORE_PATH')
        logger.info('Using document store (%s)', path or 'in-memory')
        return DocumentStore(path, timezone=app.config['APP_TIMEZONE'])
    if backend != 'sql':
        raise RuntimeError(f'Unknown STORAGE_BACKEND: {backend!r}')

    if app.config.get('AUTO_CREATE_SCHEMA', True):
        from healthlog import db
        from healthlog import models  # noqa: F401
        with app.app_context():
            db.create_all()
    return SqlRecordStore(timezone=app.config['APP_TIMEZONE'])


def get_store() -> RecordStore:
    return current_app.extensions['record_store']


def get_clock():
    return current_app.extensions['clock']


__all__ = ['RecordStore', 'RECORD_KINDS', 'DocumentStore', 'SqlRecordStore',
           'build_store', 'get_store', 'get_clock']
