"""Shared fixtures: an app per storage backend with a pinned clock."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterator
from datetime import datetime

import pytest

from healthlog import create_app, db
from healthlog.clock import FixedClock
from healthlog.storage import DocumentStore, get_store


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2026, 10, 19, 9, 30))


@pytest.fixture(params=['sql', 'document'])
def app(request: pytest.FixtureRequest, clock: FixedClock, tmp_path) -> Iterator:
    app = create_app({
        'TESTING': True,
        'SQLALCHEMY_DATABASE_URI': 'sqlite://',
        'STORAGE_BACKEND': request.param,
        'DOCUMENT_STORE_PATH': None,
        'AUDIT_LOG_FILE': str(tmp_path / 'audit.log'),
    }, clock=clock)
    app.extensions['mission_rng'] = random.Random(7)

    with app.app_context():
        yield app
        db.session.remove()
        if request.param == 'sql':
            db.drop_all()

    audit_logger = logging.getLogger('audit')
    for handler in list(audit_logger.handlers):
        audit_logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def app_store(app):
    """The record store of the parametrized backend."""
    return get_store()


@pytest.fixture
def store() -> DocumentStore:
    """An in-memory document store for service-level tests."""
    return DocumentStore()
