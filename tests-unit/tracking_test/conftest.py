from contextlib import contextmanager
from unittest.mock import patch

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from rfid_tracker.database.models import Base


@pytest.fixture
def db_engine():
    """In-memory SQLite engine for fast unit tests."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def session(db_engine):
    """Session fixture for tests that need direct DB access."""
    with Session(db_engine) as sess:
        yield sess


@pytest.fixture
def mock_create_session(db_engine):
    """Patch create_session to use our in-memory database."""

    @contextmanager
    def _create_session():
        with Session(db_engine) as sess:
            yield sess

    with patch("rfid_tracker.services.events.create_session", _create_session), \
         patch("rfid_tracker.services.registry.create_session", _create_session):
        yield _create_session
