import random

import pytest

from interview_coach.progress import SessionTracker
from interview_coach.storage import SqliteStore


@pytest.fixture
def tmp_db(tmp_path):
    """Provide a temporary SQLite database path for tests."""
    db_path = str(tmp_path / "test_coach.db")
    return db_path


@pytest.fixture
def store(tmp_db):
    return SqliteStore(tmp_db)


@pytest.fixture
def tracker(store):
    return SessionTracker(store, user_id="user_test", rng=random.Random(42))
