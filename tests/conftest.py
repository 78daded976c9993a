"""
conftest.py
-----------
Shared pytest fixtures for Timelog tests.

Provides fixtures for:
- Temporary directories
- In-memory store setup and teardown
- Session-bound managers
- Direct writes to the activity_labels association table
"""
import pytest
from datetime import datetime
from pathlib import Path
from tempfile import TemporaryDirectory


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ----- Sample Data -----

@pytest.fixture
def morning():
    """Fixed, second-precision start timestamp."""
    return datetime(2024, 1, 15, 7, 30, 0)


# ----- Test Database Fixtures -----

@pytest.fixture
async def test_db():
    """
    Create an in-memory store with an initialized schema.

    The engine is disposed after the test.
    """
    from timelog.database.manager import TimelogDB

    db = await TimelogDB.connect()
    yield db
    await db.dispose()


@pytest.fixture
async def db_session(test_db):
    """
    Create a database session for manager tests.

    Changes are rolled back after the test.
    """
    async with test_db.session_scope() as session:
        yield session
        await session.rollback()


@pytest.fixture
def label_manager(db_session):
    """Create LabelManager instance for testing."""
    from timelog.database.managers.label_manager import LabelManager
    return LabelManager(db_session)


@pytest.fixture
def activity_manager(db_session):
    """Create ActivityManager instance for testing."""
    from timelog.database.managers.activity_manager import ActivityManager
    return ActivityManager(db_session)


@pytest.fixture
def link_labels():
    """
    Return a coroutine that attaches labels to an activity.

    No store operation writes associations, so tests insert the rows
    directly, in list order.
    """
    from sqlalchemy import insert

    from timelog.core.codecs import encode_id
    from timelog.database.models import activity_labels

    async def _link(session, activity_id, labels):
        await session.execute(
            insert(activity_labels),
            [
                {"activity_id": encode_id(activity_id), "label_id": encode_id(label.id)}
                for label in labels
            ],
        )

    return _link
