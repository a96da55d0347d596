"""
Pytest configuration and shared fixtures.

This module provides:
- Environment variable setup for tests
- In-memory SQLite engine and sessions with tables created per test
- Repositories bound to the test entities
"""

import os
import sys
from pathlib import Path

import pytest


# Set test environment variables BEFORE any imports
# This must happen first to ensure settings load with test values
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ["LOG_JSON"] = "false"

# Add project root to path
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir))


@pytest.fixture
def anyio_backend():
    """
    Configure anyio backend for async tests.

    Returns:
        str: Backend name ("asyncio")
    """
    return "asyncio"


@pytest.fixture(scope="function")
async def engine():
    """
    Provide a fresh in-memory database with all test tables created.
    """
    from dolphin.core.database import get_async_engine, init_db, close_db
    from tests import objects  # noqa: F401 - Import to register models

    engine = get_async_engine("sqlite+aiosqlite:///:memory:")
    await init_db(engine)

    yield engine

    await close_db(engine)


@pytest.fixture(scope="function")
def session_maker(engine):
    """
    Provide a session factory bound to the test engine.

    Useful for reading back through a second session to confirm
    what was actually committed.
    """
    from dolphin.core.database import get_session_maker

    return get_session_maker(engine)


@pytest.fixture(scope="function")
async def async_session(session_maker):
    """
    Provide an async database session for repository tests.
    """
    async with session_maker() as session:
        yield session


@pytest.fixture
def foo_minimal_repository(async_session):
    from tests.objects import FooMinimalRepository

    return FooMinimalRepository(async_session)


@pytest.fixture
def foo_repository(async_session):
    from tests.objects import FooRepository

    return FooRepository(async_session)


@pytest.fixture
def bar_repository(async_session):
    from tests.objects import BarRepository

    return BarRepository(async_session)
