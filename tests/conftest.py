"""
Shared pytest fixtures for larasession tests.

This module provides:
- In-memory session store and cookie channel
- A Session facade wired to both
- Config isolation between tests
"""

import os
import sys

import pytest
import pytest_asyncio

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from larasession.session import (
    ArrayCookieChannel,
    ArraySessionStore,
    Session,
    SessionOptions,
)
from larasession.support import Config


@pytest.fixture(autouse=True)
def isolated_config():
    """Drop runtime config overrides after each test."""
    yield
    Config.clear_runtime_overrides()


@pytest.fixture
def store():
    """Create an empty in-memory session store."""
    return ArraySessionStore()


@pytest.fixture
def cookies():
    """Create an in-memory cookie channel with no incoming cookies."""
    return ArrayCookieChannel()


@pytest.fixture
def session(store, cookies):
    """Create a Session facade over the in-memory collaborators."""
    return Session(store, cookies, SessionOptions(name="app_session"))


@pytest_asyncio.fixture
async def started_session(session):
    """Create a Session facade that has already been started."""
    assert await session.start() is True
    return session
