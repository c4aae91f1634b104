"""Service test fixtures — FastAPI test client wired to the test database.

Invariants:
    - app.state carries a DatabaseSessionManager over the test engine
    - Each client gets its own KeyedLock (no lock state shared between tests)
    - app.state restored after each test

Design Decisions:
    - Lifespan not run under ASGITransport: state set directly, mirroring what
      the lifespan does in production
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.keyed_lock import KeyedLock
from app.main import app


@pytest.fixture
def keyword_locks():
    return KeyedLock()


@pytest.fixture
async def client(test_engine, keyword_locks):
    """FastAPI test client backed by the in-memory database."""
    original_manager = getattr(app.state, "db_manager", None)
    original_locks = getattr(app.state, "keyword_locks", None)
    app.state.db_manager = DatabaseSessionManager.from_engine(test_engine)
    app.state.keyword_locks = keyword_locks

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.db_manager = original_manager
    app.state.keyword_locks = original_locks
