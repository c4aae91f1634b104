"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test that asks for test_engine gets a fresh in-memory SQLite database
    - Environment points at SQLite so no test can reach a real PostgreSQL

Design Decisions:
    - StaticPool: every session shares the one in-memory connection, so rows
      seeded by test_db are visible to the services and the HTTP client
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.db.base import Base  # noqa: E402
from app.models.walk import Walk  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def add_walk(test_db):
    """Insert a walk directly and return it. Defaults fill the required fields."""

    async def _add(**fields) -> Walk:
        values = {
            "name": "Promenade",
            "address": "1 rue de Rivoli, 75001 Paris",
            "category": "parc",
        }
        values.update(fields)
        walk = Walk(**values)
        test_db.add(walk)
        await test_db.commit()
        await test_db.refresh(walk)
        return walk

    return _add
