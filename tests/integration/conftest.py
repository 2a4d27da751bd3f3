"""Pytest configuration and fixtures for integration tests."""

from typing import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from apps.api.main import app
from core.data.models import Base
from core.infrastructure.database.config import create_engine
from core.infrastructure.database.seed import seed_database
from core.settings import DatabaseSettings


# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def test_client() -> Generator[TestClient, None, None]:
    """FastAPI test client; the lifespan builds and seeds a fresh database."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def lenient_client() -> Generator[TestClient, None, None]:
    """Test client that returns 500 responses instead of re-raising errors."""
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create test database engine with the schema and seed rows."""
    engine = create_engine(DatabaseSettings(DATABASE_URL=TEST_DATABASE_URL))

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine) -> AsyncGenerator[async_sessionmaker, None]:
    """Create test session factory over a seeded database."""
    session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )
    async with session_factory() as session:
        await seed_database(session)
    yield session_factory


@pytest_asyncio.fixture
async def test_session(test_session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async with test_session_factory() as session:
        yield session
