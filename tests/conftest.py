"""Root conftest — shared test configuration and fixtures.

Invariants:
    - Every DB-backed test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test session factory
    - fake_client swaps the SQL repository for an in-memory FakeProjectRepository

Design Decisions:
    - SQLite in-memory with StaticPool: one shared connection, so every session sees the
      same database; PostgreSQL-specific features are not used by the repository
    - App built per test via create_app: no global app state leaks between tests
"""

import os

# Never reach a real database from tests
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from changelogger.api.dependencies import get_project_repository
from changelogger.config import Settings
from changelogger.db.session import create_schema
from changelogger.infrastructure.database import get_db
from changelogger.main import create_app
from tests.fakes import FakeProjectRepository

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
def settings():
    return Settings(
        database_url=TEST_DATABASE_URL,
        operation_timeout_seconds=5.0,
        log_format="text",
    )


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        TEST_DATABASE_URL, echo=False, poolclass=StaticPool,
    )
    await create_schema(engine)
    yield engine
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
def app(settings):
    application = create_app(settings)
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(app, test_session_factory):
    """Test client backed by the in-memory SQLite database."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def fake_repo():
    return FakeProjectRepository()


@pytest.fixture
async def fake_client(app, fake_repo):
    """Test client whose service talks to fake_repo instead of SQL."""
    async def override_repository():
        return fake_repo

    app.dependency_overrides[get_project_repository] = override_repository

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
