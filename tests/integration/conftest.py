"""Integration test fixtures.

Two kinds of integration fixtures live here:
- SQLite in-memory engine and session factory for exercising the SQLAlchemy
  repository and Unit of Work
- A FastAPI TestClient over the real application, with the user store
  replaced by FakeUnitOfWork and Argon2 running with cheap parameters
"""

from collections.abc import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from authgate.infrastructure.persistence.database import Base, create_session_factory
from authgate.infrastructure.security.argon2_password_hasher import Argon2PasswordHasher
from authgate.main import app
from authgate.presentation.dependencies import get_password_hasher, get_uow_factory
from tests.fakes.unit_of_work_fake import FakeUnitOfWork

# Test database URL (SQLite in-memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine]:
    """Create a test database engine using SQLite in-memory."""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False)

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create a test session factory with the production settings."""
    return create_session_factory(test_engine)


@pytest_asyncio.fixture
async def test_session(test_session_factory) -> AsyncGenerator[AsyncSession]:
    """Create a test database session."""
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def store() -> FakeUnitOfWork:
    """The in-memory user store shared by every request of one test."""
    return FakeUnitOfWork()


@pytest.fixture
def client(store: FakeUnitOfWork) -> Generator[TestClient]:
    """
    Create a FastAPI test client for the real application.

    Requests go through routing, validation, cookies and exception
    handlers unchanged; only the user store and Argon2 cost are swapped.
    """
    app.dependency_overrides[get_uow_factory] = lambda: (lambda: store)
    app.dependency_overrides[get_password_hasher] = lambda: Argon2PasswordHasher(
        memory_cost=1024, time_cost=1, parallelism=1
    )

    with TestClient(app) as test_client:
        yield test_client

    # Clean up overrides
    app.dependency_overrides.clear()
