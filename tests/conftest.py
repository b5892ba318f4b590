"""Pytest configuration and fixtures.

This file contains shared fixtures that can be used across all tests.

These fixtures follow the Dependency Inversion Principle:
- Use fake implementations (FakePasswordHasher, FakeTokenService, FakeUnitOfWork)
- Tests run fast (no real crypto, no database)
- Tests are isolated (each test gets fresh fakes)
"""

import os

# Settings are read when authgate.main is imported; provide the required ones
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-at-least-32-chars-long")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from datetime import UTC, datetime  # noqa: E402

import pytest  # noqa: E402

from authgate.application.services.auth_service import AuthService  # noqa: E402
from authgate.domain.entities.user import User  # noqa: E402
from tests.fakes.password_hasher_fake import FakePasswordHasher  # noqa: E402
from tests.fakes.token_service_fake import FakeTokenService  # noqa: E402
from tests.fakes.unit_of_work_fake import FakeUnitOfWork  # noqa: E402


@pytest.fixture
def fake_password_hasher() -> FakePasswordHasher:
    """Provide a FakePasswordHasher for tests."""
    return FakePasswordHasher()


@pytest.fixture
def fake_token_service() -> FakeTokenService:
    """
    Provide a FakeTokenService for tests.

    This fake token service generates predictable tokens and
    stores them in memory for fast testing.
    """
    return FakeTokenService()


@pytest.fixture
def sample_user() -> User:
    """
    Create a sample user for testing.

    The password_hash uses the FakePasswordHasher format: "HASHED:Str0ng!Pw"
    """
    return User(
        id="11111111-1111-4111-8111-111111111111",
        login="Abc123xy",
        password_hash="HASHED:Str0ng!Pw",  # FakePasswordHasher format
        created_at=datetime.now(UTC),
    )


@pytest.fixture
def fake_uow():
    """
    Provide a fresh, empty FakeUnitOfWork for each test.

    This ensures tests are isolated and don't affect each other.
    """
    return FakeUnitOfWork()


@pytest.fixture
def fake_uow_with_user(sample_user):
    """Provide a FakeUnitOfWork pre-populated with sample_user."""
    return FakeUnitOfWork(initial_users=[sample_user])


@pytest.fixture
def auth_service(fake_uow_with_user, fake_token_service, fake_password_hasher):
    """
    Provide an AuthService instance with fake dependencies.

    This allows testing the service layer in isolation:
    - No database (FakeUnitOfWork)
    - No real crypto (FakePasswordHasher, FakeTokenService)
    """

    def uow_factory():
        return fake_uow_with_user

    return AuthService(
        uow_factory=uow_factory,
        token_service=fake_token_service,
        password_hasher=fake_password_hasher,
        store_timeout_seconds=0.5,
    )
