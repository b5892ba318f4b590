"""Fake implementations for testing."""

from tests.fakes.password_hasher_fake import FakePasswordHasher
from tests.fakes.token_service_fake import FakeTokenService
from tests.fakes.unit_of_work_fake import FakeUnitOfWork
from tests.fakes.user_repository_fake import FakeUserRepository

__all__ = ["FakePasswordHasher", "FakeTokenService", "FakeUserRepository", "FakeUnitOfWork"]
