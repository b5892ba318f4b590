"""Fake user repository for testing without a database.

This fake repository stores data in memory and implements the same interface
as the real repository, allowing you to test services in isolation.
"""

import asyncio
import uuid
from datetime import UTC, datetime

from authgate.domain.entities.user import User
from authgate.domain.exceptions import DuplicateLoginError
from authgate.domain.repositories.user_repository import IUserRepository


class FakeUserRepository(IUserRepository):
    """
    In-memory fake implementation of IUserRepository.

    Logins are unique, as in the real store: adding a taken login raises
    DuplicateLoginError.

    Failure injection:
        repo.fail_with = UserStoreError("connection reset")  # every call raises
        repo.delay_seconds = 10  # every call sleeps first

    Usage:
        repo = FakeUserRepository()
        user = User(login="Abc123xy", password_hash="HASHED:Str0ng!Pw")
        created_user = await repo.add(user)
    """

    def __init__(self, initial_data: list[User] | None = None):
        """
        Initialize with empty in-memory storage.

        Args:
            initial_data: Optional list of users to pre-populate the repository
        """
        self._users: dict[str, User] = {}
        self.fail_with: Exception | None = None
        self.delay_seconds: float = 0.0

        for user in initial_data or []:
            stored = self._with_identity(user)
            self._users[stored.id] = stored

    async def get_by_id(self, id: str) -> User | None:
        """Get user by ID from memory."""
        await self._before_call()
        return self._users.get(id)

    async def add(self, entity: User) -> User:
        """
        Add user to memory.

        Automatically generates ID and created_at if not set.
        """
        await self._before_call()

        if any(user.login == entity.login for user in self._users.values()):
            raise DuplicateLoginError(entity.login)

        new_user = self._with_identity(entity)
        self._users[new_user.id] = new_user
        return new_user

    async def delete(self, id: str) -> bool:
        """Delete user from memory."""
        await self._before_call()
        return self._users.pop(id, None) is not None

    async def get_by_login(self, login: str) -> User | None:
        """Find user by login in memory."""
        await self._before_call()
        for user in self._users.values():
            if user.login == login:
                return user
        return None

    async def login_exists(self, login: str) -> bool:
        """Check if login exists in memory."""
        await self._before_call()
        return any(user.login == login for user in self._users.values())

    async def _before_call(self) -> None:
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        if self.fail_with is not None:
            raise self.fail_with

    @staticmethod
    def _with_identity(user: User) -> User:
        return User(
            id=user.id or str(uuid.uuid4()),
            login=user.login,
            password_hash=user.password_hash,
            created_at=user.created_at or datetime.now(UTC),
        )

    # Helper methods for testing

    def clear(self) -> None:
        """Clear all data (useful for test teardown)."""
        self._users.clear()

    def count(self) -> int:
        """Get total number of users (useful for assertions)."""
        return len(self._users)

    def get_all_sync(self) -> list[User]:
        """Get all users synchronously (useful for quick checks in tests)."""
        return list(self._users.values())
