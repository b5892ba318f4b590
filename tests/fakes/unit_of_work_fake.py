"""Fake Unit of Work for testing without a database.

This fake UoW provides the same interface as the real one but uses
a fake repository that stores data in memory.
"""

from typing import List, Optional, cast

from authgate.domain.entities.user import User
from authgate.domain.repositories.unit_of_work import IUnitOfWork
from tests.fakes.user_repository_fake import FakeUserRepository


class FakeUnitOfWork(IUnitOfWork):
    """
    In-memory fake implementation of IUnitOfWork.

    Used for testing services in isolation without a database. The same
    instance can be handed out repeatedly by a uow_factory, so data added
    in one call is visible to the next.

    Usage:
        async with FakeUnitOfWork() as uow:
            user = User(login="Abc123xy", password_hash="HASHED:Str0ng!Pw")
            await uow.users.add(user)
            await uow.commit()
    """

    def __init__(self, initial_users: Optional[List[User]] = None):
        """
        Initialize with a fake repository.

        Args:
            initial_users: Optional list of users to pre-populate the repository
        """
        self.users = FakeUserRepository(initial_data=initial_users)

        self.committed = False
        self.rolled_back = False
        self._is_active = False

    async def __aenter__(self) -> "FakeUnitOfWork":
        """Enter context."""
        self._is_active = True
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit context, rolling back on error."""
        if exc_type is not None:
            await self.rollback()

        self._is_active = False

    async def commit(self) -> None:
        """
        Mark as committed.

        In a fake implementation, data is already persisted to memory,
        so we just track that commit was called.
        """
        if not self._is_active:
            raise RuntimeError("Cannot commit: UoW is not active")

        self.committed = True
        self.rolled_back = False

    async def rollback(self) -> None:
        """
        Mark as rolled back.

        Note: The fake repository does not undo changes since it writes
        immediately. We just track that rollback was called.
        """
        if not self._is_active:
            raise RuntimeError("Cannot rollback: UoW is not active")

        self.rolled_back = True
        self.committed = False

    # Helper methods for testing

    @property
    def fake_users(self) -> FakeUserRepository:
        """The concrete fake repository, for failure injection and helpers."""
        return cast(FakeUserRepository, self.users)

    def clear_all(self) -> None:
        """Clear all repository data (useful for test teardown)."""
        self.fake_users.clear()
        self.committed = False
        self.rolled_back = False

    def was_committed(self) -> bool:
        """Check if commit was called (useful for assertions)."""
        return self.committed

    def was_rolled_back(self) -> bool:
        """Check if rollback was called (useful for assertions)."""
        return self.rolled_back
