"""Unit of Work implementation using SQLAlchemy."""

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from authgate.domain.exceptions import UserStoreError
from authgate.domain.repositories.unit_of_work import IUnitOfWork
from authgate.infrastructure.repositories.user_repository_impl import UserRepository

logger = logging.getLogger(__name__)


class UnitOfWork(IUnitOfWork):
    """
    SQLAlchemy implementation of Unit of Work.

    This class:
    1. Manages the SQLAlchemy async session lifecycle
    2. Provides access to the user repository bound to that session
    3. Commits or rolls back based on operation success
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        """
        Initialize UoW with a session factory.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory
        self._session: AsyncSession | None = None

    async def __aenter__(self) -> "UnitOfWork":
        """
        Start a new database session and initialize repositories.

        Returns:
            Self for context manager usage
        """
        self._session = self._session_factory()
        self.users = UserRepository(self._session)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """
        Exit context manager, rolling back on error.

        Writes that were not committed explicitly are discarded when the
        session closes. When leaving on an error, a failing rollback or
        close is logged and the original error keeps propagating.
        """
        session, self._session = self._session, None
        if session is None:
            return

        if exc_type is None:
            await session.close()
            return

        try:
            await session.rollback()
        except SQLAlchemyError as exc:
            logger.warning(f"Rollback failed after {exc_type.__name__}: {type(exc).__name__}: {exc}")

        try:
            await session.close()
        except SQLAlchemyError as exc:
            logger.warning(f"Session close failed after {exc_type.__name__}: {type(exc).__name__}: {exc}")

    async def commit(self) -> None:
        """Commit the current transaction."""
        if self._session is None:
            raise RuntimeError("Cannot commit: no active session")

        try:
            await self._session.commit()
        except SQLAlchemyError as exc:
            raise UserStoreError(f"Commit failed: {type(exc).__name__}") from exc

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        if self._session is None:
            raise RuntimeError("Cannot rollback: no active session")

        await self._session.rollback()
