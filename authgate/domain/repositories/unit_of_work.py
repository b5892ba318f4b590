"""Unit of Work interface - domain layer."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from authgate.domain.repositories.user_repository import IUserRepository


class IUnitOfWork(ABC):
    """
    Unit of Work interface scoping one conversation with the user store.

    The auth flows only ever need a single-row read or a single-row insert,
    so a UoW here is a session boundary rather than a multi-statement
    transaction: enter, touch one repository, commit (for writes), exit.
    """

    users: "IUserRepository"

    @abstractmethod
    async def __aenter__(self) -> "IUnitOfWork":
        """Open a session with the store and bind repositories to it."""
        pass

    @abstractmethod
    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """
        Close the session.

        Rolls back if the block exited with an exception.
        """
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Make pending writes visible in the store."""
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """Discard pending writes."""
        pass
