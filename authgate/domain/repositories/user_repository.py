"""User repository interface."""

from abc import abstractmethod

from authgate.domain.entities.user import User
from authgate.domain.repositories.base import IRepository


class IUserRepository(IRepository[User]):
    """
    User-specific repository interface.

    Extends base repository with login lookups. Logins are unique in the
    store; add() raises DuplicateLoginError when that constraint fires.
    """

    @abstractmethod
    async def get_by_login(self, login: str) -> User | None:
        """
        Find a user by login.

        Args:
            login: The user's login

        Returns:
            User if found, None otherwise
        """
        pass

    @abstractmethod
    async def login_exists(self, login: str) -> bool:
        """
        Check if a login is already registered.

        Args:
            login: The login to check

        Returns:
            True if login exists, False otherwise
        """
        pass
