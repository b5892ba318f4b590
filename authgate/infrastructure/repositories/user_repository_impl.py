"""User repository implementation using SQLAlchemy."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from authgate.domain.entities.user import User
from authgate.domain.exceptions import DuplicateLoginError, UserStoreError
from authgate.domain.repositories.user_repository import IUserRepository
from authgate.infrastructure.persistence.models.user_model import UserModel

logger = logging.getLogger(__name__)


class UserRepository(IUserRepository):
    """
    SQLAlchemy implementation of IUserRepository.

    This class contains all database-specific code and depends on:
    - SQLAlchemy (infrastructure)
    - UserModel (infrastructure ORM mapping)

    It implements the IUserRepository interface (domain) and returns
    domain entities, never exposing ORM models to the application layer.
    Driver and SQL errors are translated into UserStoreError so callers
    never see SQLAlchemy types.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with a database session.

        Args:
            session: SQLAlchemy async session (managed by UoW)
        """
        self._session = session

    async def get_by_id(self, id: str) -> Optional[User]:
        """Get user by ID."""
        user_model = await self._scalar(select(UserModel).where(UserModel.id == id))
        return None if user_model is None else user_model.to_entity()

    async def get_by_login(self, login: str) -> Optional[User]:
        """Get user by login."""
        user_model = await self._scalar(select(UserModel).where(UserModel.login == login))
        return None if user_model is None else user_model.to_entity()

    async def add(self, entity: User) -> User:
        """
        Add a new user.

        The insert is flushed immediately so that a unique-login violation
        surfaces here, as DuplicateLoginError, rather than at commit time.
        """
        user_model = UserModel.from_entity(entity)

        try:
            self._session.add(user_model)
            await self._session.flush()  # Get generated ID without committing
            await self._session.refresh(user_model)  # Load server-side created_at
        except IntegrityError as exc:
            logger.info(f"User store rejected insert for login '{entity.login}': {exc.orig}")
            raise DuplicateLoginError(entity.login) from exc
        except SQLAlchemyError as exc:
            raise UserStoreError(f"Failed to create user: {type(exc).__name__}") from exc

        return user_model.to_entity()

    async def delete(self, id: str) -> bool:
        """Delete user by ID."""
        user_model = await self._scalar(select(UserModel).where(UserModel.id == id))

        if user_model is None:
            return False

        try:
            await self._session.delete(user_model)
            await self._session.flush()
        except SQLAlchemyError as exc:
            raise UserStoreError(f"Failed to delete user: {type(exc).__name__}") from exc

        return True

    async def login_exists(self, login: str) -> bool:
        """Check if login is already registered."""
        return (
            await self._scalar(select(UserModel.id).where(UserModel.login == login))
            is not None
        )

    async def _scalar(self, statement):
        try:
            result = await self._session.execute(statement)
            return result.scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise UserStoreError(f"User lookup failed: {type(exc).__name__}") from exc
