"""User ORM model - infrastructure layer SQLAlchemy mapping."""

import uuid
from datetime import datetime

from sqlalchemy import String, func
from sqlalchemy.orm import Mapped, mapped_column

from authgate.domain.entities.user import User
from authgate.infrastructure.persistence.database import Base


def _new_user_id() -> str:
    return str(uuid.uuid4())


class UserModel(Base):
    """
    SQLAlchemy ORM model for the users table.

    Mirrors the hosted table layout: id, login (unique), password (the
    Argon2 hash) and created_at. The domain layer never imports this class.
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_user_id)

    login: Mapped[str] = mapped_column(
        String(16),
        unique=True,
        index=True,
        nullable=False,
    )

    # Column is named "password" in the table; it only ever holds the hash
    password_hash: Mapped[str] = mapped_column("password", String(255), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        insert_default=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        """String representation of UserModel."""
        return f"UserModel(id={self.id!r}, login={self.login!r})"

    def to_entity(self) -> User:
        """
        Convert ORM model to domain entity.

        Returns:
            User domain entity
        """
        return User(
            id=self.id,
            login=self.login,
            password_hash=self.password_hash,
            created_at=self.created_at,
        )

    @staticmethod
    def from_entity(user: User) -> "UserModel":
        """
        Create ORM model from domain entity.

        Args:
            user: Domain entity

        Returns:
            ORM model ready for persistence
        """
        model = UserModel(
            login=user.login,
            password_hash=user.password_hash,
        )

        if user.id is not None:
            model.id = user.id
        if user.created_at is not None:
            model.created_at = user.created_at

        return model
