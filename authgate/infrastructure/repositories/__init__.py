"""Repository implementations using SQLAlchemy."""

from authgate.infrastructure.repositories.unit_of_work_impl import UnitOfWork
from authgate.infrastructure.repositories.user_repository_impl import UserRepository

__all__ = ["UserRepository", "UnitOfWork"]
