"""Repository interfaces - define contracts for data access."""

from authgate.domain.repositories.base import IRepository
from authgate.domain.repositories.unit_of_work import IUnitOfWork
from authgate.domain.repositories.user_repository import IUserRepository

__all__ = ["IRepository", "IUserRepository", "IUnitOfWork"]
