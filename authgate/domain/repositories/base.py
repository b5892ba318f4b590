"""Base repository interfaces following Clean Architecture."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Optional

# Generic type for domain entities
T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """
    Base repository interface defining the record operations every store
    adapter must provide.

    This interface belongs to the DOMAIN layer and defines the contract
    for data access without any implementation details.

    Identifiers are opaque strings: the store decides their format.

    Error contract:
        "Not found" is a normal outcome and is reported as None / False.
        Anything the store itself reports as a failure is raised as a
        UserStoreError (or a subclass), never returned.

    Type Parameters:
        T: The domain entity type this repository manages
    """

    @abstractmethod
    async def get_by_id(self, id: str) -> Optional[T]:
        """
        Retrieve an entity by its ID.

        Args:
            id: The unique identifier

        Returns:
            The entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def add(self, entity: T) -> T:
        """
        Add a new entity.

        Args:
            entity: The entity to add

        Returns:
            The added entity with generated fields (like ID)
        """
        pass

    @abstractmethod
    async def delete(self, id: str) -> bool:
        """
        Delete an entity by ID.

        Args:
            id: The unique identifier

        Returns:
            True if deleted, False if not found
        """
        pass
