"""User DTOs for application layer using Pydantic."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from authgate.domain.entities.user import User


class UserDTO(BaseModel):
    """DTO for returning user data to presentation layer.

    Carries no password field, so the hash cannot leave the service.
    """

    id: str
    login: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "3f1c2f9e-8a0b-4c1e-9d55-2b6f0f5a7c11",
                "login": "Abc123xy",
                "created_at": "2024-01-01T12:00:00Z",
            }
        },
    )

    @classmethod
    def from_entity(cls, user: User) -> "UserDTO":
        """
        Convert a PERSISTED domain entity to DTO.

        PRECONDITION: The user entity MUST be persisted (have an id).
        This method should only be called on entities returned from
        repositories.

        Args:
            user: User domain entity (must be persisted)

        Returns:
            UserDTO instance

        Raises:
            ValueError: If the entity is not persisted (missing id)
        """
        if user.id is None:
            raise ValueError(
                "Cannot create UserDTO from non-persisted entity: missing id. "
                "Ensure the entity has been saved via repository before converting to DTO."
            )

        return cls(id=user.id, login=user.login, created_at=user.created_at)
