"""User domain entity - pure business logic, no infrastructure."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from authgate.domain.exceptions import InvalidEntityStateException


@dataclass
class User:
    """
    User domain entity representing a registered account.

    This is a pure Python class with NO dependencies on SQLAlchemy,
    FastAPI, or any framework.

    The identifier is opaque: it is assigned by the user store on insert
    and is only ever compared or embedded in tokens, never interpreted.
    The password_hash field holds the Argon2 PHC string and must never
    leave the application layer (see UserDTO).
    """

    login: str
    password_hash: str
    id: Optional[str] = None
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """
        Validate entity invariants at construction time.

        Login format rules (length, allowed characters) are enforced at the
        request boundary; the entity only refuses states it cannot exist in.
        """
        if not self.login or len(self.login.strip()) == 0:
            raise InvalidEntityStateException(
                "Login cannot be empty. User must have a login."
            )

        if not self.password_hash:
            raise InvalidEntityStateException(
                "Password hash is required. User cannot exist without authentication credentials."
            )

    def __repr__(self) -> str:
        # password_hash must not show up in logs or tracebacks
        return f"User(id={self.id!r}, login={self.login!r})"

    @property
    def is_persisted(self) -> bool:
        """True once the store has assigned an identifier."""
        return self.id is not None
