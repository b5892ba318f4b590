"""Token service interface - domain layer abstraction.

This interface belongs in the domain layer because token generation
and validation are BUSINESS REQUIREMENTS for authentication, not
implementation details.

The domain cares that:
1. A successful register/login/refresh yields a fresh access + refresh pair
2. Tokens identify a user and carry their own validity window
3. Verification tells "expired" apart from "invalid", because the refresh
   flow reports the two differently

The domain does NOT care:
- What token format is used (JWT, opaque tokens, etc.)
- Which library implements it
- How tokens are encoded/signed (HS256, RS256, etc.)

Tokens are stateless: there is no server-side session table and no
revocation list, so a token stays valid until its own expiry.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Literal

TokenType = Literal["access", "refresh"]

ACCESS_TOKEN: TokenType = "access"
REFRESH_TOKEN: TokenType = "refresh"


@dataclass(frozen=True)
class TokenData:
    """
    Domain representation of a verified token payload.

    This is a pure domain object with no framework dependencies.
    """

    user_id: str
    token_type: TokenType
    issued_at: datetime
    expires_at: datetime
    token_id: str | None = None  # JWT ID (jti), keeps same-second tokens distinct

    @property
    def is_expired(self) -> bool:
        """Check if token is expired."""
        return datetime.now(UTC) >= self.expires_at


@dataclass(frozen=True)
class TokenPair:
    """An access token and a refresh token issued together for one user."""

    access_token: str
    refresh_token: str


class ITokenService(ABC):
    """
    Interface for token generation and validation.

    This abstraction allows the application layer to work with
    authentication tokens without depending on a specific token
    format or library.
    """

    @abstractmethod
    def generate_access_token(self, user_id: str) -> str:
        """
        Generate a short-lived access token for a user.

        Args:
            user_id: User's opaque identifier

        Returns:
            Encoded token string
        """
        pass

    @abstractmethod
    def generate_refresh_token(self, user_id: str) -> str:
        """
        Generate a refresh token for obtaining a new token pair.

        Refresh tokens have a longer lifetime than access tokens.

        Args:
            user_id: User's opaque identifier

        Returns:
            Encoded refresh token string
        """
        pass

    @abstractmethod
    def verify_token(self, token: str, token_type: TokenType) -> TokenData:
        """
        Verify and decode a token of the expected type.

        Args:
            token: Encoded token string to verify
            token_type: "access" or "refresh"

        Returns:
            TokenData for a valid token

        Raises:
            TokenExpiredException: Authentic token whose lifetime has elapsed
            TokenInvalidException: Malformed, tampered, or wrong-type token
        """
        pass

    def issue_token_pair(self, user_id: str) -> TokenPair:
        """
        Issue a fresh access + refresh pair for a user.

        Both tokens are created at the same moment and carry independent
        expiry times.
        """
        return TokenPair(
            access_token=self.generate_access_token(user_id),
            refresh_token=self.generate_refresh_token(user_id),
        )
