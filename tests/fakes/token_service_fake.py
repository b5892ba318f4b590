"""Fake token service for testing without real JWT implementation.

This fake token service implements simple, predictable token generation
and validation for testing purposes.
"""

import uuid
from datetime import UTC, datetime, timedelta

from authgate.domain.exceptions import TokenExpiredException, TokenInvalidException
from authgate.domain.services.token_service import (
    ACCESS_TOKEN,
    REFRESH_TOKEN,
    ITokenService,
    TokenData,
    TokenType,
)


class FakeTokenService(ITokenService):
    """
    In-memory fake implementation of ITokenService.

    Tokens are simple strings with a predictable format:
    "<type>_<user_id>_<token_id>".

    Usage:
        token_service = FakeTokenService()
        access_token = token_service.generate_access_token(user_id="u-1")
        # Returns: "access_u-1_<uuid>"
    """

    def __init__(
        self,
        access_token_expires_in: timedelta = timedelta(minutes=5),
        refresh_token_expires_in: timedelta = timedelta(hours=1),
    ):
        self.access_token_expires_in = access_token_expires_in
        self.refresh_token_expires_in = refresh_token_expires_in
        # Store tokens for verification
        self._tokens: dict[str, TokenData] = {}

    def generate_access_token(self, user_id: str) -> str:
        """Generate a fake access token."""
        return self._generate(user_id, ACCESS_TOKEN, self.access_token_expires_in)

    def generate_refresh_token(self, user_id: str) -> str:
        """Generate a fake refresh token."""
        return self._generate(user_id, REFRESH_TOKEN, self.refresh_token_expires_in)

    def verify_token(self, token: str, token_type: TokenType) -> TokenData:
        """Verify a fake token of the given type."""
        token_data = self._tokens.get(token)

        if token_data is None or token_data.token_type != token_type:
            raise TokenInvalidException(f"Invalid {token_type} token")

        if token_data.is_expired:
            raise TokenExpiredException(f"{token_type.capitalize()} token has expired")

        return token_data

    def _generate(self, user_id: str, token_type: TokenType, lifetime: timedelta) -> str:
        token_id = str(uuid.uuid4())
        token = f"{token_type}_{user_id}_{token_id}"

        now = datetime.now(UTC)
        self._tokens[token] = TokenData(
            user_id=user_id,
            token_type=token_type,
            issued_at=now,
            expires_at=now + lifetime,
            token_id=token_id,
        )
        return token

    # Helper methods for testing

    def clear(self) -> None:
        """Clear all stored tokens (useful for test teardown)."""
        self._tokens.clear()

    def count(self) -> int:
        """Get total number of tokens stored (useful for assertions)."""
        return len(self._tokens)

    def expire_token(self, token: str) -> None:
        """Force a token to be expired (useful for testing expiration)."""
        token_data = self._tokens[token]
        self._tokens[token] = TokenData(
            user_id=token_data.user_id,
            token_type=token_data.token_type,
            issued_at=token_data.issued_at,
            expires_at=datetime.now(UTC) - timedelta(seconds=1),
            token_id=token_data.token_id,
        )
