"""JWT token service implementation using PyJWT.

This is an INFRASTRUCTURE detail. The domain layer (ITokenService interface)
defines WHAT we need (token generation/validation), while this implementation
defines HOW we do it (using JWT via PyJWT library).

Dependency flow:
    AuthService (application) → ITokenService (domain) ← JWTTokenService (infrastructure)
"""

import uuid
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError

from authgate.domain.exceptions import TokenExpiredException, TokenInvalidException
from authgate.domain.services.token_service import (
    ACCESS_TOKEN,
    REFRESH_TOKEN,
    ITokenService,
    TokenData,
    TokenType,
)

_REQUIRED_CLAIMS = ["sub", "exp", "iat", "type"]


def utc_now() -> datetime:
    """Default clock."""
    return datetime.now(timezone.utc)


class JWTTokenService(ITokenService):
    """
    Production token service using JWT (JSON Web Tokens) via PyJWT.

    JWT Structure:
    - Header: Algorithm and token type (e.g., {"alg": "HS256", "typ": "JWT"})
    - Payload: sub (user id), iat, exp, jti, type
    - Signature: HMAC signature using the process-wide secret key

    Token Types:
    - Access Token: Short-lived (default: 5 minutes), proves recent authentication
    - Refresh Token: Longer-lived (default: 1 hour), only exchanges for a new pair

    Both tokens share one secret. The "type" claim keeps an access token from
    being accepted where a refresh token is expected, and vice versa.

    Expiry is fixed at issuance time from the injected clock; verification
    checks "exp" against the wall clock.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        access_token_expires_in: timedelta = timedelta(minutes=5),
        refresh_token_expires_in: timedelta = timedelta(hours=1),
        clock: Callable[[], datetime] = utc_now,
    ):
        """
        Initialize JWT token service.

        Args:
            secret_key: Secret key for signing tokens (min 32 characters)
            algorithm: JWT signing algorithm (default: HS256)
            access_token_expires_in: Access token lifetime
            refresh_token_expires_in: Refresh token lifetime
            clock: Returns the current UTC time; used to stamp iat/exp

        Raises:
            ValueError: If secret_key is too short
        """
        if len(secret_key) < 32:
            raise ValueError("Secret key must be at least 32 characters long")

        self._secret_key = secret_key
        self._algorithm = algorithm
        self._lifetimes: dict[TokenType, timedelta] = {
            ACCESS_TOKEN: access_token_expires_in,
            REFRESH_TOKEN: refresh_token_expires_in,
        }
        self._clock = clock

    def generate_access_token(self, user_id: str) -> str:
        """
        Generate a JWT access token.

        Example:
            >>> service = JWTTokenService(secret_key="x" * 32)
            >>> token = service.generate_access_token("42")
            >>> print(token)
            "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9.eyJzdWIiOiI0MiIs..."
        """
        return self._encode(user_id, ACCESS_TOKEN)

    def generate_refresh_token(self, user_id: str) -> str:
        """Generate a JWT refresh token."""
        return self._encode(user_id, REFRESH_TOKEN)

    def verify_token(self, token: str, token_type: TokenType) -> TokenData:
        """
        Verify and decode a JWT of the expected type.

        This method:
        1. Verifies the signature using the secret key
        2. Checks that required claims are present and "exp" is in the future
        3. Validates the "type" claim
        4. Extracts the user id and timestamps

        Raises:
            TokenExpiredException: Signature is valid but the token has expired
            TokenInvalidException: Anything else (bad signature, garbage input,
                missing claims, wrong type)
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": _REQUIRED_CLAIMS},
            )
        except ExpiredSignatureError as exc:
            raise TokenExpiredException(f"{token_type.capitalize()} token has expired") from exc
        except InvalidTokenError as exc:
            raise TokenInvalidException(f"Invalid {token_type} token") from exc

        if payload.get("type") != token_type:
            raise TokenInvalidException(
                f"Expected a {token_type} token, got {payload.get('type')!r}"
            )

        user_id = payload.get("sub")
        if not isinstance(user_id, str) or not user_id:
            raise TokenInvalidException(f"Invalid {token_type} token")

        try:
            return TokenData(
                user_id=user_id,
                token_type=token_type,
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
                token_id=payload.get("jti"),
            )
        except (TypeError, ValueError, OverflowError) as exc:
            raise TokenInvalidException(f"Invalid {token_type} token") from exc

    def lifetime(self, token_type: TokenType) -> timedelta:
        """Configured lifetime of the given token type."""
        return self._lifetimes[token_type]

    def _encode(self, user_id: str, token_type: TokenType) -> str:
        now = self._clock()
        payload = {
            "sub": str(user_id),  # Subject (user ID)
            "iat": now,  # Issued at
            "exp": now + self._lifetimes[token_type],  # Expiration time
            "jti": str(uuid.uuid4()),  # JWT ID (unique identifier)
            "type": token_type,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
