"""Application layer exceptions."""

from authgate.application.exceptions.exceptions import (
    AccessTokenExpiredError,
    ApplicationError,
    AuthenticationServiceError,
    InvalidAccessTokenError,
    InvalidCredentialsError,
    InvalidRefreshTokenError,
    MissingTokenError,
    RefreshTokenExpiredError,
    RegistrationFailedError,
    StoreTimeoutError,
    UserNotFoundError,
)

__all__ = [
    "ApplicationError",
    "InvalidCredentialsError",
    "RegistrationFailedError",
    "InvalidRefreshTokenError",
    "RefreshTokenExpiredError",
    "InvalidAccessTokenError",
    "AccessTokenExpiredError",
    "MissingTokenError",
    "UserNotFoundError",
    "StoreTimeoutError",
    "AuthenticationServiceError",
]
