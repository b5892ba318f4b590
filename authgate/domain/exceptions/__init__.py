"""Domain exceptions - business rule violations and store failures."""

from authgate.domain.exceptions.domain_exceptions import (
    DomainException,
    DuplicateLoginError,
    InvalidEntityStateException,
    PasswordHashingException,
    TokenExpiredException,
    TokenInvalidException,
    TokenVerificationException,
    UserStoreError,
)

__all__ = [
    "DomainException",
    "InvalidEntityStateException",
    "UserStoreError",
    "DuplicateLoginError",
    "PasswordHashingException",
    "TokenVerificationException",
    "TokenExpiredException",
    "TokenInvalidException",
]
