"""Domain layer exceptions for business rule violations and store failures."""


class DomainException(Exception):
    """
    Base exception for domain layer.

    Domain exceptions represent business rule violations and should be
    raised when domain invariants are broken.

    Examples:
        - Invalid entity state
        - User store failures reported through repository contracts
    """

    def __init__(self, message: str, error_code: str = "DOMAIN_ERROR"):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class InvalidEntityStateException(DomainException):
    """Raised when an entity is in an invalid state."""

    def __init__(self, message: str):
        super().__init__(message, error_code="INVALID_ENTITY_STATE")


class UserStoreError(DomainException):
    """
    Raised by repositories when the user store reports a failure.

    This is the domain-side shape of the store's error result: callers see
    a single exception family regardless of which backend produced it.
    """

    def __init__(self, message: str = "User store operation failed", error_code: str = "USER_STORE_ERROR"):
        super().__init__(message, error_code=error_code)


class DuplicateLoginError(UserStoreError):
    """Raised when the store rejects a user because the login is taken."""

    def __init__(self, login: str):
        self.login = login
        super().__init__(f"Login '{login}' is already registered", error_code="DUPLICATE_LOGIN")


class PasswordHashingException(DomainException):
    """Raised when a password cannot be hashed (bad parameters, out of memory)."""

    def __init__(self, message: str = "Password hashing failed"):
        super().__init__(message, error_code="PASSWORD_HASHING_ERROR")


class TokenVerificationException(DomainException):
    """Base for token verification failures reported by a token service."""

    def __init__(self, message: str, error_code: str = "TOKEN_VERIFICATION_FAILED"):
        super().__init__(message, error_code=error_code)


class TokenExpiredException(TokenVerificationException):
    """The token is authentic and well formed but its lifetime has elapsed."""

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message, error_code="TOKEN_EXPIRED")


class TokenInvalidException(TokenVerificationException):
    """The token is malformed, tampered with, or of the wrong type."""

    def __init__(self, message: str = "Token is invalid"):
        super().__init__(message, error_code="INVALID_TOKEN")
