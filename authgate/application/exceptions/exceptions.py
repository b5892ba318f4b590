"""Application layer exceptions.

These are the only exceptions AuthService lets escape. The presentation
layer maps each error_code to an HTTP status.
"""


class ApplicationError(Exception):
    """Base application layer exception."""

    def __init__(self, message: str, error_code: str = "APPLICATION_ERROR"):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class InvalidCredentialsError(ApplicationError):
    """Raised when login credentials are invalid.

    Unknown login and wrong password share this message so callers cannot
    discover which logins exist.
    """

    def __init__(self, message: str = "Invalid login or password"):
        super().__init__(message, error_code="INVALID_CREDENTIALS")


class RegistrationFailedError(ApplicationError):
    """Raised when the user store refuses a new user."""

    def __init__(self, reason: str = "", message: str = "Failed to register user"):
        self.reason = reason
        super().__init__(message, error_code="REGISTRATION_FAILED")


class InvalidRefreshTokenError(ApplicationError):
    """Raised when a refresh token is malformed, tampered or of the wrong type."""

    def __init__(self, message: str = "Invalid refresh token"):
        super().__init__(message, error_code="INVALID_TOKEN")


class RefreshTokenExpiredError(ApplicationError):
    """Raised when a refresh token is past its expiry."""

    def __init__(self, message: str = "Refresh token has expired"):
        super().__init__(message, error_code="TOKEN_EXPIRED")


class InvalidAccessTokenError(ApplicationError):
    """Raised when an access token is malformed, tampered or of the wrong type."""

    def __init__(self, message: str = "Invalid access token"):
        super().__init__(message, error_code="INVALID_TOKEN")


class AccessTokenExpiredError(ApplicationError):
    """Raised when an access token is past its expiry."""

    def __init__(self, message: str = "Access token has expired"):
        super().__init__(message, error_code="TOKEN_EXPIRED")


class MissingTokenError(ApplicationError):
    """Raised when the request carries no token cookie."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, error_code="UNAUTHORIZED")


class UserNotFoundError(ApplicationError):
    """Raised when a token refers to a user that no longer exists."""

    def __init__(self, message: str = "User not found"):
        super().__init__(message, error_code="USER_NOT_FOUND")


class StoreTimeoutError(ApplicationError):
    """Raised when the user store does not answer in time."""

    def __init__(self, message: str = "User store did not respond in time"):
        super().__init__(message, error_code="STORE_TIMEOUT")


class AuthenticationServiceError(ApplicationError):
    """Raised for any unexpected failure inside the auth service."""

    def __init__(self, message: str = "Authentication service error"):
        super().__init__(message, error_code="AUTH_SERVICE_ERROR")
