"""Authentication service - application layer business logic.

This service orchestrates authentication use cases:
1. User registration (hash password + persist + token generation)
2. User login (credential validation + token generation)
3. Token refresh (new token pair from a valid refresh token)
4. Get current user (extract user from access token)

DEPENDENCY INVERSION in action:
- AuthService depends on ITokenService (abstraction)
- AuthService depends on IPasswordHasher (abstraction)
- AuthService depends on IUnitOfWork (abstraction)
- No dependencies on PyJWT, Argon2, or SQLAlchemy
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterator
from contextlib import contextmanager
from typing import TypeVar

from authgate.application.dtos.auth_dto import AuthResultDTO, LoginDTO, RegisterDTO
from authgate.application.dtos.user_dto import UserDTO
from authgate.application.exceptions.exceptions import (
    AccessTokenExpiredError,
    ApplicationError,
    AuthenticationServiceError,
    InvalidAccessTokenError,
    InvalidCredentialsError,
    InvalidRefreshTokenError,
    RefreshTokenExpiredError,
    RegistrationFailedError,
    StoreTimeoutError,
    UserNotFoundError,
)
from authgate.domain.entities.user import User
from authgate.domain.exceptions import (
    DuplicateLoginError,
    TokenExpiredException,
    TokenInvalidException,
    UserStoreError,
)
from authgate.domain.repositories.unit_of_work import IUnitOfWork
from authgate.domain.services.password_hasher import IPasswordHasher
from authgate.domain.services.token_service import (
    ACCESS_TOKEN,
    REFRESH_TOKEN,
    ITokenService,
    TokenData,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AuthService:
    """
    Authentication service encapsulating auth-related use cases.

    This service:
    1. Depends on abstractions (ITokenService, IPasswordHasher, IUnitOfWork)
    2. Contains authentication business logic
    3. Returns DTOs to the presentation layer
    4. Raises application exceptions only (converted to HTTP by presentation)

    Hashing and verification are CPU bound and run in a worker thread.
    Every user store call is bounded by store_timeout_seconds.

    Testing:
    - Unit tests use FakeTokenService, FakePasswordHasher, FakeUnitOfWork
    - No PyJWT or database required in unit tests
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        token_service: ITokenService,
        password_hasher: IPasswordHasher,
        store_timeout_seconds: float = 5.0,
    ):
        """
        Initialize auth service with dependencies.

        Args:
            uow_factory: Factory function that returns IUnitOfWork instances
            token_service: Token generation/validation service (abstraction)
            password_hasher: Password hashing service (abstraction)
            store_timeout_seconds: Upper bound for each user store call
        """
        self._uow_factory = uow_factory
        self._token_service = token_service
        self._password_hasher = password_hasher
        self._store_timeout_seconds = store_timeout_seconds

    async def register(self, dto: RegisterDTO) -> AuthResultDTO:
        """
        Create a user and issue a token pair for it.

        Business logic:
        1. Reject a login that is already registered, before paying for a hash
        2. Hash the password (off the event loop)
        3. Persist the user; the store's unique constraint settles concurrent duplicates
        4. Issue access and refresh tokens for the new id

        Args:
            dto: Registration credentials (login + password)

        Returns:
            AuthResultDTO with the new user (no password) and both tokens

        Raises:
            RegistrationFailedError: If the store refuses the user
            StoreTimeoutError: If the store does not answer in time
            AuthenticationServiceError: For any unexpected failure
        """
        with self._error_boundary("register"):
            async with self._uow_factory() as uow:
                try:
                    if await self._call_store(uow.users.login_exists(dto.login)):
                        raise DuplicateLoginError(dto.login)

                    password_hash = await asyncio.to_thread(
                        self._password_hasher.hash, dto.password
                    )
                    user = await self._call_store(
                        uow.users.add(User(login=dto.login, password_hash=password_hash))
                    )
                    await self._call_store(uow.commit())
                except (DuplicateLoginError, UserStoreError) as exc:
                    logger.warning(f"Registration failed for login '{dto.login}': {exc.message}")
                    raise RegistrationFailedError(reason=exc.message) from exc

            logger.info(f"User registered: id={user.id} login={user.login}")
            return self._build_result(user)

    async def login(self, dto: LoginDTO) -> AuthResultDTO:
        """
        Authenticate user and generate tokens.

        Unknown login and wrong password raise the same error so that the
        response does not reveal which logins exist.

        Args:
            dto: Login credentials (login + password)

        Returns:
            AuthResultDTO with the user and both tokens

        Raises:
            InvalidCredentialsError: If login or password is incorrect

        Example:
            result = await auth_service.login(
                LoginDTO(login="Abc123xy", password="Str0ng!Pw")
            )
        """
        with self._error_boundary("login"):
            async with self._uow_factory() as uow:
                user = await self._call_store(uow.users.get_by_login(dto.login))

            if user is None:
                logger.warning(f"Login failed: unknown login '{dto.login}'")
                raise InvalidCredentialsError()

            password_ok = await asyncio.to_thread(
                self._password_hasher.verify, dto.password, user.password_hash
            )
            if not password_ok:
                logger.warning(f"Login failed: wrong password for login '{dto.login}'")
                raise InvalidCredentialsError()

            logger.info(f"User logged in: id={user.id} login={user.login}")
            return self._build_result(user)

    async def refresh_token(self, refresh_token: str) -> AuthResultDTO:
        """
        Issue a brand-new token pair from a valid refresh token.

        The presented refresh token is not revoked; it stays usable until
        it expires.

        Args:
            refresh_token: Encoded refresh token from the client cookie

        Returns:
            AuthResultDTO with the user and fresh tokens

        Raises:
            RefreshTokenExpiredError: If the refresh token has expired
            InvalidRefreshTokenError: If the token is tampered, malformed
                or not a refresh token
            UserNotFoundError: If the user no longer exists
        """
        with self._error_boundary("refresh_token"):
            try:
                token_data = self._token_service.verify_token(refresh_token, REFRESH_TOKEN)
            except TokenExpiredException as exc:
                logger.warning("Refresh failed: token expired")
                raise RefreshTokenExpiredError() from exc
            except TokenInvalidException as exc:
                logger.warning(f"Refresh failed: invalid token ({exc.message})")
                raise InvalidRefreshTokenError() from exc

            user = await self._load_user(token_data)
            if user is None:
                logger.warning(f"Refresh failed: user {token_data.user_id} not found")
                raise UserNotFoundError()

            logger.info(f"Tokens refreshed: id={user.id} login={user.login}")
            return self._build_result(user)

    async def get_current_user(self, access_token: str) -> UserDTO:
        """
        Get the currently authenticated user from access token.

        This is used by the FastAPI dependency to extract the current
        user from the accessToken cookie.

        Args:
            access_token: JWT access token

        Returns:
            UserDTO of authenticated user

        Raises:
            AccessTokenExpiredError: If the token has expired
            InvalidAccessTokenError: If the token is invalid
            UserNotFoundError: If user no longer exists
        """
        with self._error_boundary("get_current_user"):
            try:
                token_data = self._token_service.verify_token(access_token, ACCESS_TOKEN)
            except TokenExpiredException as exc:
                raise AccessTokenExpiredError() from exc
            except TokenInvalidException as exc:
                raise InvalidAccessTokenError() from exc

            user = await self._load_user(token_data)
            if user is None:
                raise UserNotFoundError()

            return UserDTO.from_entity(user)

    async def _load_user(self, token_data: TokenData) -> User | None:
        async with self._uow_factory() as uow:
            return await self._call_store(uow.users.get_by_id(token_data.user_id))

    def _build_result(self, user: User) -> AuthResultDTO:
        # user.id is guaranteed non-None since it came from the store
        assert user.id is not None
        tokens = self._token_service.issue_token_pair(user.id)

        return AuthResultDTO(
            user=UserDTO.from_entity(user),
            access_token=tokens.access_token,
            refresh_token=tokens.refresh_token,
        )

    async def _call_store(self, operation: Awaitable[T]) -> T:
        try:
            return await asyncio.wait_for(operation, timeout=self._store_timeout_seconds)
        except asyncio.TimeoutError as exc:
            logger.error(f"User store call timed out after {self._store_timeout_seconds}s")
            raise StoreTimeoutError() from exc

    @contextmanager
    def _error_boundary(self, operation: str) -> Iterator[None]:
        """Let application errors through and wrap everything else."""
        try:
            yield
        except ApplicationError:
            raise
        except Exception as exc:
            logger.error(f"Unexpected error during {operation}: {exc!r}", exc_info=True)
            raise AuthenticationServiceError() from exc
