"""FastAPI dependency injection setup.

This module is the COMPOSITION ROOT - where we wire up dependencies.

In Clean Architecture, the composition root:
1. Lives in the outermost layer (presentation/infrastructure)
2. Creates concrete implementations
3. Injects them into abstractions
4. Never imported by inner layers

This is where we decide:
- Use Argon2PasswordHasher with parameters from Settings
- Use JWTTokenService with the secret and lifetimes from Settings
- Use UnitOfWork with SQLAlchemy against the hosted user store

All these decisions are isolated here. The application layer doesn't know
or care about these choices - it only knows about interfaces.
"""

from collections.abc import Callable

from fastapi import Cookie, Depends
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from authgate.application.dtos.user_dto import UserDTO
from authgate.application.exceptions import MissingTokenError
from authgate.application.services.auth_service import AuthService
from authgate.domain.repositories.unit_of_work import IUnitOfWork
from authgate.domain.services.password_hasher import IPasswordHasher
from authgate.domain.services.token_service import ITokenService
from authgate.infrastructure.config.settings import Settings, get_settings
from authgate.infrastructure.persistence.database import (
    create_database_engine,
    create_session_factory,
)
from authgate.infrastructure.repositories.unit_of_work_impl import UnitOfWork
from authgate.infrastructure.security.argon2_password_hasher import Argon2PasswordHasher
from authgate.infrastructure.security.jwt_token_service import JWTTokenService

ACCESS_TOKEN_COOKIE = "accessToken"
REFRESH_TOKEN_COOKIE = "refreshToken"

# Module-level singletons (created once, reused throughout app lifecycle)
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker | None = None
_password_hasher: IPasswordHasher | None = None


def get_database_engine(settings: Settings = Depends(get_settings)) -> AsyncEngine:
    """Get or create database engine singleton.

    The engine is created once and reused for the application lifecycle.

    Args:
        settings: Application settings (injected)

    Returns:
        AsyncEngine instance
    """
    global _engine
    if _engine is None:
        _engine = create_database_engine(settings)
    return _engine


async def dispose_database_engine() -> None:
    """Dispose the engine singleton, if one was created. Called on shutdown."""
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None


def get_session_factory(
    engine: AsyncEngine = Depends(get_database_engine),
) -> async_sessionmaker:
    """Get or create session factory singleton.

    Args:
        engine: Database engine (injected)

    Returns:
        Session factory
    """
    global _session_factory
    if _session_factory is None:
        _session_factory = create_session_factory(engine)
    return _session_factory


def get_uow_factory(
    session_factory: async_sessionmaker = Depends(get_session_factory),
) -> Callable[[], IUnitOfWork]:
    """
    Dependency that provides a factory of Unit of Work instances.

    Dependency chain:
        get_settings() → get_database_engine() → get_session_factory() → get_uow_factory()

    Note:
        Tests override this dependency to run against FakeUnitOfWork:

        app.dependency_overrides[get_uow_factory] = lambda: lambda: FakeUnitOfWork()
    """

    def uow_factory() -> IUnitOfWork:
        return UnitOfWork(session_factory)

    return uow_factory


def get_password_hasher(settings: Settings = Depends(get_settings)) -> IPasswordHasher:
    """
    Dependency that provides password hasher.

    This is a SINGLETON - we create one instance and reuse it.
    Password hashers are stateless and thread-safe, so this is safe.

    Returns:
        IPasswordHasher implementation (Argon2PasswordHasher in production)
    """
    global _password_hasher
    if _password_hasher is None:
        _password_hasher = Argon2PasswordHasher(
            memory_cost=settings.argon2_memory_cost,
            time_cost=settings.argon2_time_cost,
            parallelism=settings.argon2_parallelism,
        )
    return _password_hasher


def get_token_service(settings: Settings = Depends(get_settings)) -> ITokenService:
    """
    Dependency that provides token service.

    Returns a JWTTokenService configured with settings from environment.
    """
    return JWTTokenService(
        secret_key=settings.secret_key,
        algorithm=settings.algorithm,
        access_token_expires_in=settings.access_token_expires_in,
        refresh_token_expires_in=settings.refresh_token_expires_in,
    )


def get_auth_service(
    uow_factory: Callable[[], IUnitOfWork] = Depends(get_uow_factory),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
    token_service: ITokenService = Depends(get_token_service),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    """
    Dependency that provides AuthService.

    Dependency Graph:
        FastAPI endpoint
            → get_auth_service()
                → get_uow_factory() → get_session_factory() → get_database_engine()
                → get_password_hasher() → Argon2PasswordHasher
                → get_token_service() → JWTTokenService
                → get_settings()
    """
    return AuthService(
        uow_factory=uow_factory,
        token_service=token_service,
        password_hasher=password_hasher,
        store_timeout_seconds=settings.store_timeout_seconds,
    )


async def get_current_user(
    access_token: str | None = Cookie(default=None, alias=ACCESS_TOKEN_COOKIE),
    auth_service: AuthService = Depends(get_auth_service),
) -> UserDTO:
    """
    Dependency that extracts and validates the current user from the
    accessToken cookie.

    Usage in endpoints:
        @router.get("/me")
        async def get_me(current_user: UserDTO = Depends(get_current_user)):
            return current_user

    Raises:
        MissingTokenError: If the cookie is absent
        AccessTokenExpiredError / InvalidAccessTokenError: If the token is
            rejected (caught by exception handler)
    """
    if not access_token:
        raise MissingTokenError("Access token not provided")

    return await auth_service.get_current_user(access_token)
