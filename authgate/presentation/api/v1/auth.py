"""Authentication API endpoints."""

from fastapi import APIRouter, Cookie, Depends, Response, status

from authgate.application.dtos.auth_dto import AuthResultDTO, LoginDTO, RegisterDTO
from authgate.application.dtos.user_dto import UserDTO
from authgate.application.exceptions import MissingTokenError
from authgate.application.services.auth_service import AuthService
from authgate.infrastructure.config.settings import Settings, get_settings
from authgate.presentation.dependencies import (
    ACCESS_TOKEN_COOKIE,
    REFRESH_TOKEN_COOKIE,
    get_auth_service,
    get_current_user,
)
from authgate.presentation.error_schemas import (
    ApiResponse,
    ErrorResponse,
    ValidationErrorResponse,
)


router = APIRouter(prefix="/auth", tags=["authentication"])


def set_auth_cookies(response: Response, result: AuthResultDTO, settings: Settings) -> None:
    """Place both tokens in httpOnly cookies; max_age is in seconds."""
    cookie_options = {
        "httponly": True,
        "secure": settings.is_production,
        "samesite": "strict",
    }
    response.set_cookie(
        ACCESS_TOKEN_COOKIE,
        result.access_token,
        max_age=settings.access_token_max_age,
        **cookie_options,
    )
    response.set_cookie(
        REFRESH_TOKEN_COOKIE,
        result.refresh_token,
        max_age=settings.refresh_token_max_age,
        **cookie_options,
    )


@router.post(
    "/register",
    response_model=ApiResponse[UserDTO],
    status_code=status.HTTP_201_CREATED,
    summary="Register a user",
    description="Create a user, set access and refresh token cookies and return the user.",
    responses={
        400: {"model": ValidationErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def register(
    dto: RegisterDTO,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
):
    """
    Register a new user.

    Raises:
        400 Bad Request: If the body is invalid or the login is taken
    """
    result = await auth_service.register(dto)
    set_auth_cookies(response, result, settings)
    return ApiResponse[UserDTO](data=result.user)


@router.post(
    "/login",
    response_model=ApiResponse[UserDTO],
    status_code=status.HTTP_200_OK,
    summary="User login",
    description="Authenticate with login and password, sets access and refresh token cookies.",
    responses={401: {"model": ErrorResponse}},
)
async def login(
    dto: LoginDTO,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
):
    """
    Authenticate user and receive JWT cookies.

    Raises:
        401 Unauthorized: If login or password is incorrect
    """
    result = await auth_service.login(dto)
    set_auth_cookies(response, result, settings)
    return ApiResponse[UserDTO](data=result.user)


@router.get(
    "/refresh-token",
    response_model=ApiResponse[UserDTO],
    status_code=status.HTTP_200_OK,
    summary="Refresh tokens",
    description="Issue a new token pair from the refreshToken cookie.",
    responses={401: {"model": ErrorResponse}},
)
async def refresh_token(
    response: Response,
    token: str | None = Cookie(default=None, alias=REFRESH_TOKEN_COOKIE),
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings),
):
    """
    Get a new token pair using the refresh token cookie.

    Raises:
        401 Unauthorized: If the cookie is missing, invalid or expired
    """
    if not token:
        raise MissingTokenError("Refresh token not provided")

    result = await auth_service.refresh_token(token)
    set_auth_cookies(response, result, settings)
    return ApiResponse[UserDTO](data=result.user)


@router.get(
    "/me",
    response_model=ApiResponse[UserDTO],
    status_code=status.HTTP_200_OK,
    summary="Get current user",
    description="Get the user identified by the accessToken cookie.",
    responses={401: {"model": ErrorResponse}},
)
async def get_me(
    current_user: UserDTO = Depends(get_current_user),
):
    """
    Get current authenticated user.

    Raises:
        401 Unauthorized: If the cookie is missing, invalid, or expired
    """
    return ApiResponse[UserDTO](data=current_user)
