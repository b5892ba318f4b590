"""Authentication DTOs for the application layer."""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

from authgate.application.dtos.user_dto import UserDTO

LOGIN_PATTERN = re.compile(r"(?=(?:.*[a-zA-Z]){3,})[a-zA-Z0-9_-]+")
PASSWORD_SPECIAL_CHARACTERS = "@$!%*?&"


class CredentialsDTO(BaseModel):
    """
    Login and password pair submitted by a client.

    Validation:
    - login: 3-16 characters, at least 3 ASCII letters, only letters,
      digits, underscore and hyphen
    - password: at least 8 characters with a lowercase letter, an uppercase
      letter, a digit and one of @$!%*?&
    """

    login: str = Field(..., min_length=3, max_length=16, description="User's login")
    password: str = Field(..., min_length=8, description="User's password")

    @field_validator("login")
    @classmethod
    def validate_login(cls, value: str) -> str:
        if not LOGIN_PATTERN.fullmatch(value):
            raise ValueError(
                "Login must contain at least 3 letters and only letters, "
                "numbers, underscores or hyphens"
            )
        return value

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        if not any(c.islower() and c.isascii() for c in value):
            raise ValueError("Password must contain at least one lowercase letter")
        if not any(c.isupper() and c.isascii() for c in value):
            raise ValueError("Password must contain at least one uppercase letter")
        if not any(c.isdigit() and c.isascii() for c in value):
            raise ValueError("Password must contain at least one number")
        if not any(c in PASSWORD_SPECIAL_CHARACTERS for c in value):
            raise ValueError(
                f"Password must contain at least one special character ({PASSWORD_SPECIAL_CHARACTERS})"
            )
        return value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(login={self.login!r})"


class RegisterDTO(CredentialsDTO):
    """DTO for user registration request."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [{"login": "Abc123xy", "password": "Str0ng!Pw"}]
        }
    )


class LoginDTO(CredentialsDTO):
    """DTO for user login request."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [{"login": "Abc123xy", "password": "Str0ng!Pw"}]
        }
    )


class AuthResultDTO(BaseModel):
    """
    Outcome of a successful register, login or refresh.

    The tokens never reach the response body; the router moves them into
    cookies and returns only the user.
    """

    user: UserDTO
    access_token: str
    refresh_token: str
