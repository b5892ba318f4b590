"""Unit tests for request and response DTOs.

Tests validation rules for register/login bodies and the password-free
UserDTO conversion.
"""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from authgate.application.dtos.auth_dto import LoginDTO, RegisterDTO
from authgate.application.dtos.user_dto import UserDTO
from authgate.domain.entities.user import User

pytestmark = pytest.mark.unit


# === LOGIN RULES ===


@pytest.mark.parametrize("login", ["Abc123xy", "abc", "user_name-01", "A" * 16, "x1y2z3"])
def test_valid_logins(login):
    dto = RegisterDTO(login=login, password="Str0ng!Pw")

    assert dto.login == login


@pytest.mark.parametrize(
    "login",
    [
        "ab",  # too short
        "A" * 17,  # too long
        "ab12345",  # only two letters
        "user name",  # space
        "user.name",  # dot
        "üser123",  # non-ASCII letter
        "Abcd\n",  # trailing newline
        "Abc123xy\n",
        "",
    ],
)
def test_invalid_logins(login):
    with pytest.raises(ValidationError) as exc_info:
        RegisterDTO(login=login, password="Str0ng!Pw")

    assert exc_info.value.errors()[0]["loc"] == ("login",)


@pytest.mark.parametrize("dto_class", [RegisterDTO, LoginDTO])
@pytest.mark.parametrize("login", ["Abc123xy\n", "Abc123xy ", " Abc123xy", "Abc123xy\t", "Abc\n123xy"])
def test_logins_with_whitespace_are_rejected(dto_class, login):
    with pytest.raises(ValidationError) as exc_info:
        dto_class(login=login, password="Str0ng!Pw")

    assert exc_info.value.errors()[0]["loc"] == ("login",)


# === PASSWORD RULES ===


@pytest.mark.parametrize(
    ("password", "message"),
    [
        ("Sh0rt!", "at least 8 characters"),
        ("str0ng!pw", "uppercase"),
        ("STR0NG!PW", "lowercase"),
        ("Strong!Pw", "number"),
        ("Str0ngPwd", "special character"),
    ],
)
def test_invalid_passwords(password, message):
    with pytest.raises(ValidationError) as exc_info:
        RegisterDTO(login="Abc123xy", password=password)

    error = exc_info.value.errors()[0]
    assert error["loc"] == ("password",)
    assert message in error["msg"]


@pytest.mark.parametrize("password", ["Str0ng!Pw", "aB3@aaaa", "Xy9&Xy9&Xy9&"])
def test_valid_passwords(password):
    assert RegisterDTO(login="Abc123xy", password=password).password == password


def test_login_dto_applies_same_rules():
    with pytest.raises(ValidationError):
        LoginDTO(login="nouser01", password="weak")


def test_credentials_repr_hides_password():
    dto = LoginDTO(login="Abc123xy", password="Str0ng!Pw")

    assert "Str0ng!Pw" not in repr(dto)


# === USER DTO ===


def test_user_dto_from_entity_has_no_password():
    # Arrange
    user = User(
        id="u-1",
        login="Abc123xy",
        password_hash="$argon2id$v=19$m=65536,t=3,p=1$salt$hash",
        created_at=datetime.now(UTC),
    )

    # Act
    dto = UserDTO.from_entity(user)

    # Assert
    assert dto.id == "u-1"
    assert dto.login == "Abc123xy"
    dumped = dto.model_dump()
    assert "password" not in dumped
    assert "password_hash" not in dumped


def test_user_dto_from_unpersisted_entity_raises():
    user = User(login="Abc123xy", password_hash="HASHED:Str0ng!Pw")

    with pytest.raises(ValueError, match="missing id"):
        UserDTO.from_entity(user)
