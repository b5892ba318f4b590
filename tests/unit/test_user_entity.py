"""Unit tests for User domain entity.

Tests the invariants the entity enforces at construction time.
"""

from datetime import datetime, timezone

import pytest

from authgate.domain.entities.user import User
from authgate.domain.exceptions import InvalidEntityStateException

pytestmark = pytest.mark.unit


def test_create_valid_user():
    """Test creating a user with valid data."""
    # Arrange & Act
    user = User(
        login="Abc123xy",
        password_hash="hashed_password",
        id="u-1",
        created_at=datetime.now(timezone.utc),
    )

    # Assert
    assert user.login == "Abc123xy"
    assert user.password_hash == "hashed_password"
    assert user.id == "u-1"
    assert user.is_persisted


def test_create_user_without_optional_fields():
    """Test a new user has no id until the store assigns one."""
    user = User(login="Abc123xy", password_hash="hashed_password")

    assert user.id is None
    assert user.created_at is None
    assert not user.is_persisted


@pytest.mark.parametrize("login", ["", "   "])
def test_empty_login_raises(login):
    with pytest.raises(InvalidEntityStateException, match="Login cannot be empty"):
        User(login=login, password_hash="hashed_password")


def test_missing_password_hash_raises():
    with pytest.raises(InvalidEntityStateException, match="Password hash is required"):
        User(login="Abc123xy", password_hash="")


def test_repr_does_not_include_password_hash():
    user = User(login="Abc123xy", password_hash="$argon2id$secret-hash", id="u-1")

    assert "secret-hash" not in repr(user)
    assert "Abc123xy" in repr(user)
