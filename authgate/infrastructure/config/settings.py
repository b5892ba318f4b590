"""Application settings using pydantic-settings."""

import re
from datetime import timedelta
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_DURATION_PATTERN = re.compile(r"^\s*(\d+)\s*([smhd]?)\s*$")
_DURATION_UNITS = {
    "": "seconds",
    "s": "seconds",
    "m": "minutes",
    "h": "hours",
    "d": "days",
}


def parse_duration(value: str | int | float | timedelta) -> timedelta:
    """Parse a token lifetime such as "5m", "1h", "30s", "7d" or a number of seconds.

    Raises:
        ValueError: If the value is not a positive duration
    """
    if isinstance(value, timedelta):
        duration = value
    elif isinstance(value, (int, float)):
        duration = timedelta(seconds=value)
    else:
        match = _DURATION_PATTERN.match(value)
        if match is None:
            raise ValueError(
                f"Invalid duration '{value}'. Use <number>[s|m|h|d], e.g. '5m' or '1h'"
            )
        amount, unit = match.groups()
        duration = timedelta(**{_DURATION_UNITS[unit]: int(amount)})

    if duration <= timedelta(0):
        raise ValueError("Duration must be positive")
    return duration


class Settings(BaseSettings):
    """Application configuration - single source of truth.

    All settings loaded from environment variables or .env files.

    Usage:
        settings = get_settings()
        print(settings.database_url)
        print(settings.access_token_expires_in)
    """

    # User store (hosted PostgreSQL)
    database_url_override: str | None = Field(default=None, alias="DATABASE_URL")
    db_host: str = Field(default="localhost")
    db_port: int = Field(default=5432)
    db_user: str = Field(default="postgres")
    db_password: str = Field(default="postgres")
    db_name: str = Field(default="authgate")
    db_echo: bool = Field(default=False)
    db_pool_size: int = Field(default=5)
    db_max_overflow: int = Field(default=10)
    store_timeout_seconds: float = Field(default=5.0, gt=0)

    # Security
    secret_key: str = Field(default="", min_length=32)
    algorithm: str = Field(default="HS256")
    access_token_expires_in: timedelta = Field(default=timedelta(minutes=5))
    refresh_token_expires_in: timedelta = Field(default=timedelta(hours=1))

    # Argon2id cost parameters (memory in KiB)
    argon2_memory_cost: int = Field(default=65536, ge=8)
    argon2_time_cost: int = Field(default=3, ge=1)
    argon2_parallelism: int = Field(default=1, ge=1)

    # Application
    environment: Literal["dev", "prod", "test"] = Field(default="dev")
    debug: bool = Field(default=False)
    app_name: str = Field(default="authgate")
    app_version: str = Field(default="1.0.0")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # CORS
    cors_origins: str = Field(default="http://localhost:3000")

    # Logging
    log_level: str | None = Field(default=None)
    log_dir: str | None = Field(default=None)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("secret_key")
    @classmethod
    def validate_secret_key(cls, v: str) -> str:
        """Ensure secret_key is provided and meets requirements."""
        if not v or len(v) < 32:
            raise ValueError(
                "SECRET_KEY must be set in environment and be at least 32 characters long"
            )
        return v

    @field_validator("access_token_expires_in", "refresh_token_expires_in", mode="before")
    @classmethod
    def validate_token_lifetime(cls, v: str | int | float | timedelta) -> timedelta:
        """Accept the compact "5m"/"1h" notation used in .env files."""
        return parse_duration(v)

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",")]

    @property
    def database_url(self) -> str:
        """Async SQLAlchemy URL of the user store."""
        if self.database_url_override:
            return self.database_url_override
        return f"postgresql+asyncpg://{self.db_user}:{self.db_password}@{self.db_host}:{self.db_port}/{self.db_name}"

    @property
    def effective_log_level(self) -> str:
        """LOG_LEVEL if set, otherwise DEBUG in development and INFO elsewhere."""
        if self.log_level:
            return self.log_level.upper()
        return "DEBUG" if self.is_development else "INFO"

    @property
    def access_token_max_age(self) -> int:
        """Access cookie lifetime in whole seconds."""
        return int(self.access_token_expires_in.total_seconds())

    @property
    def refresh_token_max_age(self) -> int:
        """Refresh cookie lifetime in whole seconds."""
        return int(self.refresh_token_expires_in.total_seconds())

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "prod"

    @property
    def is_development(self) -> bool:
        """Check if running in development."""
        return self.environment == "dev"

    @property
    def is_testing(self) -> bool:
        """Check if running in test mode."""
        return self.environment == "test"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded once and cached for the application lifecycle.
    For testing, clear the cache with: get_settings.cache_clear()

    Returns:
        Settings instance loaded from environment
    """
    return Settings()
