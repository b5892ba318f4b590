"""Logging configuration using the standard library."""

import logging
import logging.config
from pathlib import Path
from typing import Any

from authgate.infrastructure.config.settings import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def build_logging_config(settings: Settings) -> dict[str, Any]:
    """
    Build a dictConfig mapping for the given settings.

    Always logs to the console. When LOG_DIR is set, also writes every
    record to combined.log and errors only to error.log, both rotating.

    Args:
        settings: Application settings

    Returns:
        Mapping accepted by logging.config.dictConfig
    """
    level = settings.effective_log_level
    handlers: dict[str, dict[str, Any]] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
            "level": level,
        },
    }

    if settings.log_dir:
        log_dir = Path(settings.log_dir)
        for name, filename, handler_level in (
            ("combined_file", "combined.log", level),
            ("error_file", "error.log", "ERROR"),
        ):
            handlers[name] = {
                "class": "logging.handlers.RotatingFileHandler",
                "formatter": "default",
                "level": handler_level,
                "filename": str(log_dir / filename),
                "maxBytes": 10 * 1024 * 1024,
                "backupCount": 5,
                "encoding": "utf-8",
            }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": {"format": LOG_FORMAT}},
        "handlers": handlers,
        "root": {"level": level, "handlers": list(handlers)},
        "loggers": {
            # SQL echo is controlled by DB_ECHO, not by the root level
            "sqlalchemy.engine": {"level": "WARNING"},
            "uvicorn.access": {"level": "WARNING"},
        },
    }


def configure_logging(settings: Settings) -> None:
    """
    Configure root logging from settings.

    Example:
        >>> configure_logging(get_settings())
    """
    if settings.log_dir:
        # Create log directory if it doesn't exist
        Path(settings.log_dir).mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(build_logging_config(settings))
