"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from sqlalchemy.exc import SQLAlchemyError

from authgate.application.exceptions import ApplicationError
from authgate.domain.exceptions import DomainException
from authgate.infrastructure.config.logging_config import configure_logging
from authgate.infrastructure.config.settings import get_settings
from authgate.presentation.api.v1 import auth, health
from authgate.presentation.dependencies import dispose_database_engine
from authgate.presentation.error_schemas import ValidationErrorResponse
from authgate.presentation.exception_handlers import (
    application_error_handler,
    database_error_handler,
    domain_exception_handler,
    generic_exception_handler,
    validation_error_handler,
)
from authgate.presentation.middleware import RequestLoggingMiddleware


# Get settings for app configuration
_settings = get_settings()
configure_logging(_settings)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {_settings.app_name} {_settings.app_version} ({_settings.environment})")
    yield
    await dispose_database_engine()
    logger.info(f"{_settings.app_name} stopped")


app = FastAPI(
    title=_settings.app_name,
    description="Cookie-based authentication service: registration, login and token refresh",
    version=_settings.app_version,
    debug=_settings.debug,
    lifespan=lifespan,
)

# Cookies require credentialed CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

# Register exception handlers
# - ApplicationError handles ALL application layer exceptions (InvalidCredentialsError, etc.)
# - DomainException handles ALL domain layer exceptions
# - RequestValidationError handles Pydantic validation errors
# - SQLAlchemyError handles database errors
# - Exception handles everything else
app.add_exception_handler(ApplicationError, application_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(DomainException, domain_exception_handler)  # type: ignore[arg-type]
app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(SQLAlchemyError, database_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(Exception, generic_exception_handler)

# Include routers
app.include_router(auth.router)
app.include_router(health.router)


def custom_openapi():
    """
    Customize OpenAPI schema to use our custom validation error format.

    Replaces the default 422 HTTPValidationError responses with the 400
    ValidationErrorResponse actually returned by validation_error_handler.
    """
    # Return cached schema if it exists
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )

    schemas = openapi_schema.setdefault("components", {}).setdefault("schemas", {})
    schemas.pop("HTTPValidationError", None)
    schemas.pop("ValidationError", None)
    schemas.setdefault("ValidationErrorResponse", ValidationErrorResponse.model_json_schema())

    for path_data in openapi_schema.get("paths", {}).values():
        for operation in path_data.values():
            if isinstance(operation, dict) and "422" in operation.get("responses", {}):
                del operation["responses"]["422"]
                operation["responses"]["400"] = {
                    "description": "Validation Error",
                    "content": {
                        "application/json": {
                            "schema": {"$ref": "#/components/schemas/ValidationErrorResponse"}
                        }
                    },
                }

    app.openapi_schema = openapi_schema
    return app.openapi_schema


# Override the default OpenAPI schema generation
app.openapi = custom_openapi


def run() -> None:
    """Start the service with uvicorn on HOST:PORT."""
    uvicorn.run(
        "authgate.main:app",
        host=_settings.host,
        port=_settings.port,
        log_config=None,
    )
