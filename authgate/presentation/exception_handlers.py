"""Exception handlers for converting exceptions to HTTP responses.

Instead of creating individual handlers for each exception, we use
base exception handlers that automatically determine the HTTP status
code based on the error_code attribute.

To add a new exception:
1. Create the exception class (inheriting from ApplicationError or DomainException)
2. Add its error_code to ERROR_CODE_TO_HTTP_STATUS in error_codes.py

Every error body has the shape {"success": false, "error": ..., "error_code": ...}.
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from authgate.application.exceptions import ApplicationError
from authgate.domain.exceptions import DomainException
from authgate.presentation.error_codes import get_http_status_for_error_code

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, error_code: str, **extra) -> JSONResponse:
    """Build the standard error envelope."""
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": message,
            "error_code": error_code,
            **extra,
        },
    )


async def application_error_handler(
    request: Request, exc: ApplicationError
) -> JSONResponse:
    """
    Handle ALL application layer exceptions.

    The HTTP status code is determined by the error_code attribute
    using the ERROR_CODE_TO_HTTP_STATUS mapping.
    """
    http_status = get_http_status_for_error_code(exc.error_code)
    return error_response(http_status, exc.message, exc.error_code)


async def domain_exception_handler(
    request: Request, exc: DomainException
) -> JSONResponse:
    """
    Handle ALL domain layer exceptions.

    Store and hashing failures map to 5xx; their messages are replaced by a
    generic one so no internals reach the client.
    """
    http_status = get_http_status_for_error_code(exc.error_code)

    if http_status >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"Domain error: {exc.message}", exc_info=True)
        return error_response(http_status, "An internal error occurred", exc.error_code)

    return error_response(http_status, exc.message, exc.error_code)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle Pydantic validation errors from request data.

    Returns 400 with a list of all validation errors, each with the field
    name and message.
    """
    details = []
    for error in exc.errors():
        loc = list(error["loc"])
        # Drop the "body"/"query" prefix when a field name follows it
        if len(loc) > 1 and loc[0] in ("body", "query", "cookie", "header"):
            loc = loc[1:]

        details.append(
            {
                "field": ".".join(str(part) for part in loc),
                "message": error["msg"].removeprefix("Value error, "),
            }
        )

    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "Validation failed",
        "VALIDATION_ERROR",
        details=details,
    )


async def database_error_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    """
    Handle database errors.

    Catches SQLAlchemy exceptions and returns a standardized error response
    without exposing internal database details.
    """
    logger.error(f"Database error: {exc}", exc_info=True)

    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An internal database error occurred",
        "DATABASE_ERROR",
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle all other unhandled exceptions.

    This is the catch-all handler for any unexpected errors.
    """
    logger.error(f"Unhandled error: {exc}", exc_info=True)

    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An internal server error occurred",
        "INTERNAL_SERVER_ERROR",
    )
