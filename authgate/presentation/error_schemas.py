"""Pydantic models for response envelopes used in OpenAPI schema generation."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope: ``{"success": true, "data": ...}``."""

    success: bool = True
    data: T


class ErrorResponse(BaseModel):
    """Model for every non-validation error response.

    This is the format returned by the handlers in
    authgate/presentation/exception_handlers.py.
    """

    success: bool = Field(default=False, examples=[False])
    error: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Invalid login or password"],
    )
    error_code: str = Field(
        ...,
        description="Machine-readable error code for client-side error handling",
        examples=["INVALID_CREDENTIALS"],
    )


class ValidationErrorDetail(BaseModel):
    """Model for individual field validation error.

    Represents a single validation error with the field name and error message.
    """

    field: str = Field(
        ...,
        description="The field where the validation error occurred",
        examples=["login", "password"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message describing what went wrong",
        examples=[
            "Password must contain at least one uppercase letter",
            "Field required",
        ],
    )


class ValidationErrorResponse(ErrorResponse):
    """Model for the complete 400 validation error response."""

    details: list[ValidationErrorDetail] = Field(
        ...,
        description="List of all validation errors found in the request",
        min_length=1,
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "success": False,
                "error": "Validation failed",
                "error_code": "VALIDATION_ERROR",
                "details": [
                    {
                        "field": "password",
                        "message": "Password must contain at least one number",
                    },
                ],
            }
        }
    }
