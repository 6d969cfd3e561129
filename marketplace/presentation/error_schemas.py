"""Pydantic models for error responses used in OpenAPI schema generation."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body of every non-422 error response."""

    detail: str = Field(
        ...,
        description="Human-readable reason, e.g. the rejected field's rule",
        examples=["Email is not valid", "UUID is not valid"],
    )
    error_code: str = Field(
        ...,
        description="Machine-readable error code for client-side error handling",
        examples=["INVALID_ARGUMENT"],
    )


class ValidationErrorDetail(BaseModel):
    """A single malformed request field."""

    field: str = Field(
        ...,
        description="The field path where the validation error occurred (e.g., 'body.email')",
        examples=["body.email", "body.password"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message describing what went wrong",
        examples=["Field required", "Input should be a valid string"],
    )


class ValidationErrorResponse(BaseModel):
    """Body of a 422 response, returned when the request body is malformed."""

    detail: str = Field(..., examples=["Validation failed"])
    error_code: str = Field(..., examples=["VALIDATION_ERROR"])
    errors: list[ValidationErrorDetail] = Field(..., min_length=1)
