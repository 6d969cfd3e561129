"""Exception handlers for converting exceptions to HTTP responses.

Handlers are registered per base class; the HTTP status comes from the
exception's error_code through ERROR_CODE_TO_HTTP_STATUS. A new exception
only needs an entry in error_codes.py.
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from marketplace.application.exceptions import ApplicationError
from marketplace.domain.exceptions import DomainException
from marketplace.presentation.error_codes import get_http_status_for_error_code

logger = logging.getLogger(__name__)


def _error_response(message: str, error_code: str) -> JSONResponse:
    return JSONResponse(
        status_code=get_http_status_for_error_code(error_code),
        content={"detail": message, "error_code": error_code},
    )


async def application_error_handler(
    request: Request, exc: ApplicationError
) -> JSONResponse:
    """
    Handle ALL application layer exceptions.

    InvalidArgumentError ends up here: its message is the entity's
    rejection reason and is returned unchanged.
    """
    return _error_response(exc.message, exc.error_code)


async def domain_exception_handler(
    request: Request, exc: DomainException
) -> JSONResponse:
    """Handle domain exceptions that escaped the application layer."""
    logger.warning(f"Domain exception reached the API boundary: {exc.error_code}")
    return _error_response(exc.message, exc.error_code)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle malformed request bodies (missing fields, wrong JSON types).

    Returns every offending field with its location and message.
    """
    validation_errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]

    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation failed",
            "error_code": "VALIDATION_ERROR",
            "errors": validation_errors,
        },
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unexpected errors; details go to the log only."""
    logger.error(f"Unhandled error: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "An internal server error occurred",
            "error_code": "INTERNAL_SERVER_ERROR",
        },
    )
