"""Error code to HTTP status code mapping.

When you add a new exception, add its error_code to this mapping.
"""

from fastapi import status


ERROR_CODE_TO_HTTP_STATUS = {
    # Request errors
    "INVALID_ARGUMENT": status.HTTP_400_BAD_REQUEST,
    "VALIDATION_ERROR": 422,

    # Domain errors
    "VALIDATION_FAILURE": status.HTTP_400_BAD_REQUEST,
    "VALIDATION_NOT_DEFINED": status.HTTP_501_NOT_IMPLEMENTED,
    "DOMAIN_ERROR": status.HTTP_400_BAD_REQUEST,

    # Application errors
    "APPLICATION_ERROR": status.HTTP_400_BAD_REQUEST,

    # Infrastructure errors
    "INTERNAL_SERVER_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def get_http_status_for_error_code(error_code: str) -> int:
    """
    Get HTTP status code for a given error code.

    Args:
        error_code: The error code from the exception

    Returns:
        HTTP status code (defaults to 400 if not found)
    """
    return ERROR_CODE_TO_HTTP_STATUS.get(
        error_code,
        status.HTTP_400_BAD_REQUEST,
    )
