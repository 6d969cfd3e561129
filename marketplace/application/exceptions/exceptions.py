"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base application layer exception."""

    def __init__(self, message: str, error_code: str = "APPLICATION_ERROR"):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class InvalidArgumentError(ApplicationError):
    """
    Raised when a request's fields cannot become valid entities.

    The message is the entity's rejection reason, passed through verbatim
    (e.g. "Email is not valid").
    """

    def __init__(self, message: str = "Invalid argument"):
        super().__init__(message, error_code="INVALID_ARGUMENT")
