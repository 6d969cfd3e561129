"""Domain layer exceptions for entity validation failures."""


class DomainException(Exception):
    """
    Base exception for domain layer.

    Domain exceptions are raised when raw input cannot become a valid
    entity, or when an entity operation has no defined contract yet.

    Examples:
        - A malformed identifier, email, phone or URL
        - A title or description outside its length bounds
        - Checked construction of an entity without validation rules
    """

    def __init__(self, message: str, error_code: str = "DOMAIN_ERROR"):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class ValidationFailure(DomainException):
    """
    Raised by an entity's validating constructor or update method.

    Only the first failing rule is reported; ``reason`` is the fixed,
    human-readable string for that rule (e.g. "UUID is not valid").
    """

    def __init__(self, reason: str):
        super().__init__(reason, error_code="VALIDATION_FAILURE")

    @property
    def reason(self) -> str:
        return self.message


class ValidationNotDefinedException(DomainException):
    """Raised when checked construction is requested for an entity without rules."""

    def __init__(self, entity_name: str):
        self.entity_name = entity_name
        super().__init__(
            f"{entity_name} validation rules are not defined",
            error_code="VALIDATION_NOT_DEFINED",
        )
