"""Domain exceptions - entity validation failures."""

from marketplace.domain.exceptions.domain_exceptions import (
    DomainException,
    ValidationFailure,
    ValidationNotDefinedException,
)

__all__ = [
    "DomainException",
    "ValidationFailure",
    "ValidationNotDefinedException",
]
