"""Application layer exceptions."""

from marketplace.application.exceptions.exceptions import (
    ApplicationError,
    InvalidArgumentError,
)

__all__ = ["ApplicationError", "InvalidArgumentError"]
