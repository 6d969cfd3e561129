"""Password hashing interface - domain service abstraction.

A user entity only ever stores a password hash. The account service hashes
the submitted password through this port before building the User, so the
plain password never reaches the domain model.

The domain does NOT care which algorithm or library does the hashing; the
Argon2 adapter lives in the infrastructure layer.
"""

from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """
    Interface for password hashing operations.

    Implementations must generate a unique salt per call and return a
    self-contained hash string (algorithm, parameters, salt and digest).
    """

    @abstractmethod
    def hash(self, plain_password: str) -> str:
        """
        Hash a plain text password.

        Args:
            plain_password: The plain text password to hash

        Returns:
            Hashed password string (format depends on implementation)
        """
        pass
