"""Domain services - abstract collaborators of the application layer."""

from marketplace.domain.services.id_generator import IIdGenerator
from marketplace.domain.services.password_hasher import IPasswordHasher

__all__ = ["IIdGenerator", "IPasswordHasher"]
