"""FastAPI dependency injection setup.

This module is the COMPOSITION ROOT - where concrete implementations are
chosen and injected into abstractions:
- Argon2PasswordHasher for IPasswordHasher
- UUID4Generator for IIdGenerator

The application layer only knows the interfaces. Tests swap the concrete
choices through app.dependency_overrides.
"""

from functools import lru_cache

from fastapi import Depends

from marketplace.application.services.account_service import AccountService
from marketplace.domain.services.id_generator import IIdGenerator
from marketplace.domain.services.password_hasher import IPasswordHasher
from marketplace.infrastructure.identifiers.uuid4_generator import UUID4Generator
from marketplace.infrastructure.security.argon2_password_hasher import (
    Argon2PasswordHasher,
)


@lru_cache
def get_password_hasher() -> IPasswordHasher:
    """
    Dependency that provides the password hasher.

    A single stateless instance is shared by all requests.

    Note:
        In tests, override it with the fake:

        app.dependency_overrides[get_password_hasher] = lambda: FakePasswordHasher()
    """
    return Argon2PasswordHasher()


@lru_cache
def get_id_generator() -> IIdGenerator:
    """Dependency that provides the identifier generator (random UUIDs)."""
    return UUID4Generator()


def get_account_service(
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
    id_generator: IIdGenerator = Depends(get_id_generator),
) -> AccountService:
    """
    Dependency that provides AccountService.

    Dependency Graph:
        FastAPI endpoint
            → get_account_service()
                → get_password_hasher() → Argon2PasswordHasher
                → get_id_generator() → UUID4Generator
    """
    return AccountService(password_hasher=password_hasher, id_generator=id_generator)
