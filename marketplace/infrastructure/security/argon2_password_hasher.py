"""Argon2 password hasher implementation using pwdlib.

Dependency flow:
    AccountService (application) → IPasswordHasher (domain) ← Argon2PasswordHasher (infrastructure)

pwdlib is only imported here, so the account service can be tested with a
fake hasher and the algorithm can change without touching the use cases.
"""

from pwdlib import PasswordHash
from pwdlib.hashers.argon2 import Argon2Hasher

from marketplace.domain.services.password_hasher import IPasswordHasher


class Argon2PasswordHasher(IPasswordHasher):
    """
    Production password hasher using the Argon2id algorithm via pwdlib.

    Uses pwdlib's defaults (64 MB memory cost, 3 iterations, 4 lanes).
    Hashes are self-contained: "$argon2id$v=19$m=65536,t=3,p=4$<salt>$<hash>".

    Usage:
        hasher = Argon2PasswordHasher()
        hasher.hash("user_password_123")
        # Returns: "$argon2id$v=19$m=65536,t=3,p=4$..."
    """

    def __init__(self):
        self._password_hash = PasswordHash((Argon2Hasher(),))

    def hash(self, plain_password: str) -> str:
        """
        Hash a plain text password using Argon2id.

        Each call generates a new salt, so hashing the same password twice
        gives two different strings.
        """
        return self._password_hash.hash(plain_password)
