"""Identifier generation interface - domain service abstraction.

New users and businesses get fresh identifiers from this port instead of a
global generator, so the account service stays deterministic under test.
"""

from abc import ABC, abstractmethod


class IIdGenerator(ABC):
    """Interface for minting entity identifiers."""

    @abstractmethod
    def new_id(self) -> str:
        """
        Return a fresh identifier.

        Production implementations return a random UUID string such as
        "25650673-c3e8-4cbb-a7bd-e27d268157b8". Every call must return a
        value that ``is_valid_uuid`` accepts.
        """
        pass
