"""Random UUID identifier generator."""

import uuid

from marketplace.domain.services.id_generator import IIdGenerator


class UUID4Generator(IIdGenerator):
    """
    Production identifier source: random (version 4) UUIDs.

    Stateless and thread-safe, so a single instance is shared.

    Usage:
        generator = UUID4Generator()
        generator.new_id()
        # Returns: "25650673-c3e8-4cbb-a7bd-e27d268157b8"
    """

    def new_id(self) -> str:
        return str(uuid.uuid4())
