"""Fake implementations for testing."""

from tests.fakes.id_generator_fake import FakeIdGenerator
from tests.fakes.password_hasher_fake import FakePasswordHasher

__all__ = ["FakeIdGenerator", "FakePasswordHasher"]
