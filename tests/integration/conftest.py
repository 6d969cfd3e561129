"""Integration test fixtures.

Provides a FastAPI test client running the real application. Hashing and
identifier generation are swapped through dependency overrides so that
responses are predictable; everything else (routing, validation, entity
rules, exception handlers) is the production code.
"""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from marketplace.main import app
from marketplace.presentation.dependencies import get_id_generator, get_password_hasher
from tests.fakes.id_generator_fake import FakeIdGenerator
from tests.fakes.password_hasher_fake import FakePasswordHasher
from tests.sample_data import BUSINESS_ID, USER_ID


@pytest.fixture
def id_generator() -> FakeIdGenerator:
    """Identifiers handed out to requests, in order."""
    return FakeIdGenerator([USER_ID, BUSINESS_ID])


@pytest.fixture
def password_hasher() -> FakePasswordHasher:
    return FakePasswordHasher()


@pytest.fixture
def client(id_generator, password_hasher) -> Generator[TestClient]:
    """
    Create a FastAPI test client with fake hasher and id generator.

    Overrides are cleared after each test so they never leak.
    """
    app.dependency_overrides[get_password_hasher] = lambda: password_hasher
    app.dependency_overrides[get_id_generator] = lambda: id_generator

    with TestClient(app) as test_client:
        yield test_client

    # Clean up overrides
    app.dependency_overrides.clear()


@pytest.fixture
def real_client() -> Generator[TestClient]:
    """Test client with the production wiring (Argon2, random UUIDs)."""
    app.dependency_overrides.clear()

    with TestClient(app) as test_client:
        yield test_client
