"""Pytest configuration and fixtures.

Shared fixtures for unit and integration tests. The account service is
built from fakes only:
- FakePasswordHasher instead of Argon2 (fast, readable hashes)
- FakeIdGenerator instead of random UUIDs (predictable identifiers)
"""

import pytest

from marketplace.application.dtos.business_dto import BusinessData
from marketplace.application.dtos.user_dto import UserData
from marketplace.application.services.account_service import AccountService
from marketplace.domain.entities.user import User
from tests.fakes.id_generator_fake import FakeIdGenerator
from tests.fakes.password_hasher_fake import FakePasswordHasher
from tests.sample_data import (
    BUSINESS_ID,
    USER_ID,
    VALID_ADDRESS,
    VALID_EMAIL,
    VALID_IMAGE_URL,
    VALID_PHONE,
)


@pytest.fixture
def fake_password_hasher() -> FakePasswordHasher:
    """Provide a FakePasswordHasher ("HASHED:<password>")."""
    return FakePasswordHasher()


@pytest.fixture
def fake_id_generator() -> FakeIdGenerator:
    """
    Provide a FakeIdGenerator with two valid UUIDs.

    create_user consumes the first; create_business consumes both
    (owner first, then business).
    """
    return FakeIdGenerator([USER_ID, BUSINESS_ID])


@pytest.fixture
def account_service(fake_password_hasher, fake_id_generator) -> AccountService:
    """Provide an AccountService wired with fakes."""
    return AccountService(
        password_hasher=fake_password_hasher,
        id_generator=fake_id_generator,
    )


@pytest.fixture
def user_data() -> UserData:
    """A registration request whose fields all pass validation."""
    return UserData(
        email=VALID_EMAIL,
        phone=VALID_PHONE,
        address=VALID_ADDRESS,
        image_url=VALID_IMAGE_URL,
        password="password123",
    )


@pytest.fixture
def business_data() -> BusinessData:
    """A business registration request whose fields all pass validation."""
    return BusinessData(
        email="owner@example.com",
        phone="+5521965237969",
        address="Rua Dominguinhos, 20",
        image_url="http://images.example.com/burgers.png",
        password="password456",
    )


@pytest.fixture
def sample_user() -> User:
    """
    A user built with the trusting constructor.

    The password_hash uses the FakePasswordHasher format.
    """
    return User.new(
        user_id=USER_ID,
        email=VALID_EMAIL,
        phone=VALID_PHONE,
        address=VALID_ADDRESS,
        image_url=VALID_IMAGE_URL,
        password_hash="HASHED:password123",
        confirmed=False,
        roles=["user"],
    )
