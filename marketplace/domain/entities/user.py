"""User domain entity - pure business logic, no infrastructure."""

from collections.abc import Iterable
from dataclasses import dataclass, replace

from marketplace.domain.exceptions import ValidationFailure
from marketplace.domain.validators import (
    is_valid_email,
    is_valid_phone,
    is_valid_url,
    is_valid_uuid,
)


@dataclass(frozen=True)
class User:
    """
    User domain entity representing a marketplace account.

    This is a pure Python value with NO dependencies on FastAPI or any
    framework. It is immutable: update methods return a new User.

    Two constructors exist:
    - ``User.new`` trusts its input and never validates
    - ``User.create`` checks identifier, email, phone and image URL first
    """

    user_id: str
    email: str
    phone: str
    address: str
    image_url: str
    password_hash: str
    confirmed: bool
    roles: tuple[str, ...]

    @classmethod
    def new(
        cls,
        user_id: str,
        email: str,
        phone: str,
        address: str,
        image_url: str,
        password_hash: str,
        confirmed: bool,
        roles: Iterable[str],
    ) -> "User":
        """
        Build a user without validating anything.

        Meant for input already known to be good (e.g. loaded from a trusted
        store). Roles keep their input order.
        """
        return cls(
            user_id=str(user_id),
            email=str(email),
            phone=str(phone),
            address=str(address),
            image_url=str(image_url),
            password_hash=str(password_hash),
            confirmed=bool(confirmed),
            roles=tuple(str(role) for role in roles),
        )

    @classmethod
    def create(
        cls,
        user_id: str,
        email: str,
        phone: str,
        address: str,
        image_url: str,
        password_hash: str,
        confirmed: bool,
        roles: Iterable[str],
    ) -> "User":
        """
        Validate raw input, then build the user.

        Rules run in this order and the first failure wins:
        1. user_id is a UUID
        2. email is a valid address
        3. phone is a valid international number
        4. image_url is an absolute URL

        Address, password hash and roles are accepted as given.

        Raises:
            ValidationFailure: With the reason of the first failing rule
        """
        if not is_valid_uuid(user_id):
            raise ValidationFailure("UUID is not valid")

        if not is_valid_email(email):
            raise ValidationFailure("Email is not valid")

        if not is_valid_phone(phone):
            raise ValidationFailure("Phone is invalid")

        if not is_valid_url(image_url):
            raise ValidationFailure("URL is not valid")

        return cls.new(
            user_id,
            email,
            phone,
            address,
            image_url,
            password_hash,
            confirmed,
            roles,
        )

    def update_email(self, email: str) -> "User":
        """
        Return a copy of this user with a new email.

        Raises:
            ValidationFailure: If the email is not valid
        """
        if not is_valid_email(email):
            raise ValidationFailure("Email is not valid")

        return replace(self, email=str(email))

    def update_phone(self, phone: str) -> "User":
        """
        Return a copy of this user with a new phone number.

        Raises:
            ValidationFailure: If the phone number is not valid
        """
        if not is_valid_phone(phone):
            raise ValidationFailure("Phone number is not valid")

        return replace(self, phone=str(phone))

    def update_address(self, address: str) -> "User":
        """Return a copy of this user with a new address (not validated)."""
        return replace(self, address=str(address))
