"""Account service - application layer use cases.

This service orchestrates the two registration use cases:
1. Create a user account
2. Create a business together with its owner account

DEPENDENCY INVERSION in action:
- AccountService depends on IPasswordHasher (abstraction)
- AccountService depends on IIdGenerator (abstraction)
- No dependencies on pwdlib, uuid generation or FastAPI
"""

import logging

from marketplace.application.dtos.business_dto import BusinessData, BusinessResponseData
from marketplace.application.dtos.user_dto import UserData, UserResponseData
from marketplace.application.exceptions import InvalidArgumentError
from marketplace.domain.entities.business import Business
from marketplace.domain.entities.user import User
from marketplace.domain.exceptions import ValidationFailure
from marketplace.domain.services.id_generator import IIdGenerator
from marketplace.domain.services.password_hasher import IPasswordHasher

logger = logging.getLogger(__name__)

USER_ROLE = "user"
BUSINESS_ROLE = "business"


class AccountService:
    """
    Account service encapsulating registration use cases.

    This service:
    1. Mints identifiers through IIdGenerator
    2. Hashes passwords through IPasswordHasher before building a User
    3. Builds entities with their validating constructors
    4. Returns DTOs to the presentation layer
    5. Raises InvalidArgumentError (converted to HTTP 400 by presentation)

    Nothing is persisted. Every call works only on request-local values, so
    one instance can serve concurrent requests.
    """

    def __init__(
        self,
        password_hasher: IPasswordHasher,
        id_generator: IIdGenerator,
    ):
        """
        Initialize service with dependencies.

        Args:
            password_hasher: Password hashing service (abstraction)
            id_generator: Identifier source for new users and businesses

        Example:
            # Production
            service = AccountService(
                password_hasher=Argon2PasswordHasher(),
                id_generator=UUID4Generator(),
            )

            # Testing
            service = AccountService(
                password_hasher=FakePasswordHasher(),
                id_generator=FakeIdGenerator([...]),
            )
        """
        self._password_hasher = password_hasher
        self._id_generator = id_generator

    def create_user(self, dto: UserData) -> UserResponseData:
        """
        Register a new user account with the "user" role.

        Args:
            dto: Registration data

        Returns:
            The created user, roles included

        Raises:
            InvalidArgumentError: If any field fails validation; the message
                is the entity's rejection reason
        """
        user = self._build_user(self._id_generator.new_id(), dto, role=USER_ROLE)

        logger.info(f"User {user.user_id} created")
        return UserResponseData.from_entity(user)

    def create_business(self, dto: BusinessData) -> BusinessResponseData:
        """
        Register an owner account with the "business" role and its business.

        The business starts with no products and no tags. If the business
        cannot be built the owner is simply dropped: nothing was stored, so
        there is nothing to undo.

        Args:
            dto: Owner registration data

        Returns:
            Identifiers of both entities plus the owner's contact data

        Raises:
            InvalidArgumentError: If the owner or the business is rejected
        """
        user_id = self._id_generator.new_id()
        business_id = self._id_generator.new_id()

        user = self._build_user(user_id, dto, role=BUSINESS_ROLE)

        try:
            business = Business.create(business_id, user.user_id, [], [])
        except ValidationFailure as exc:
            logger.info(f"Business rejected for user {user.user_id}: {exc.reason}")
            raise InvalidArgumentError(exc.reason) from exc

        logger.info(f"Business {business.business_id} created for user {user.user_id}")
        return BusinessResponseData.from_entities(user, business)

    def _build_user(
        self, user_id: str, dto: UserData | BusinessData, role: str
    ) -> User:
        """
        Hash the password and build a validated User.

        Raises:
            InvalidArgumentError: With the User's rejection reason
        """
        try:
            return User.create(
                user_id=user_id,
                email=dto.email,
                phone=dto.phone,
                address=dto.address,
                image_url=dto.image_url,
                password_hash=self._password_hasher.hash(dto.password),
                confirmed=False,
                roles=[role],
            )
        except ValidationFailure as exc:
            logger.info(f"User rejected: {exc.reason}")
            raise InvalidArgumentError(exc.reason) from exc
