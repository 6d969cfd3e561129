"""Business domain entity."""

from collections.abc import Iterable
from dataclasses import dataclass

from marketplace.domain.exceptions import ValidationFailure
from marketplace.domain.validators import is_valid_uuid


def _string_tuple(values: Iterable[str], field: str) -> tuple[str, ...]:
    """Materialize a list field, refusing a bare string posing as a list."""
    if isinstance(values, str):
        raise TypeError(f"{field} must be an iterable of strings, not a string")
    return tuple(str(value) for value in values)


@dataclass(frozen=True)
class Business:
    """
    A business owned by a user.

    Products are referenced by identifier only; nothing here guarantees
    that the referenced products exist or point back to this business.
    """

    business_id: str
    user_id: str
    products_id: tuple[str, ...]
    business_tags: tuple[str, ...]

    @classmethod
    def new(
        cls,
        business_id: str,
        user_id: str,
        products_id: Iterable[str],
        business_tags: Iterable[str],
    ) -> "Business":
        """Build a business without validating anything. Lists keep their order."""
        return cls(
            business_id=str(business_id),
            user_id=str(user_id),
            products_id=_string_tuple(products_id, "products_id"),
            business_tags=_string_tuple(business_tags, "business_tags"),
        )

    @classmethod
    def create(
        cls,
        business_id: str,
        user_id: str,
        products_id: Iterable[str],
        business_tags: Iterable[str],
    ) -> "Business":
        """
        Validate every identifier, then build the business.

        The business id is checked first, then the owner id, then each
        product id in order. All failures share one reason.

        Raises:
            ValidationFailure: "A ID is not a UUID" for the first bad identifier
            TypeError: If products_id or business_tags is a bare string
        """
        products_id = _string_tuple(products_id, "products_id")
        business_tags = _string_tuple(business_tags, "business_tags")

        for identifier in (business_id, user_id, *products_id):
            if not is_valid_uuid(identifier):
                raise ValidationFailure("A ID is not a UUID")

        return cls.new(business_id, user_id, products_id, business_tags)
