"""Product domain entity."""

from collections.abc import Iterable
from dataclasses import dataclass

from marketplace.domain.exceptions import ValidationFailure
from marketplace.domain.money import BRL, InvalidAmountError, Money
from marketplace.domain.validators import is_valid_url, is_valid_uuid

TITLE_MIN_LENGTH = 5
TITLE_MAX_LENGTH = 100
DESCRIPTION_MIN_LENGTH = 5
DESCRIPTION_MAX_LENGTH = 1000


@dataclass(frozen=True)
class Product:
    """
    A product offered by a business.

    ``business_id`` references the owning business by identifier only.
    ``unformatted_price`` keeps the raw amount as it was submitted, while
    ``price`` is its canonical rendering in BRL (e.g. "R$2.000,00").
    """

    product_id: str
    business_id: str
    title: str
    description: str
    image_url: str
    price: str
    unformatted_price: str
    product_tags: tuple[str, ...]

    @classmethod
    def new(
        cls,
        product_id: str,
        business_id: str,
        title: str,
        description: str,
        image_url: str,
        price: str,
        unformatted_price: str,
        product_tags: Iterable[str],
    ) -> "Product":
        """Build a product without validating anything. Tags keep their order."""
        return cls(
            product_id=str(product_id),
            business_id=str(business_id),
            title=str(title),
            description=str(description),
            image_url=str(image_url),
            price=str(price),
            unformatted_price=str(unformatted_price),
            product_tags=tuple(str(tag) for tag in product_tags),
        )

    @classmethod
    def create(
        cls,
        product_id: str,
        business_id: str,
        title: str,
        description: str,
        image_url: str,
        unformatted_price: str,
        product_tags: Iterable[str],
    ) -> "Product":
        """
        Validate raw input, derive the formatted price, then build the product.

        Rules run in this order and the first failure wins:
        1. product_id is a UUID
        2. business_id is a UUID
        3. image_url is an absolute URL
        4. title has at least 5 characters
        5. title has at most 100 characters
        6. description has at least 5 characters
        7. description has at most 1000 characters
        8. unformatted_price is an amount in BRL format

        Raises:
            ValidationFailure: With the reason of the first failing rule
        """
        if not is_valid_uuid(product_id):
            raise ValidationFailure("UUID is not valid")

        if not is_valid_uuid(business_id):
            raise ValidationFailure("Business UUID is not valid")

        if not is_valid_url(image_url):
            raise ValidationFailure("URL is not valid")

        if len(title) < TITLE_MIN_LENGTH:
            raise ValidationFailure("Too short title")
        if len(title) > TITLE_MAX_LENGTH:
            raise ValidationFailure("Too big title")

        if len(description) < DESCRIPTION_MIN_LENGTH:
            raise ValidationFailure("Too short description")
        if len(description) > DESCRIPTION_MAX_LENGTH:
            raise ValidationFailure("Too big description")

        try:
            price = Money.parse(unformatted_price, BRL)
        except InvalidAmountError as exc:
            raise ValidationFailure("Price is not valid") from exc

        return cls.new(
            product_id,
            business_id,
            title,
            description,
            image_url,
            str(price),
            unformatted_price,
            product_tags,
        )
