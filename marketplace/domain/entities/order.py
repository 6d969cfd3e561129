"""Order domain entity."""

from dataclasses import dataclass

from marketplace.domain.exceptions import ValidationNotDefinedException


@dataclass(frozen=True)
class Order:
    """
    An order for a single product.

    Dates are opaque strings until a date format is agreed on.
    """

    order_id: str
    product_id: str
    ordered_date: str
    expected_date: str

    @classmethod
    def new(
        cls,
        order_id: str,
        product_id: str,
        ordered_date: str,
        expected_date: str,
    ) -> "Order":
        """Build an order without validating anything."""
        return cls(
            order_id=str(order_id),
            product_id=str(product_id),
            ordered_date=str(ordered_date),
            expected_date=str(expected_date),
        )

    @classmethod
    def create(
        cls,
        order_id: str,
        product_id: str,
        ordered_date: str,
        expected_date: str,
    ) -> "Order":
        """
        Checked construction is not available for orders.

        No rules exist yet for order dates or their ordering, so this refuses
        instead of accepting any input. Use ``Order.new`` for trusted data.

        Raises:
            ValidationNotDefinedException: Always
        """
        raise ValidationNotDefinedException("Order")
