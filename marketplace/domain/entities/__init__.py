"""Domain entities."""

from marketplace.domain.entities.business import Business
from marketplace.domain.entities.order import Order
from marketplace.domain.entities.product import Product
from marketplace.domain.entities.user import User

__all__ = ["Business", "Order", "Product", "User"]
