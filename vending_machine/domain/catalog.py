"""
Product Catalog - registry of products sold by the machine.

Products keep insertion order and receive sequential ids starting at 1.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from vending_machine.core.exceptions import ConfigurationError
from vending_machine.loggers import logger


# =============================================================================
# Product
# =============================================================================


@dataclass
class Product:
    """
    A product slot in the machine.

    Attributes:
        id: Unique sequential id.
        name: Display name.
        price: Price in whole currency units.
        quantity: Units in stock.
    """

    id: int
    name: str
    price: int
    quantity: int

    @property
    def in_stock(self) -> bool:
        """Check if at least one unit is available."""
        return self.quantity > 0

    def restock(self, amount: int) -> None:
        """Add units to the stock."""
        self.quantity += amount

    def reprice(self, price: int) -> None:
        """Replace the price."""
        self.price = price

    def take_one(self) -> bool:
        """Remove one unit. Returns False when out of stock."""
        if self.quantity <= 0:
            return False
        self.quantity -= 1
        return True

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "quantity": self.quantity,
        }

    def __str__(self) -> str:
        return f"{self.id}. {self.name} - {self.price} ({self.quantity} pcs)"


# =============================================================================
# Catalog
# =============================================================================


class ProductCatalog:
    """
    Registry of products.

    Maintains products by id in insertion order.
    """

    def __init__(self) -> None:
        """Initialize an empty catalog."""
        self._products: dict[int, Product] = {}
        self._next_id = 1

    def add(self, name: str, price: int, quantity: int) -> Product:
        """
        Add a product with the next sequential id.

        Args:
            name: Display name.
            price: Positive price.
            quantity: Non-negative starting stock.

        Returns:
            The new product.

        Raises:
            ConfigurationError: If the price or quantity is invalid.
        """
        if price <= 0:
            raise ConfigurationError(
                f"Price must be positive: {price}",
                details={"name": name, "price": price},
            )
        if quantity < 0:
            raise ConfigurationError(
                f"Quantity cannot be negative: {quantity}",
                details={"name": name, "quantity": quantity},
            )

        product = Product(id=self._next_id, name=name, price=price, quantity=quantity)
        self._products[product.id] = product
        self._next_id += 1

        logger.debug(f"Registered product: {product}")
        return product

    def get(self, product_id: int) -> Optional[Product]:
        """
        Get a product by id.

        Returns:
            Product or None if not found.
        """
        return self._products.get(product_id)

    def get_all(self) -> list[Product]:
        """Get all products in insertion order."""
        return list(self._products.values())

    def __iter__(self) -> Iterator[Product]:
        return iter(self.get_all())
