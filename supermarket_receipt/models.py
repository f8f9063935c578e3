"""Data models shared by the cart, pricing engine and receipt printer."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class ProductUnit(Enum):
    EACH = "each"
    KILO = "kilo"


@dataclass(frozen=True)
class Product:
    """A product sold by the supermarket. Equality is by name and unit."""
    name: str
    unit: ProductUnit = ProductUnit.EACH


@dataclass(frozen=True)
class ProductQuantity:
    """A single addition to the cart."""
    product: Product
    quantity: float


@dataclass(frozen=True)
class ReceiptItem:
    """A charged line: quantity times unit price, unrounded."""
    product: Product
    quantity: float
    price: float
    total_price: float


@dataclass(frozen=True)
class Discount:
    """An applied offer. discount_amount is negative when money is taken off."""
    product: Product
    description: str
    discount_amount: float


@dataclass(frozen=True)
class Receipt:
    """Result of a checkout: items in cart order followed by discounts."""
    items: Tuple[ReceiptItem, ...] = field(default_factory=tuple)
    discounts: Tuple[Discount, ...] = field(default_factory=tuple)

    def total_price(self) -> float:
        total = 0.0
        for item in self.items:
            total += item.total_price
        for discount in self.discounts:
            total += discount.discount_amount
        return total
