"""Supermarket receipt pricing: carts, special offers and printed receipts."""

from .cart import ShoppingCart
from .catalog import InMemoryCatalog, SupermarketCatalog
from .errors import (
    BasketFileError,
    InvalidParameterError,
    InvalidQuantityError,
    ReceiptError,
    UnknownProductError,
)
from .models import (
    Discount,
    Product,
    ProductQuantity,
    ProductUnit,
    Receipt,
    ReceiptItem,
)
from .offers import OfferRegistry, SpecialOffer, SpecialOfferType
from .pricing import check_out, discount_for
from .receipt_printer import ReceiptPrinter
from .teller import Teller

__all__ = [
    "ShoppingCart",
    "InMemoryCatalog",
    "SupermarketCatalog",
    "BasketFileError",
    "InvalidParameterError",
    "InvalidQuantityError",
    "ReceiptError",
    "UnknownProductError",
    "Discount",
    "Product",
    "ProductQuantity",
    "ProductUnit",
    "Receipt",
    "ReceiptItem",
    "OfferRegistry",
    "SpecialOffer",
    "SpecialOfferType",
    "check_out",
    "discount_for",
    "ReceiptPrinter",
    "Teller",
]
