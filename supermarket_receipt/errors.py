"""Error types and error message constants for receipt pricing."""

from typing import Any, Optional


class errmsg:
    """Error message constants for the pricing domain."""

    QUANTITY_POSITIVE = "Quantity must be positive"
    PERCENTAGE_RANGE = "Percentage must be 0-100"
    BUNDLE_PRICE_NEGATIVE = "Bundle price cannot be negative"
    UNIT_PRICE_NEGATIVE = "Unit price cannot be negative"
    UNKNOWN_PRODUCT = "Product not in catalog"
    UNKNOWN_OFFER_TYPE = "Unknown offer type"
    UNKNOWN_UNIT = "Unknown product unit"
    PRODUCT_NAME_TAKEN = "Product name already used with another unit"


class ReceiptError(Exception):
    """Base class for receipt pricing errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


class InvalidQuantityError(ReceiptError):
    """Cart quantity was zero or negative."""


class InvalidParameterError(ReceiptError):
    """Offer or catalog parameter outside its valid range."""


class UnknownProductError(ReceiptError):
    """Catalog has no price for the product."""

    def __init__(self, product: Any):
        super().__init__(f"{errmsg.UNKNOWN_PRODUCT}: {getattr(product, 'name', product)}")
        self.product = product


class BasketFileError(ReceiptError):
    """Basket file could not be read or describes unknown entities."""

    def __init__(self, path: str, cause: Exception):
        super().__init__(f"invalid basket file {path}", cause)
        self.path = path
