"""Product catalog: resolves a product to its current unit price."""

from abc import ABC, abstractmethod

import structlog

from .errors import InvalidParameterError, UnknownProductError, errmsg
from .models import Product
from .validation import require_non_negative

logger = structlog.get_logger(__name__)


class SupermarketCatalog(ABC):
    """
    Base class for catalogs.

    Implementations hold no discount knowledge; they only price products.
    unit_price must raise UnknownProductError for products it does not know.
    """

    @abstractmethod
    def add_product(self, product: Product, price: float) -> None:
        pass

    @abstractmethod
    def unit_price(self, product: Product) -> float:
        pass


class InMemoryCatalog(SupermarketCatalog):
    """Dictionary-backed catalog for tests, seeding and basket files."""

    def __init__(self) -> None:
        self._products: dict[str, Product] = {}
        self._prices: dict[Product, float] = {}

    def add_product(self, product: Product, price: float) -> None:
        require_non_negative(price, errmsg.UNIT_PRICE_NEGATIVE)
        existing = self._products.get(product.name)
        if existing is not None and existing != product:
            raise InvalidParameterError(f"{errmsg.PRODUCT_NAME_TAKEN}: {product.name}")
        self._products[product.name] = product
        self._prices[product] = price
        logger.debug("product_added", product=product.name, unit=product.unit.value, price=price)

    def unit_price(self, product: Product) -> float:
        try:
            return self._prices[product]
        except KeyError:
            raise UnknownProductError(product) from None

    def product_named(self, name: str) -> Product:
        """Look up a product by its name."""
        try:
            return self._products[name]
        except KeyError:
            raise UnknownProductError(name) from None

    def __contains__(self, product: object) -> bool:
        return product in self._prices

    def __len__(self) -> int:
        return len(self._prices)
