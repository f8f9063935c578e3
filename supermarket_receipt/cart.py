"""Shopping cart: ordered additions grouped by product for pricing."""

import structlog

from .errors import errmsg
from .models import Product, ProductQuantity
from .validation import require_positive

logger = structlog.get_logger(__name__)


class ShoppingCart:
    def __init__(self) -> None:
        self._items: list[ProductQuantity] = []
        # dicts keep first-insertion order, which drives receipt line order
        self._product_quantities: dict[Product, float] = {}

    def add_item(self, product: Product) -> None:
        self.add_item_quantity(product, 1.0)

    def add_item_quantity(self, product: Product, quantity: float) -> None:
        require_positive(quantity, errmsg.QUANTITY_POSITIVE)

        self._items.append(ProductQuantity(product, quantity))
        if product in self._product_quantities:
            self._product_quantities[product] += quantity
        else:
            self._product_quantities[product] = quantity

        logger.debug(
            "item_added",
            product=product.name,
            quantity=quantity,
            total_quantity=self._product_quantities[product],
        )

    def items(self) -> list[ProductQuantity]:
        """Every addition in the order it was made."""
        return list(self._items)

    def product_quantities(self) -> dict[Product, float]:
        """Accumulated quantity per product, in first-added order."""
        return dict(self._product_quantities)

    def is_empty(self) -> bool:
        return not self._product_quantities

    def __len__(self) -> int:
        return len(self._product_quantities)
