"""Basket file loading: catalog, offers and cart from one JSON document.

Format:
    {
        "products": [{"name": "rice", "unit": "each", "price": 2.99}],
        "offers": [{"type": "percent_discount", "product": "rice", "argument": 10}],
        "cart": [{"product": "rice", "quantity": 1}]
    }
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

import structlog

from .cart import ShoppingCart
from .catalog import InMemoryCatalog
from .errors import BasketFileError, UnknownProductError, errmsg
from .models import Product, ProductUnit
from .offers import OfferRegistry, SpecialOfferType

logger = structlog.get_logger(__name__)


@dataclass
class Basket:
    catalog: InMemoryCatalog
    offers: OfferRegistry
    cart: ShoppingCart


def _unit(value: str) -> ProductUnit:
    try:
        return ProductUnit(value)
    except ValueError:
        raise ValueError(f"{errmsg.UNKNOWN_UNIT}: {value!r}") from None


def _offer_type(value: str) -> SpecialOfferType:
    try:
        return SpecialOfferType(value)
    except ValueError:
        raise ValueError(f"{errmsg.UNKNOWN_OFFER_TYPE}: {value!r}") from None


def basket_from_dict(data: dict[str, Any]) -> Basket:
    """Build a Basket from parsed JSON.

    Raises KeyError/ValueError/TypeError for malformed entries and
    UnknownProductError for names missing from "products".
    """
    catalog = InMemoryCatalog()
    for entry in data.get("products", []):
        product = Product(entry["name"], _unit(entry.get("unit", "each")))
        catalog.add_product(product, float(entry["price"]))

    offers = OfferRegistry()
    for entry in data.get("offers", []):
        offers.add_special_offer(
            _offer_type(entry["type"]),
            catalog.product_named(entry["product"]),
            float(entry.get("argument", 0.0)),
        )

    cart = ShoppingCart()
    for entry in data.get("cart", []):
        cart.add_item_quantity(catalog.product_named(entry["product"]), float(entry.get("quantity", 1)))

    return Basket(catalog=catalog, offers=offers, cart=cart)


def _reject_constant(name: str) -> float:
    raise ValueError(f"non-finite number {name} is not allowed")


def load_basket(path: Union[str, Path]) -> Basket:
    """Read a basket file.

    Unknown products and malformed content are reported as BasketFileError;
    invalid quantities and offer parameters propagate unchanged.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f, parse_constant=_reject_constant)
        if not isinstance(data, dict):
            raise ValueError("top level must be an object")
        basket = basket_from_dict(data)
    except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError, UnknownProductError) as e:
        raise BasketFileError(str(path), e) from e

    logger.info(
        "basket_loaded",
        path=str(path),
        products=len(basket.catalog),
        offers=len(basket.offers),
        cart_lines=len(basket.cart),
    )
    return basket
