"""Shared pytest fixtures: a small catalog and an empty cart."""

import pytest
import structlog

from supermarket_receipt import (
    InMemoryCatalog,
    OfferRegistry,
    Product,
    ProductUnit,
    ReceiptPrinter,
    ShoppingCart,
    Teller,
)


TOOTHBRUSH_PRICE = 0.99
RICE_PRICE = 2.99
APPLES_PRICE = 1.99
CHERRY_TOMATOES_PRICE = 0.69


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo logging configuration done by a test (e.g. the CLI)."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def toothbrush() -> Product:
    return Product("toothbrush", ProductUnit.EACH)


@pytest.fixture
def rice() -> Product:
    return Product("rice", ProductUnit.EACH)


@pytest.fixture
def apples() -> Product:
    return Product("apples", ProductUnit.KILO)


@pytest.fixture
def cherry_tomatoes() -> Product:
    return Product("cherry tomato box", ProductUnit.EACH)


@pytest.fixture
def catalog(toothbrush, rice, apples, cherry_tomatoes) -> InMemoryCatalog:
    catalog = InMemoryCatalog()
    catalog.add_product(toothbrush, TOOTHBRUSH_PRICE)
    catalog.add_product(rice, RICE_PRICE)
    catalog.add_product(apples, APPLES_PRICE)
    catalog.add_product(cherry_tomatoes, CHERRY_TOMATOES_PRICE)
    return catalog


@pytest.fixture
def offers() -> OfferRegistry:
    return OfferRegistry()


@pytest.fixture
def cart() -> ShoppingCart:
    return ShoppingCart()


@pytest.fixture
def teller(catalog, offers) -> Teller:
    return Teller(catalog, offers)


@pytest.fixture
def printer() -> ReceiptPrinter:
    return ReceiptPrinter(40)
