"""Pricing engine: turns a cart into a receipt.

Business Rules:
1. Every product in the cart must have a catalog price
2. Each product has at most one offer; offers never span products
3. An offer whose quantity threshold is not met adds no discount line
4. Quantity left over after complete groups is charged at full unit price
"""

import math
from typing import Optional

import structlog

from .cart import ShoppingCart
from .catalog import SupermarketCatalog
from .errors import InvalidParameterError, errmsg
from .models import Discount, Product, Receipt, ReceiptItem
from .offers import OfferRegistry, SpecialOffer, SpecialOfferType

logger = structlog.get_logger(__name__)

THREE_FOR_TWO_GROUP = 3
TWO_FOR_AMOUNT_BUNDLE = 2
FIVE_FOR_AMOUNT_BUNDLE = 5


def _complete_groups(quantity: float, size: int) -> int:
    return math.floor(quantity / size)


def _bundle_discount(
    product: Product, quantity: float, unit_price: float, size: int, bundle_price: float
) -> Optional[Discount]:
    """Charge complete bundles at bundle_price and the remainder at unit price."""
    if quantity < size:
        return None

    bundles = _complete_groups(quantity, size)
    remainder = quantity - bundles * size
    discounted_price = bundles * bundle_price + remainder * unit_price
    normal_price = quantity * unit_price

    return Discount(
        product=product,
        description=f"{size} for {bundle_price:g}",
        discount_amount=discounted_price - normal_price,
    )


def discount_for(offer: SpecialOffer, quantity: float, unit_price: float) -> Optional[Discount]:
    """Compute the discount an offer grants, or None when it does not apply."""
    product = offer.product

    if offer.offer_type is SpecialOfferType.THREE_FOR_TWO:
        if quantity < THREE_FOR_TWO_GROUP:
            return None
        free_items = _complete_groups(quantity, THREE_FOR_TWO_GROUP)
        return Discount(product, "3 for 2", -free_items * unit_price)

    elif offer.offer_type is SpecialOfferType.PERCENT_DISCOUNT:
        if offer.argument == 0:
            return None
        amount = quantity * unit_price * (offer.argument / 100.0)
        return Discount(product, f"{offer.argument:g}% off", -amount)

    elif offer.offer_type is SpecialOfferType.TWO_FOR_AMOUNT:
        return _bundle_discount(product, quantity, unit_price, TWO_FOR_AMOUNT_BUNDLE, offer.argument)

    elif offer.offer_type is SpecialOfferType.FIVE_FOR_AMOUNT:
        return _bundle_discount(product, quantity, unit_price, FIVE_FOR_AMOUNT_BUNDLE, offer.argument)

    raise InvalidParameterError(f"{errmsg.UNKNOWN_OFFER_TYPE}: {offer.offer_type}")


def check_out(
    cart: ShoppingCart,
    catalog: SupermarketCatalog,
    offers: OfferRegistry,
) -> Receipt:
    """Price every product in the cart and apply its offer, if any.

    Reads the cart, catalog and offers without modifying them. Any error
    aborts the checkout; no partial receipt is produced.
    """
    items = []
    discounts = []

    for product, quantity in cart.product_quantities().items():
        unit_price = catalog.unit_price(product)
        items.append(ReceiptItem(product, quantity, unit_price, quantity * unit_price))

        offer = offers.get_offer(product)
        if offer is None:
            continue

        discount = discount_for(offer, quantity, unit_price)
        if discount is None:
            logger.debug("offer_not_applied", product=product.name, offer_type=offer.offer_type.value, quantity=quantity)
            continue

        logger.debug(
            "discount_applied",
            product=product.name,
            description=discount.description,
            amount=discount.discount_amount,
        )
        discounts.append(discount)

    receipt = Receipt(items=tuple(items), discounts=tuple(discounts))
    logger.info(
        "checked_out",
        items=len(receipt.items),
        discounts=len(receipt.discounts),
        total=round(receipt.total_price(), 2),
    )
    return receipt
