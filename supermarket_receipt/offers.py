"""Special offers and the per-product offer registry."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

import structlog

from .errors import errmsg
from .models import Product
from .validation import require_in_range, require_non_negative

logger = structlog.get_logger(__name__)


class SpecialOfferType(Enum):
    THREE_FOR_TWO = "three_for_two"
    PERCENT_DISCOUNT = "percent_discount"
    TWO_FOR_AMOUNT = "two_for_amount"
    FIVE_FOR_AMOUNT = "five_for_amount"


@dataclass(frozen=True)
class SpecialOffer:
    """An offer on one product.

    argument is the percent off for PERCENT_DISCOUNT, the bundle price for
    TWO_FOR_AMOUNT and FIVE_FOR_AMOUNT, and unused for THREE_FOR_TWO.
    """
    offer_type: SpecialOfferType
    product: Product
    argument: float = 0.0


class OfferRegistry:
    """Holds at most one active offer per product. Last write wins."""

    def __init__(self) -> None:
        self._offers: dict[Product, SpecialOffer] = {}

    def add_special_offer(
        self,
        offer_type: SpecialOfferType,
        product: Product,
        argument: float = 0.0,
    ) -> SpecialOffer:
        if offer_type is SpecialOfferType.PERCENT_DISCOUNT:
            require_in_range(argument, 0.0, 100.0, errmsg.PERCENTAGE_RANGE)
        elif offer_type in (SpecialOfferType.TWO_FOR_AMOUNT, SpecialOfferType.FIVE_FOR_AMOUNT):
            require_non_negative(argument, errmsg.BUNDLE_PRICE_NEGATIVE)

        offer = SpecialOffer(offer_type, product, argument)
        replaced = self._offers.get(product)
        self._offers[product] = offer

        logger.debug(
            "offer_registered",
            product=product.name,
            offer_type=offer_type.value,
            argument=argument,
            replaced=replaced is not None,
        )
        return offer

    def get_offer(self, product: Product) -> Optional[SpecialOffer]:
        return self._offers.get(product)

    def __contains__(self, product: object) -> bool:
        return product in self._offers

    def __len__(self) -> int:
        return len(self._offers)

    def __iter__(self) -> Iterator[SpecialOffer]:
        return iter(self._offers.values())
