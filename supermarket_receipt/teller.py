"""Teller: a checkout session bound to one catalog and its offers."""

from .cart import ShoppingCart
from .catalog import SupermarketCatalog
from .models import Product, Receipt
from .offers import OfferRegistry, SpecialOffer, SpecialOfferType
from .pricing import check_out


class Teller:
    def __init__(self, catalog: SupermarketCatalog, offers: OfferRegistry | None = None):
        self.catalog = catalog
        self.offers = offers if offers is not None else OfferRegistry()

    def add_special_offer(
        self, offer_type: SpecialOfferType, product: Product, argument: float = 0.0
    ) -> SpecialOffer:
        return self.offers.add_special_offer(offer_type, product, argument)

    def checks_out_articles_from(self, cart: ShoppingCart) -> Receipt:
        return check_out(cart, self.catalog, self.offers)
