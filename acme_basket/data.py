"""Typed default catalogue, delivery rules and offers built from the constant module."""

from __future__ import annotations

from acme_basket.basket import Basket
from acme_basket.catalogue import ProductCatalogue
from acme_basket.constant import DELIVERY_RULES_DATA, HALF_PRICE_PAIR_OFFER_CODES, PRODUCTS_DATA
from acme_basket.delivery import DeliveryChargeRules
from acme_basket.offers import BuyOneGetOneHalfPriceOffer, Offer


def default_catalogue() -> ProductCatalogue:
    return ProductCatalogue.from_rows(PRODUCTS_DATA)


def default_delivery_rules() -> DeliveryChargeRules:
    return DeliveryChargeRules.from_rows(DELIVERY_RULES_DATA)


def default_offers() -> list[Offer]:
    return [BuyOneGetOneHalfPriceOffer(code) for code in HALF_PRICE_PAIR_OFFER_CODES]


def new_basket(
    catalogue: ProductCatalogue | None = None,
    delivery_rules: DeliveryChargeRules | None = None,
    offers: list[Offer] | None = None,
) -> Basket:
    """Create an empty basket, filling any missing collaborator with the defaults."""
    return Basket(
        catalogue if catalogue is not None else default_catalogue(),
        delivery_rules if delivery_rules is not None else default_delivery_rules(),
        offers if offers is not None else default_offers(),
    )


def shortcut_for_code(code: str) -> str:
    """Keyboard shortcut used by the terminal app: first letter of the code."""
    return code[:1].lower()
