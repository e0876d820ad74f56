"""The basket and its pricing pipeline."""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

from acme_basket.catalogue import ProductCatalogue
from acme_basket.delivery import DeliveryChargeRules
from acme_basket.errors import ProductNotFoundError
from acme_basket.models import ZERO, PriceBreakdown, Product, round_money
from acme_basket.offers import Offer


class Basket:
    """
    Products added by a shopper, priced on demand.

    Prices are never cached: every call to `total()` or `breakdown()` runs the
    whole pipeline (subtotal, offers, delivery, rounding) over the current items.
    """

    def __init__(
        self,
        catalogue: ProductCatalogue,
        delivery_rules: DeliveryChargeRules,
        offers: Iterable[Offer] = (),
    ) -> None:
        self.catalogue = catalogue
        self.delivery_rules = delivery_rules
        self.offers: tuple[Offer, ...] = tuple(offers)
        self._items: list[Product] = []

    def add(self, code: str) -> None:
        """Add one unit of a product, raising ProductNotFoundError for unknown codes."""
        product = self.catalogue.find_product(code)
        if product is None:
            raise ProductNotFoundError(code)
        self._items.append(product)

    @property
    def items(self) -> tuple[Product, ...]:
        return tuple(self._items)

    def line_counts(self) -> list[tuple[Product, int]]:
        """Group items by product, in order of first addition."""
        counts: dict[str, int] = {}
        products: dict[str, Product] = {}
        for item in self._items:
            counts[item.code] = counts.get(item.code, 0) + 1
            products.setdefault(item.code, item)
        return [(products[code], count) for code, count in counts.items()]

    def subtotal(self) -> Decimal:
        return sum((item.price for item in self._items), ZERO)

    def discount(self) -> Decimal:
        items = self.items
        return sum((offer.calculate_discount(items) for offer in self.offers), ZERO)

    def delivery_charge(self) -> Decimal:
        return self.delivery_rules.calculate(self.subtotal() - self.discount())

    def breakdown(self) -> PriceBreakdown:
        subtotal = self.subtotal()
        discount = self.discount()
        # Not clamped at zero; offers larger than the subtotal are a config problem.
        post_offer = subtotal - discount
        delivery = self.delivery_rules.calculate(post_offer)
        total = round_money(post_offer + delivery)
        return PriceBreakdown(subtotal=subtotal, discount=discount, delivery=delivery, total=total)

    def total(self) -> Decimal:
        """Final amount due, rounded to cents."""
        return self.breakdown().total

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        codes = ", ".join(item.code for item in self._items)
        return f"Basket([{codes}])"
