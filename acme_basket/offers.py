"""Discount offers applied to basket contents."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from decimal import Decimal

from acme_basket.errors import ConfigurationError
from acme_basket.models import ZERO, Product, round_money


class Offer(ABC):
    """A pluggable rule computing a discount from the items in a basket."""

    @abstractmethod
    def calculate_discount(self, items: Sequence[Product]) -> Decimal:
        """Return a non-negative discount; 0 when the offer does not apply."""

    @abstractmethod
    def describe(self) -> str:
        """Human readable summary of the offer."""


class BuyOneGetOneHalfPriceOffer(Offer):
    """Every second unit of one product is half price."""

    def __init__(self, product_code: str) -> None:
        if not product_code:
            raise ConfigurationError("Offer needs a product code")
        self.product_code = product_code

    def calculate_discount(self, items: Sequence[Product]) -> Decimal:
        matching = [item for item in items if item.code == self.product_code]
        if len(matching) < 2:
            return ZERO

        pairs = len(matching) // 2
        unit_price = matching[0].price
        # Rounded once on the total, not per pair.
        return round_money(pairs * unit_price / 2)

    def describe(self) -> str:
        return f"Buy one {self.product_code}, get the second half price"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.product_code!r})"
