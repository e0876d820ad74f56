"""Domain models for the Acme Widget Co. basket."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from acme_basket.errors import ConfigurationError

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def to_money(value: Decimal | float | int | str) -> Decimal:
    """Convert a price-like value to Decimal, going through str for floats."""
    try:
        if isinstance(value, Decimal):
            money = value
        elif isinstance(value, float):
            money = Decimal(str(value))
        else:
            money = Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise ConfigurationError(f"Not a money amount: {value!r}") from exc
    if not money.is_finite():
        raise ConfigurationError(f"Money amount must be finite: {value!r}")
    return money


def round_money(value: Decimal) -> Decimal:
    """Round to cents, half up."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class Product:
    """A purchasable item. Identity is the code."""

    code: str
    name: str
    price: Decimal

    def __post_init__(self) -> None:
        price = to_money(self.price)
        if price < 0:
            raise ConfigurationError(f"Product {self.code} has negative price {price}")
        object.__setattr__(self, "price", price)

    def __str__(self) -> str:
        return f"{self.name} ({self.code}) - ${self.price:.2f}"


@dataclass(frozen=True)
class DeliveryRule:
    """Delivery costs `cost` once the post-offer subtotal reaches `threshold`."""

    threshold: Decimal
    cost: Decimal

    def __post_init__(self) -> None:
        threshold = to_money(self.threshold)
        cost = to_money(self.cost)
        if threshold < 0:
            raise ConfigurationError(f"Delivery threshold must not be negative: {threshold}")
        if cost < 0:
            raise ConfigurationError(f"Delivery cost must not be negative: {cost}")
        object.__setattr__(self, "threshold", threshold)
        object.__setattr__(self, "cost", cost)


@dataclass(frozen=True)
class PriceBreakdown:
    """Every step of one basket pricing pass."""

    subtotal: Decimal
    discount: Decimal
    delivery: Decimal
    total: Decimal

    @property
    def post_offer_subtotal(self) -> Decimal:
        return self.subtotal - self.discount
