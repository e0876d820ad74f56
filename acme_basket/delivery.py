"""Tiered delivery charges."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from decimal import Decimal

from acme_basket.errors import ConfigurationError
from acme_basket.models import ZERO, DeliveryRule, to_money


class DeliveryChargeRules:
    """
    Resolve a post-offer subtotal to a delivery cost.

    Rules are kept sorted by threshold, highest first, so the first rule whose
    threshold the amount reaches is the one that applies. A rule with a zero
    threshold is required as the catch-all.
    """

    def __init__(self, rules: Iterable[DeliveryRule]) -> None:
        ordered = sorted(rules, key=lambda rule: rule.threshold, reverse=True)
        if not ordered:
            raise ConfigurationError("Delivery rules must not be empty")

        seen: set[Decimal] = set()
        for rule in ordered:
            if rule.threshold in seen:
                raise ConfigurationError(f"Duplicate delivery threshold: {rule.threshold}")
            seen.add(rule.threshold)
        if ZERO not in seen:
            raise ConfigurationError("Delivery rules need a threshold 0 fallback")

        self._rules = tuple(ordered)

    @classmethod
    def from_rows(cls, rows: Iterable[Mapping[str, object]]) -> DeliveryChargeRules:
        """Build rules from `{threshold, cost}` mappings."""
        return cls(
            DeliveryRule(threshold=row["threshold"], cost=row["cost"])  # type: ignore[arg-type]
            for row in rows
        )

    @property
    def rules(self) -> tuple[DeliveryRule, ...]:
        return self._rules

    def calculate(self, amount: Decimal | float | int | str) -> Decimal:
        """Return the delivery cost for an amount; 0 if no rule matches."""
        amount = to_money(amount)
        for rule in self._rules:
            if rule.threshold <= amount:
                return rule.cost
        return ZERO

    resolve = calculate
