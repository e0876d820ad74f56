"""Editable static catalogue, delivery and offer configuration."""

from __future__ import annotations

# Prices are strings so they convert to Decimal without float error.
PRODUCTS_DATA: list[dict[str, str]] = [
    {"code": "R01", "name": "Red Widget", "price": "32.95"},
    {"code": "G01", "name": "Green Widget", "price": "24.95"},
    {"code": "B01", "name": "Blue Widget", "price": "7.95"},
]

# Orders of $90 or more ship free, $50 up to $90 cost $2.95, anything less $4.95.
DELIVERY_RULES_DATA: list[dict[str, str]] = [
    {"threshold": "90.00", "cost": "0.00"},
    {"threshold": "50.00", "cost": "2.95"},
    {"threshold": "0.00", "cost": "4.95"},
]

HALF_PRICE_PAIR_OFFER_CODES: list[str] = ["R01"]
