"""Exceptions raised by the basket domain."""

from __future__ import annotations


class BasketError(Exception):
    """Base class for basket errors."""


class ProductNotFoundError(BasketError, LookupError):
    """Raised when a product code is not in the catalogue."""

    def __init__(self, code: str) -> None:
        super().__init__(f"Product not found: {code}")
        self.code = code


class ConfigurationError(BasketError, ValueError):
    """Raised at construction time for malformed catalogue, delivery or offer setup."""
