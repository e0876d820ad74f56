"""Product catalogue keyed by product code."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from acme_basket.errors import ConfigurationError
from acme_basket.models import Product


class ProductCatalogue:
    """Read-only registry of the products available for sale."""

    def __init__(self, products: Iterable[Product]) -> None:
        by_code: dict[str, Product] = {}
        for product in products:
            if product.code in by_code:
                raise ConfigurationError(f"Duplicate product code in catalogue: {product.code}")
            by_code[product.code] = product
        self._products_by_code = MappingProxyType(by_code)

    @classmethod
    def from_rows(cls, rows: Iterable[Mapping[str, object]]) -> ProductCatalogue:
        """Build a catalogue from `{code, name, price}` mappings."""
        return cls(
            Product(code=str(row["code"]), name=str(row["name"]), price=row["price"])  # type: ignore[arg-type]
            for row in rows
        )

    @property
    def products_by_code(self) -> Mapping[str, Product]:
        return self._products_by_code

    @property
    def codes(self) -> tuple[str, ...]:
        return tuple(self._products_by_code)

    def find_product(self, code: str) -> Product | None:
        """Return the product for a code, or None if it is not sold here."""
        return self._products_by_code.get(code)

    lookup = find_product

    def __contains__(self, code: object) -> bool:
        return code in self._products_by_code

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products_by_code.values())

    def __len__(self) -> int:
        return len(self._products_by_code)
