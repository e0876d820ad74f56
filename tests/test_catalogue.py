"""Tests for products and the product catalogue."""

from decimal import Decimal

import pytest

from acme_basket.catalogue import ProductCatalogue
from acme_basket.errors import ConfigurationError
from acme_basket.models import Product


def test_find_product_returns_registered_products(catalogue):
    red = catalogue.find_product("R01")
    assert red.name == "Red Widget"
    assert red.price == Decimal("32.95")
    assert catalogue.find_product("G01").price == Decimal("24.95")
    assert catalogue.find_product("B01").price == Decimal("7.95")


def test_find_product_unknown_code_is_none(catalogue):
    assert catalogue.find_product("XYZ") is None
    assert catalogue.lookup("") is None


def test_catalogue_keeps_construction_order(catalogue):
    assert catalogue.codes == ("R01", "G01", "B01")
    assert [product.code for product in catalogue] == ["R01", "G01", "B01"]
    assert len(catalogue) == 3
    assert "B01" in catalogue
    assert "XYZ" not in catalogue


def test_duplicate_codes_are_rejected():
    with pytest.raises(ConfigurationError, match="R01"):
        ProductCatalogue(
            [
                Product("R01", "Red Widget", Decimal("32.95")),
                Product("R01", "Other Red", Decimal("1.00")),
            ]
        )


def test_catalogue_mapping_is_read_only(catalogue):
    with pytest.raises(TypeError):
        catalogue.products_by_code["X01"] = Product("X01", "Extra", Decimal("1.00"))


def test_float_price_converts_without_float_noise():
    assert Product("R01", "Red Widget", 32.95).price == Decimal("32.95")


def test_negative_price_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        Product("N01", "Refund Widget", Decimal("-1.00"))


def test_product_str():
    assert str(Product("R01", "Red Widget", Decimal("32.95"))) == "Red Widget (R01) - $32.95"


@pytest.mark.parametrize("price", ["abc", None, "NaN", "Infinity", ""])
def test_malformed_price_is_a_configuration_error(price):
    with pytest.raises(ConfigurationError):
        Product("X01", "Bad Widget", price)


def test_malformed_row_fails_catalogue_construction():
    with pytest.raises(ConfigurationError, match="Not a money amount"):
        ProductCatalogue.from_rows([{"code": "X01", "name": "Bad Widget", "price": "12,50"}])
