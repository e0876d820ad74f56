"""Headless tests for the Textual basket app."""

from decimal import Decimal

import pytest

from acme_basket.basket import Basket
from acme_basket.basket_app import BasketApp
from acme_basket.catalogue import ProductCatalogue
from acme_basket.models import Product


@pytest.mark.asyncio
async def test_keys_add_products():
    app = BasketApp()
    async with app.run_test() as pilot:
        await pilot.press("r", "r")
        await pilot.pause()
        assert [item.code for item in app.basket.items] == ["R01", "R01"]
        assert app.basket.total() == Decimal("54.37")
        assert app.system_status == "Added Red Widget"


@pytest.mark.asyncio
async def test_unmapped_key_reports_status():
    app = BasketApp()
    async with app.run_test() as pilot:
        await pilot.press("z")
        await pilot.pause()
        assert len(app.basket) == 0
        assert "No product on key 'z'" == app.system_status


@pytest.mark.asyncio
async def test_new_basket_clears_items():
    app = BasketApp(initial_codes=["B01", "G01"])
    async with app.run_test() as pilot:
        assert app.basket.total() == Decimal("37.85")
        await pilot.press("ctrl+n")
        await pilot.pause()
        assert len(app.basket) == 0
        assert app.basket.total() == Decimal("4.95")


def test_initial_unknown_code_goes_to_status():
    app = BasketApp(initial_codes=["R01", "XYZ"])
    assert [item.code for item in app.basket.items] == ["R01"]
    assert app.system_status == "Product not found: XYZ"


def test_product_keys_follow_catalogue_codes():
    app = BasketApp()
    assert app.product_keys == {"r": "R01", "g": "G01", "b": "B01"}


def test_shared_first_letter_leaves_second_product_without_key(delivery_rules, debug_log_path):
    catalogue = ProductCatalogue(
        [
            Product("R01", "Red Widget", Decimal("32.95")),
            Product("R02", "Rose Widget", Decimal("12.00")),
        ]
    )
    app = BasketApp(basket=Basket(catalogue, delivery_rules))
    assert app.product_keys == {"r": "R01"}
    assert app.catalogue_text().plain.splitlines() == [
        "[r] R01 Red Widget  $32.95",
        "[-] R02 Rose Widget  $12.00",
    ]
    assert "app_no_key code='R02' key='r' taken_by='R01'" in debug_log_path.read_text(encoding="utf-8")


@pytest.mark.asyncio
async def test_app_logs_adds_and_totals(debug_log_path):
    app = BasketApp()
    async with app.run_test() as pilot:
        await pilot.press("b", "g")
        await pilot.pause()
        assert app.query_one("#basket-pane").border_title == "Basket"
    log = debug_log_path.read_text(encoding="utf-8")
    assert "app_add code='B01' items=1" in log
    assert "app_add code='G01' items=2" in log
    assert "app_total" in log and "total=37.85" in log
