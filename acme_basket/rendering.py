"""Rendering helpers for products, basket lines and price breakdowns."""

from __future__ import annotations

from decimal import Decimal

from rich.table import Table
from rich.text import Text

from acme_basket.basket import Basket
from acme_basket.config import CURRENCY_SYMBOL
from acme_basket.models import PriceBreakdown, Product


def format_money(amount: Decimal) -> str:
    if amount < 0:
        return f"-{CURRENCY_SYMBOL}{-amount:.2f}"
    return f"{CURRENCY_SYMBOL}{amount:.2f}"


def code_badge_style(code: str) -> str:
    """Return a consistent badge style per product colour."""
    if code.startswith("R"):
        return "bold #ffffff on #b23a48"
    if code.startswith("B"):
        return "bold #ffffff on #2f6db5"
    if code.startswith("G"):
        return "bold #0b1f0f on #5fbf72"
    return "bold"


def format_product_label(product: Product) -> Text:
    """Render a product with a coloured code tag."""
    text = Text()
    text.append(product.code, style=code_badge_style(product.code))
    text.append(f" {product.name}")
    return text


def format_basket_lines(basket: Basket) -> Text:
    """One line per product in the basket, with quantity and line amount."""
    lines = basket.line_counts()
    if not lines:
        return Text("(basket is empty)", style="dim")

    text = Text()
    for idx, (product, quantity) in enumerate(lines):
        if idx > 0:
            text.append("\n")
        text.append(f"{quantity} x ")
        text.append_text(format_product_label(product))
        text.append(f"  {format_money(product.price * quantity)}")
    return text


def breakdown_table(breakdown: PriceBreakdown) -> Table:
    """Subtotal, discount, delivery and total as a two-column table."""
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("label")
    table.add_column("amount", justify="right")
    table.add_row("Subtotal", format_money(breakdown.subtotal))
    if breakdown.discount:
        table.add_row("Offers", format_money(-breakdown.discount), style="green")
    table.add_row("Delivery", format_money(breakdown.delivery))
    table.add_row(Text("Total", style="bold"), Text(format_money(breakdown.total), style="bold"))
    return table
