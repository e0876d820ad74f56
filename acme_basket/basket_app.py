"""Textual app for building a basket and watching its price."""

from __future__ import annotations

from collections.abc import Iterable

from rich.console import Group
from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.widgets import Header, Static

from acme_basket.basket import Basket
from acme_basket.catalogue import ProductCatalogue
from acme_basket.data import new_basket, shortcut_for_code
from acme_basket.debug_log import log_debug
from acme_basket.errors import ProductNotFoundError
from acme_basket.rendering import breakdown_table, format_basket_lines, format_money, format_product_label


class BasketApp(App):
    """Press a product's key to drop it in the basket; totals update live."""

    TITLE = "Acme Widget Co."
    SUB_TITLE = "Basket"

    CSS = """
    #basket-pane {
        width: 3fr;
        border: round $primary;
        padding: 0 1;
    }

    #summary-pane {
        width: 2fr;
        border: round $secondary;
        padding: 0 1;
    }

    #status-bar {
        height: 4;
        margin-bottom: 1;
    }

    #catalogue {
        height: auto;
        margin-bottom: 1;
    }
    """

    BINDINGS = [
        ("ctrl+n", "new_basket", "New basket"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, basket: Basket | None = None, initial_codes: Iterable[str] = ()) -> None:
        super().__init__()
        self.basket = basket if basket is not None else new_basket()
        self.system_status = ""
        self.product_keys = self._build_product_keys(self.basket.catalogue)
        for code in initial_codes:
            self.add_product(code)
        log_debug(f"app_init items={len(self.basket)}")

    @staticmethod
    def _build_product_keys(catalogue: ProductCatalogue) -> dict[str, str]:
        product_keys: dict[str, str] = {}
        for code in catalogue.codes:
            key = shortcut_for_code(code)
            if key in product_keys:
                # First product wins a shared letter.
                log_debug(f"app_no_key code={code!r} key={key!r} taken_by={product_keys[key]!r}")
                continue
            product_keys[key] = code
        return product_keys

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            with Vertical(id="basket-pane"):
                yield Static(id="basket-lines")
            with Vertical(id="summary-pane"):
                yield Static(id="status-bar")
                yield Static(id="catalogue")
                yield Static(id="breakdown")

    def on_mount(self) -> None:
        self.query_one("#basket-pane", Vertical).border_title = "Basket"
        self._refresh_all()

    def on_key(self, event: Key) -> None:
        if not event.is_printable or not event.character or not event.character.isalnum():
            return

        key = event.character.lower()
        code = self.product_keys.get(key)
        if code is None:
            self.system_status = f"No product on key {key!r}"
            self._refresh_status()
            event.stop()
            return

        self.add_product(code)
        self._refresh_all()
        event.stop()

    def add_product(self, code: str) -> bool:
        """Add a product by code, reporting unknown codes in the status bar."""
        try:
            self.basket.add(code)
        except ProductNotFoundError as exc:
            self.system_status = str(exc)
            log_debug(f"app_add_failed code={code!r} error={exc!r}")
            return False
        product = self.basket.catalogue.find_product(code)
        self.system_status = f"Added {product.name}" if product is not None else f"Added {code}"
        log_debug(f"app_add code={code!r} items={len(self.basket)}")
        return True

    def action_new_basket(self) -> None:
        self.basket = Basket(self.basket.catalogue, self.basket.delivery_rules, self.basket.offers)
        self.system_status = "Started a new basket"
        log_debug("app_new_basket")
        self._refresh_all()

    def _refresh_all(self) -> None:
        self._refresh_lines()
        self._refresh_catalogue()
        self._refresh_status()
        self._refresh_breakdown()

    def _refresh_lines(self) -> None:
        try:
            widget = self.query_one("#basket-lines", Static)
        except NoMatches:
            return
        widget.update(format_basket_lines(self.basket))

    def _refresh_catalogue(self) -> None:
        try:
            widget = self.query_one("#catalogue", Static)
        except NoMatches:
            return
        widget.update(self.catalogue_text())

    def catalogue_text(self) -> Text:
        """Every catalogue product with its key; products sharing a taken letter show [-]."""
        keys_by_code = {code: key for key, code in self.product_keys.items()}
        text = Text()
        for idx, product in enumerate(self.basket.catalogue):
            if idx > 0:
                text.append("\n")
            key = keys_by_code.get(product.code)
            if key is None:
                text.append("[-] ", style="dim")
            else:
                text.append(f"[{key}] ", style="bold")
            text.append_text(format_product_label(product))
            text.append(f"  {format_money(product.price)}")
        return text

    def _refresh_status(self) -> None:
        try:
            widget = self.query_one("#status-bar", Static)
        except NoMatches:
            return
        status = self.system_status or "Ready"
        widget.update(f"Press a product key to add it. Ctrl+N new basket. Ctrl+Q quit.\n{status}")

    def _refresh_breakdown(self) -> None:
        try:
            widget = self.query_one("#breakdown", Static)
        except NoMatches:
            return

        offers = Text()
        for idx, offer in enumerate(self.basket.offers):
            if idx > 0:
                offers.append("\n")
            offers.append(f"• {offer.describe()}", style="dim")
        breakdown = self.basket.breakdown()
        log_debug(
            f"app_total subtotal={breakdown.subtotal} discount={breakdown.discount} "
            f"delivery={breakdown.delivery} total={breakdown.total}"
        )
        widget.update(Group(breakdown_table(breakdown), Text(""), offers))
