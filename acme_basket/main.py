"""Entry point for the acme-basket app."""

from __future__ import annotations

import argparse
import sys

from rich.console import Console

from acme_basket.basket_app import BasketApp
from acme_basket.data import new_basket
from acme_basket.debug_log import log_debug
from acme_basket.errors import ProductNotFoundError
from acme_basket.rendering import breakdown_table, format_basket_lines


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="acme-basket", description="Acme Widget Co. basket pricing.")
    parser.add_argument("codes", nargs="*", help="product codes to put in the basket")
    parser.add_argument(
        "--summary",
        action="store_true",
        help="print the priced basket and exit instead of starting the app",
    )
    return parser


def print_summary(codes: list[str], console: Console | None = None) -> int:
    """Price a basket of codes and print it. Returns a process exit code."""
    console = console or Console()
    basket = new_basket()
    try:
        for code in codes:
            basket.add(code)
    except ProductNotFoundError as exc:
        log_debug(f"summary_add_failed code={exc.code!r}")
        console.print(f"[bold red]Error:[/] {exc}")
        return 1

    console.print(format_basket_lines(basket))
    console.print()
    breakdown = basket.breakdown()
    log_debug(f"summary_total items={len(basket)} total={breakdown.total}")
    console.print(breakdown_table(breakdown))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the Textual application, or print a summary with --summary."""
    args = _build_parser().parse_args(argv)
    if args.summary:
        return print_summary(args.codes)
    BasketApp(initial_codes=args.codes).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
