"""Runtime configuration defaults for logging and display."""

from __future__ import annotations

import os

DEBUG_LOG_PATH = "/tmp/acme-basket-debug.log"
CURRENCY_SYMBOL = "$"

_DEBUG_LOG_ENV = "ACME_BASKET_DEBUG_LOG"


def resolve_debug_log_path() -> str | None:
    """
    Resolve where debug lines are written.

    Resolution order:
    1. ACME_BASKET_DEBUG_LOG (if set; an empty value disables logging)
    2. DEBUG_LOG_PATH
    """
    override = os.environ.get(_DEBUG_LOG_ENV)
    if override is None:
        return DEBUG_LOG_PATH
    override = override.strip()
    return override or None
