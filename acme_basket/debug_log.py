"""Append-only debug log shared by the basket and the terminal app."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from acme_basket.config import resolve_debug_log_path


def log_debug(message: str) -> None:
    """Write a timestamped line to the debug log, if one is configured."""
    path = resolve_debug_log_path()
    if path is None:
        return
    try:
        ts = datetime.now(timezone.utc).isoformat()
        log_path = Path(path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with log_path.open("a", encoding="utf-8") as fh:
            fh.write(f"{ts} {message}\n")
    except Exception:
        # Logging must never interfere with pricing or app flow.
        return
