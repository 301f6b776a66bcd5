"""Append-only debug log for tracing UI events."""

from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path

from tipcalc.config import DEBUG_LOG_ENV, DEBUG_LOG_PATH


def resolve_debug_log_path() -> Path:
    """Return the debug log location, honoring the environment override."""
    override = os.environ.get(DEBUG_LOG_ENV, "").strip()
    return Path(override or DEBUG_LOG_PATH)


def log_debug(message: str) -> None:
    """Write one timestamped line to the debug log."""
    try:
        path = resolve_debug_log_path()
        ts = datetime.now(timezone.utc).isoformat()
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as fh:
            fh.write(f"{ts} {message}\n")
    except OSError:
        # Logging must never interfere with app flow.
        return
