"""Shared fixtures for tipcalc tests."""

from __future__ import annotations

import pytest

from tipcalc.config import DEBUG_LOG_ENV


@pytest.fixture(autouse=True)
def debug_log_path(tmp_path, monkeypatch):
    """Send the debug log to a per-test file."""
    path = tmp_path / "tipcalc-debug.log"
    monkeypatch.setenv(DEBUG_LOG_ENV, str(path))
    return path
