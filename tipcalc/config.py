"""Runtime configuration defaults for the calculator screen and debug log."""

from __future__ import annotations

# Percent selector range and starting position.
DEFAULT_TIP_PERCENT = 15
MIN_TIP_PERCENT = 0
MAX_TIP_PERCENT = 80
PERCENT_PAGE_STEP = 5

DEFAULT_SPLIT = "1"
CURRENCY_DECIMALS = 2

DEBUG_LOG_PATH = "/tmp/tipcalc-debug.log"
DEBUG_LOG_ENV = "TIPCALC_DEBUG_LOG"
