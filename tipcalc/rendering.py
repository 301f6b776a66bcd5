"""Rendering helpers for the percent label and calculation results."""

from __future__ import annotations

from rich.text import Text

from tipcalc.config import CURRENCY_DECIMALS
from tipcalc.data import get_string
from tipcalc.models import TipResult


def format_percent_label(percent: int) -> str:
    """Return the label shown above the percent selector."""
    return get_string("tip_percent_label", percent)


def format_result(result: TipResult) -> str:
    """Render the singular or plural result message."""
    if result.is_split:
        return get_string(
            "result_plural",
            result.tip_amount,
            result.total_amount,
            result.per_person_tip,
            result.per_person_total,
            CURRENCY_DECIMALS,
        )
    return get_string("result_singular", result.tip_amount, result.total_amount, CURRENCY_DECIMALS)


def format_result_text(result: TipResult) -> Text:
    """Render a result message with the amounts highlighted."""
    text = Text()
    for idx, line in enumerate(format_result(result).splitlines()):
        if idx > 0:
            text.append("\n")
        label, _, amount = line.partition(": ")
        text.append(f"{label}: ")
        text.append(amount, style="bold #5fbf72")
    return text
