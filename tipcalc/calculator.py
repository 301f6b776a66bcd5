"""Tip and split arithmetic."""

from __future__ import annotations

from tipcalc.models import TipResult, ValidatedInput


def calculate_tip(bill_total: float, tip_percent: int, party_size: int = 1) -> TipResult:
    """Compute the tip, the total and, for a split bill, each person's share.

    The percent is not clamped here; the selector bounds it.
    """
    tip_amount = bill_total * (tip_percent / 100)
    total_amount = bill_total + tip_amount
    if party_size > 1:
        return TipResult(
            tip_amount=tip_amount,
            total_amount=total_amount,
            party_size=party_size,
            per_person_tip=tip_amount / party_size,
            per_person_total=total_amount / party_size,
        )
    return TipResult(tip_amount=tip_amount, total_amount=total_amount, party_size=party_size)


def calculate_for_input(validated: ValidatedInput, tip_percent: int) -> TipResult:
    """Run calculate_tip for an already validated input."""
    return calculate_tip(validated.bill_total, tip_percent, validated.party_size)
