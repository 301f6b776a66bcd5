"""Domain models for tipcalc."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RawInput:
    """Unparsed field contents as typed by the user."""

    bill_text: str
    split_text: str


@dataclass(frozen=True)
class ValidatedInput:
    """Parsed input with both values guaranteed positive."""

    bill_total: float
    party_size: int


@dataclass(frozen=True)
class TipResult:
    """Outcome of one tip calculation.

    The per-person fields are only set when the bill is split between more
    than one person.
    """

    tip_amount: float
    total_amount: float
    party_size: int = 1
    per_person_tip: float | None = None
    per_person_total: float | None = None

    @property
    def is_split(self) -> bool:
        return self.party_size > 1
