"""Parsing and range checks for the bill and split fields."""

from __future__ import annotations

import math
import re

from tipcalc.config import MAX_TIP_PERCENT
from tipcalc.errors import BILL_FIELD, SPLIT_FIELD, InvalidValueError, ParseError
from tipcalc.models import RawInput, ValidatedInput

# Plain ASCII numerals only: no digit separators, no other scripts.
_INT_PATTERN = re.compile(r"[+-]?[0-9]+", re.ASCII)
_FLOAT_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?", re.ASCII)


def _parse_int(field: str, text: str) -> int:
    stripped = text.strip()
    if not _INT_PATTERN.fullmatch(stripped):
        raise ParseError(field, text)
    try:
        value = int(stripped)
        # The split divides float amounts, so it has to fit in a float.
        float(value)
    except (ValueError, OverflowError) as exc:
        raise ParseError(field, text) from exc
    return value


def _parse_float(field: str, text: str) -> float:
    stripped = text.strip()
    if not _FLOAT_PATTERN.fullmatch(stripped):
        raise ParseError(field, text)
    value = float(stripped)
    if not math.isfinite(value):
        raise ParseError(field, text)
    return value


def parse_raw_input(raw: RawInput) -> tuple[int, float]:
    """Parse the split as an integer and the bill as a real number.

    Raises ParseError for the first field that is not a well-formed number.
    """
    party_size = _parse_int(SPLIT_FIELD, raw.split_text)
    bill_total = _parse_float(BILL_FIELD, raw.bill_text)
    return party_size, bill_total


def check_ranges(party_size: int, bill_total: float) -> ValidatedInput:
    """Reject out-of-range values, split first, tagging the offending field.

    A bill is out of range when it is not positive or when adding the
    largest tip would overflow.
    """
    if party_size <= 0:
        raise InvalidValueError(SPLIT_FIELD, party_size)
    if bill_total <= 0:
        raise InvalidValueError(BILL_FIELD, bill_total)
    # The total at the highest selectable tip must stay finite.
    if not math.isfinite(bill_total * (1 + MAX_TIP_PERCENT / 100)):
        raise InvalidValueError(BILL_FIELD, bill_total)
    return ValidatedInput(bill_total=bill_total, party_size=party_size)


def validate_input(raw: RawInput) -> ValidatedInput:
    """Parse and range-check both fields."""
    party_size, bill_total = parse_raw_input(raw)
    return check_ranges(party_size, bill_total)
