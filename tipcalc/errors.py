"""Input errors raised while reading the bill and split fields."""

from __future__ import annotations

SPLIT_FIELD = "split"
BILL_FIELD = "bill"


class TipCalcError(Exception):
    """Base class for calculator input errors."""


class ParseError(TipCalcError, ValueError):
    """A field does not hold a well-formed number."""

    def __init__(self, field: str, text: str) -> None:
        super().__init__(f"{field} value {text!r} is not a valid number")
        self.field = field
        self.text = text


class InvalidValueError(TipCalcError, ValueError):
    """A field holds a number that is zero or negative."""

    def __init__(self, field: str, value: float) -> None:
        super().__init__(f"{field} value {value!r} must be greater than zero")
        self.field = field
        self.value = value
