"""String table lookup."""

from __future__ import annotations

from tipcalc.constant import INVALID_VALUE_STRING_BY_FIELD, STRINGS


def get_string(string_id: str, *args: object) -> str:
    """Look up a string by id and fill its positional placeholders."""
    template = STRINGS[string_id]
    if not args:
        return template
    return template.format(*args)


def invalid_value_message(field: str) -> str:
    """Return the advisory text for a field that failed the range check."""
    return get_string(INVALID_VALUE_STRING_BY_FIELD[field])
