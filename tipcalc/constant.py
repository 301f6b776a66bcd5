"""Editable user-facing string table."""

from __future__ import annotations

STRINGS: dict[str, str] = {
    "app_title": "Tip Calculator",
    "app_subtitle": "Tip / Split",
    "initial_prompt": "Enter the bill total, split and percentage.",
    "tip_percent_label": "Tip: {0}%",
    "split_label": "Split between",
    "bill_label": "Bill total",
    "calculate_button": "Calculate",
    "result_singular": "Tip: ${0:.{2}f}\nTotal: ${1:.{2}f}",
    "result_plural": (
        "Tip: ${0:.{4}f}\nTotal: ${1:.{4}f}\n"
        "Tip per person: ${2:.{4}f}\nTotal per person: ${3:.{4}f}"
    ),
    "tryagain_message": "That didn't work. Check the bill total and split, then try again.",
    "invalid_split_val": "The split must be at least 1 person.",
    "invalid_bill_val": "The bill total must be more than zero.",
    "about_app": (
        "Tip Calculator\n"
        "Move the slider to pick a tip percentage, enter the bill total and how many "
        "people are splitting it, then press Calculate."
    ),
}

# Advisory string shown for each field that failed the range check.
INVALID_VALUE_STRING_BY_FIELD: dict[str, str] = {
    "split": "invalid_split_val",
    "bill": "invalid_bill_val",
}
