"""Event handling for the calculator screen, independent of any widgets."""

from __future__ import annotations

from dataclasses import dataclass

from tipcalc.calculator import calculate_for_input
from tipcalc.config import DEFAULT_SPLIT, DEFAULT_TIP_PERCENT
from tipcalc.data import get_string, invalid_value_message
from tipcalc.debug_log import log_debug
from tipcalc.errors import BILL_FIELD, SPLIT_FIELD, InvalidValueError, ParseError
from tipcalc.models import RawInput, TipResult
from tipcalc.rendering import format_percent_label, format_result
from tipcalc.validation import validate_input


@dataclass(frozen=True)
class PercentChanged:
    """The percent selector moved."""

    percent: int


@dataclass(frozen=True)
class FieldEdited:
    """A text field changed; field is "bill" or "split"."""

    field: str
    text: str


@dataclass(frozen=True)
class CalculateRequested:
    """The user asked for a calculation."""


@dataclass(frozen=True)
class AboutRequested:
    """The user asked for the about text."""


InputEvent = PercentChanged | FieldEdited | CalculateRequested | AboutRequested


@dataclass(frozen=True)
class ViewUpdate:
    """Changes the screen should apply after an event.

    None means "leave as is".
    """

    result_text: str | None = None
    percent_label: str | None = None
    toast: str | None = None
    focus: str | None = None
    dismiss_input: bool = False
    result: TipResult | None = None


class TipController:
    """Owns the current percent and field texts and reacts to input events."""

    def __init__(
        self,
        percent: int = DEFAULT_TIP_PERCENT,
        split_text: str = DEFAULT_SPLIT,
        bill_text: str = "",
    ) -> None:
        self.percent = percent
        self.split_text = split_text
        self.bill_text = bill_text

    def handle(self, event: InputEvent) -> ViewUpdate:
        if isinstance(event, PercentChanged):
            return self._on_percent_changed(event.percent)
        if isinstance(event, FieldEdited):
            return self._on_field_edited(event.field, event.text)
        if isinstance(event, CalculateRequested):
            return self._calculate()
        if isinstance(event, AboutRequested):
            log_debug("about_requested")
            return ViewUpdate(result_text=get_string("about_app"), dismiss_input=True)
        raise TypeError(f"unsupported event {event!r}")

    def _on_percent_changed(self, percent: int) -> ViewUpdate:
        self.percent = percent
        log_debug(f"percent_changed percent={percent}")
        return ViewUpdate(percent_label=format_percent_label(percent))

    def _on_field_edited(self, field: str, text: str) -> ViewUpdate:
        if field == SPLIT_FIELD:
            self.split_text = text
        elif field == BILL_FIELD:
            self.bill_text = text
        else:
            raise ValueError(f"unknown field {field!r}")
        return ViewUpdate()

    def _calculate(self) -> ViewUpdate:
        raw = RawInput(bill_text=self.bill_text, split_text=self.split_text)
        try:
            validated = validate_input(raw)
        except ParseError as exc:
            log_debug(f"calculate_parse_failed field={exc.field} text={exc.text!r}")
            return ViewUpdate(result_text=get_string("tryagain_message"))
        except InvalidValueError as exc:
            log_debug(f"calculate_invalid_value field={exc.field} value={exc.value!r}")
            return ViewUpdate(
                result_text=get_string("tryagain_message"),
                toast=invalid_value_message(exc.field),
                focus=exc.field,
            )

        result = calculate_for_input(validated, self.percent)
        log_debug(f"calculate_done percent={self.percent} tip={result.tip_amount:f}")
        return ViewUpdate(result_text=format_result(result), dismiss_input=True, result=result)
