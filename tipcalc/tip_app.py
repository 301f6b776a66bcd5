"""Main Textual app class."""

from __future__ import annotations

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Footer, Header, Input, Static

from tipcalc.config import DEFAULT_SPLIT, DEFAULT_TIP_PERCENT
from tipcalc.controller import (
    AboutRequested,
    CalculateRequested,
    FieldEdited,
    PercentChanged,
    TipController,
    ViewUpdate,
)
from tipcalc.data import get_string
from tipcalc.debug_log import log_debug
from tipcalc.errors import BILL_FIELD, SPLIT_FIELD
from tipcalc.percent_slider import PercentSlider
from tipcalc.rendering import format_percent_label, format_result_text

_INPUT_ID_BY_FIELD = {
    SPLIT_FIELD: "split-input",
    BILL_FIELD: "bill-input",
}
_FIELD_BY_INPUT_ID = {input_id: field for field, input_id in _INPUT_ID_BY_FIELD.items()}


class TipCalculatorApp(App):
    """A single-screen tip and split calculator."""

    TITLE = get_string("app_title")
    SUB_TITLE = get_string("app_subtitle")

    CSS = """
    Screen {
        layout: vertical;
    }

    #form-pane {
        height: auto;
        border: round $primary;
        padding: 1;
    }

    #tip-percent-label {
        text-style: bold;
        margin-bottom: 1;
    }

    #percent-slider {
        margin-bottom: 1;
    }

    .field-row {
        height: auto;
        margin-bottom: 1;
    }

    .field-label {
        width: 16;
        padding: 1 1 0 0;
    }

    .field-row Input {
        width: 1fr;
    }

    #calculate-button {
        width: 100%;
    }

    #result-pane {
        height: 1fr;
        border: round $secondary;
        padding: 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+r", "calculate", "Calculate", priority=True),
        ("f1", "about", "About"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, controller: TipController | None = None) -> None:
        super().__init__()
        self.controller = controller or TipController()
        self.result_message = get_string("initial_prompt")
        log_debug("app_init")

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="form-pane"):
            yield Static(format_percent_label(self.controller.percent), id="tip-percent-label")
            yield PercentSlider(self.controller.percent, id="percent-slider")
            with Horizontal(classes="field-row"):
                yield Static(get_string("split_label"), classes="field-label")
                yield Input(value=self.controller.split_text, id="split-input")
            with Horizontal(classes="field-row"):
                yield Static(get_string("bill_label"), classes="field-label")
                yield Input(value=self.controller.bill_text, placeholder="0.00", id="bill-input")
            yield Button(get_string("calculate_button"), variant="primary", id="calculate-button")
        with Vertical(id="result-pane"):
            yield Static(self.result_message, id="result")
        yield Footer()

    def on_mount(self) -> None:
        # The slider clamps its starting value; keep the controller in step with it.
        slider = self.query_one("#percent-slider", PercentSlider)
        self._apply(self.controller.handle(PercentChanged(slider.value)))
        self.query_one("#bill-input", Input).focus()
        log_debug(
            f"app_ready percent={self.controller.percent} split={self.controller.split_text!r}"
        )

    def on_percent_slider_changed(self, event: PercentSlider.Changed) -> None:
        self._apply(self.controller.handle(PercentChanged(event.value)))

    def on_input_changed(self, event: Input.Changed) -> None:
        field = _FIELD_BY_INPUT_ID.get(event.input.id or "")
        if field is None:
            return
        self._apply(self.controller.handle(FieldEdited(field, event.value)))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.action_calculate()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "calculate-button":
            event.stop()
            self.action_calculate()

    def action_calculate(self) -> None:
        self._apply(self.controller.handle(CalculateRequested()))

    def action_about(self) -> None:
        self._apply(self.controller.handle(AboutRequested()))

    def _apply(self, update: ViewUpdate) -> None:
        if update.percent_label is not None:
            self.query_one("#tip-percent-label", Static).update(update.percent_label)

        if update.result_text is not None:
            self.result_message = update.result_text
            result_widget = self.query_one("#result", Static)
            if update.result is not None:
                result_widget.update(format_result_text(update.result))
            else:
                result_widget.update(update.result_text)

        if update.toast is not None:
            self.notify(update.toast, severity="warning")

        if update.focus is not None:
            self.query_one(f"#{_INPUT_ID_BY_FIELD[update.focus]}", Input).focus()
        elif update.dismiss_input:
            # Move focus off the text fields so the result is in view.
            self.set_focus(None)


def create_app(
    percent: int = DEFAULT_TIP_PERCENT,
    split_text: str = DEFAULT_SPLIT,
    bill_text: str = "",
) -> TipCalculatorApp:
    """Build an app with the given starting values."""
    return TipCalculatorApp(TipController(percent=percent, split_text=split_text, bill_text=bill_text))
