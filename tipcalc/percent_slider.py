"""Keyboard-driven percent selector widget."""

from __future__ import annotations

from rich.text import Text
from textual.message import Message
from textual.reactive import reactive
from textual.widget import Widget

from tipcalc.config import DEFAULT_TIP_PERCENT, MAX_TIP_PERCENT, MIN_TIP_PERCENT, PERCENT_PAGE_STEP


class PercentSlider(Widget, can_focus=True):
    """A horizontal bar holding an integer percent within fixed bounds."""

    BINDINGS = [
        ("left", "step(-1)", "Less"),
        ("right", "step(1)", "More"),
        ("pagedown", f"step(-{PERCENT_PAGE_STEP})", "Less x5"),
        ("pageup", f"step({PERCENT_PAGE_STEP})", "More x5"),
        ("home", "jump_to_min", "Min"),
        ("end", "jump_to_max", "Max"),
    ]

    DEFAULT_CSS = """
    PercentSlider {
        height: 1;
        width: 1fr;
    }

    PercentSlider:focus {
        text-style: bold;
    }
    """

    value = reactive(DEFAULT_TIP_PERCENT)

    class Changed(Message):
        """Posted whenever the slider value changes."""

        def __init__(self, slider: PercentSlider, value: int) -> None:
            super().__init__()
            self.slider = slider
            self.value = value

        @property
        def control(self) -> PercentSlider:
            return self.slider

    def __init__(
        self,
        value: int = DEFAULT_TIP_PERCENT,
        *,
        minimum: int = MIN_TIP_PERCENT,
        maximum: int = MAX_TIP_PERCENT,
        id: str | None = None,
    ) -> None:
        super().__init__(id=id)
        self.minimum = minimum
        self.maximum = maximum
        self.set_reactive(PercentSlider.value, self.validate_value(value))

    def validate_value(self, value: int) -> int:
        return max(self.minimum, min(int(value), self.maximum))

    def watch_value(self, value: int) -> None:
        self.post_message(self.Changed(self, value))

    def action_step(self, delta: int) -> None:
        self.value = self.value + delta

    def action_jump_to_min(self) -> None:
        self.value = self.minimum

    def action_jump_to_max(self) -> None:
        self.value = self.maximum

    def render(self) -> Text:
        width = max(1, self.size.width - 2)
        span = max(1, self.maximum - self.minimum)
        filled = round(width * (self.value - self.minimum) / span)
        text = Text("[")
        text.append("━" * filled, style="bold #5fbf72")
        text.append("─" * (width - filled), style="dim")
        text.append("]")
        return text
