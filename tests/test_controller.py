"""Tests for the event controller driving the calculator screen."""

import pytest

from tipcalc.constant import STRINGS
from tipcalc.controller import (
    AboutRequested,
    CalculateRequested,
    FieldEdited,
    PercentChanged,
    TipController,
    ViewUpdate,
)


def _controller(bill: str, split: str, percent: int) -> TipController:
    controller = TipController()
    controller.handle(FieldEdited("bill", bill))
    controller.handle(FieldEdited("split", split))
    controller.handle(PercentChanged(percent))
    return controller


class TestDefaults:
    def test_initial_state(self):
        controller = TipController()
        assert controller.percent == 15
        assert controller.split_text == "1"
        assert controller.bill_text == ""

    def test_calculating_with_empty_bill_asks_to_try_again(self):
        update = TipController().handle(CalculateRequested())
        assert update.result_text == STRINGS["tryagain_message"]
        assert update.result is None


class TestEvents:
    def test_percent_change_updates_label(self):
        controller = TipController()
        update = controller.handle(PercentChanged(22))
        assert controller.percent == 22
        assert update == ViewUpdate(percent_label="Tip: 22%")

    def test_field_edits_are_stored(self):
        controller = TipController()
        assert controller.handle(FieldEdited("bill", "12.5")) == ViewUpdate()
        controller.handle(FieldEdited("split", "3"))
        assert controller.bill_text == "12.5"
        assert controller.split_text == "3"

    def test_unknown_field(self):
        with pytest.raises(ValueError):
            TipController().handle(FieldEdited("tax", "1"))

    def test_unknown_event(self):
        with pytest.raises(TypeError):
            TipController().handle("calculate")

    def test_about(self):
        update = TipController().handle(AboutRequested())
        assert update.result_text == STRINGS["about_app"]
        assert update.dismiss_input


class TestScenarios:
    def test_single_payer(self):
        update = _controller("50.00", "1", 15).handle(CalculateRequested())
        assert update.result_text == "Tip: $7.50\nTotal: $57.50"
        assert update.result.per_person_tip is None
        assert update.toast is None
        assert update.focus is None
        assert update.dismiss_input

    def test_split_between_four(self):
        update = _controller("100.00", "4", 20).handle(CalculateRequested())
        assert update.result.tip_amount == pytest.approx(20.0)
        assert update.result.total_amount == pytest.approx(120.0)
        assert update.result.per_person_tip == pytest.approx(5.0)
        assert update.result.per_person_total == pytest.approx(30.0)
        assert "Total per person: $30.00" in update.result_text

    def test_non_numeric_bill(self):
        update = _controller("abc", "1", 15).handle(CalculateRequested())
        assert update.result_text == STRINGS["tryagain_message"]
        assert update.toast is None
        assert update.focus is None

    def test_zero_split_focuses_split(self):
        update = _controller("50.00", "0", 15).handle(CalculateRequested())
        assert update.toast == STRINGS["invalid_split_val"]
        assert update.focus == "split"
        assert update.result is None
        assert not update.dismiss_input

    def test_negative_bill_focuses_bill(self):
        update = _controller("-5", "2", 15).handle(CalculateRequested())
        assert update.toast == STRINGS["invalid_bill_val"]
        assert update.focus == "bill"

    def test_oversized_split_asks_to_try_again(self):
        update = _controller("50", "1" + "0" * 400, 15).handle(CalculateRequested())
        assert update.result_text == STRINGS["tryagain_message"]
        assert update.result is None

    def test_huge_bill_focuses_bill(self):
        update = _controller("1.7e308", "1", 15).handle(CalculateRequested())
        assert update.toast == STRINGS["invalid_bill_val"]
        assert update.focus == "bill"

    def test_recalculation_is_stable(self):
        controller = _controller("64.20", "3", 17)
        first = controller.handle(CalculateRequested())
        second = controller.handle(CalculateRequested())
        assert first == second

    def test_percent_read_at_calculation_time(self):
        controller = _controller("100", "1", 10)
        controller.handle(PercentChanged(25))
        update = controller.handle(CalculateRequested())
        assert update.result.tip_amount == pytest.approx(25.0)

    def test_recovers_after_failure(self):
        controller = _controller("abc", "2", 10)
        controller.handle(CalculateRequested())
        controller.handle(FieldEdited("bill", "30"))
        update = controller.handle(CalculateRequested())
        assert update.result.per_person_total == pytest.approx(16.5)
