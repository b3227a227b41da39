from __future__ import annotations

import asyncio
from typing import List

from textual.app import App, ComposeResult

from bigint_input.adapters.textual import BigIntInput
from bigint_input.masking import PERIOD_DECIMAL


class AmountApp(App[None]):
    def __init__(self, decimals: int, value: int) -> None:
        super().__init__()
        self._decimals = decimals
        self._value = value
        self.changes: List[BigIntInput.ValueChanged] = []

    def compose(self) -> ComposeResult:
        yield BigIntInput(
            self._decimals, self._value, options=PERIOD_DECIMAL, id="amount"
        )

    def on_big_int_input_value_changed(self, event: BigIntInput.ValueChanged) -> None:
        self.changes.append(event)


def test_widget_forces_caret_after_backspace_over_separator() -> None:
    async def scenario() -> tuple[str, int, int]:
        app = AmountApp(0, 1_000_000_000)
        async with app.run_test() as pilot:
            field = app.query_one(BigIntInput)
            field.focus()
            await pilot.pause()
            field.cursor_position = 10
            await pilot.pause()
            await pilot.press("backspace")
            await pilot.pause()
            return field.value, field.cursor_position, field.scaled_value

    assert asyncio.run(scenario()) == ("100,000,000", 7, 100_000_000)


def test_widget_masks_typed_digits_and_posts_value() -> None:
    async def scenario() -> tuple[str, int, List[int]]:
        app = AmountApp(2, 0)
        async with app.run_test() as pilot:
            field = app.query_one(BigIntInput)
            field.focus()
            await pilot.pause()
            for key in "1234":
                await pilot.press(key)
                await pilot.pause()
            values = [event.value for event in app.changes]
            return field.value, field.cursor_position, values

    text, cursor, values = asyncio.run(scenario())

    assert text == "1,234"
    assert cursor == 5
    assert values[-1] == 123_400


def test_widget_undo_shortcut_restores_previous_text() -> None:
    async def scenario() -> str:
        app = AmountApp(2, 0)
        async with app.run_test() as pilot:
            field = app.query_one(BigIntInput)
            field.focus()
            await pilot.pause()
            for key in "12":
                await pilot.press(key)
                await pilot.pause()
            await pilot.press("ctrl+z")
            await pilot.pause()
            return field.value

    assert asyncio.run(scenario()) == "1"
