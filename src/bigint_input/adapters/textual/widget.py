"""Textual ``Input`` that keeps its text masked and bound to a scaled integer."""

from __future__ import annotations

from typing import Optional

from textual import events, on
from textual.message import Message
from textual.widgets import Input

from bigint_input.keymaps import KeymapRegistry
from bigint_input.masking import FormattingOptions, InputController, InputState

from .controller import TextualInputAdapter, TextualUIHooks


class BigIntInput(Input):
    """Amount field whose text always round-trips to an ``int`` value."""

    class ValueChanged(Message):
        """Posted after every accepted edit, undo/redo or reconciliation."""

        def __init__(self, input: "BigIntInput", value: int, text: str) -> None:
            super().__init__()
            self.input = input
            self.value = value
            self.text = text

        @property
        def control(self) -> "BigIntInput":
            return self.input

    def __init__(
        self,
        decimals: int,
        value: Optional[int] = None,
        *,
        options: Optional[FormattingOptions] = None,
        registry: Optional[KeymapRegistry] = None,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        controller = InputController(
            decimals, value=value, options=options, name=id or name or "amount"
        )
        super().__init__(
            value=controller.display_text,
            placeholder=controller.placeholder,
            name=name,
            id=id,
            classes=classes,
        )
        self.adapter = TextualInputAdapter(
            controller,
            TextualUIHooks(
                apply_state=self._apply_state,
                update_value=self._post_value,
            ),
            registry=registry,
        )

    @property
    def scaled_value(self) -> int:
        return self.adapter.controller.value

    def set_scaled_value(self, value: int) -> None:
        self.adapter.set_value(value)

    def set_decimals(self, decimals: int, *, keep_amount: bool = False) -> None:
        self.adapter.set_decimals(decimals, keep_amount=keep_amount)

    async def _on_key(self, event: events.Key) -> None:
        if self.adapter.handle_key(event.key):
            event.prevent_default()
            event.stop()
            return
        await super()._on_key(event)

    def action_delete_left(self) -> None:
        self.adapter.note_edit_kind("delete_backward")
        super().action_delete_left()

    def action_delete_right(self) -> None:
        self.adapter.note_edit_kind("delete_forward")
        super().action_delete_right()

    @on(Input.Changed)
    def _sync_masked_text(self, event: Input.Changed) -> None:
        if event.input is not self:
            return
        self.adapter.handle_changed(event.value, self.cursor_position)

    def _apply_state(self, state: InputState) -> None:
        # The engine owns the caret: re-masking invalidates the widget's own.
        self.value = state.internal_value
        self.cursor_position = state.cursor

    def _post_value(self, value: int, text: str) -> None:
        self.post_message(self.ValueChanged(self, value, text))


__all__ = ["BigIntInput"]
