"""Textual-shaped bridge between a text field, its controller and history."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from bigint_input.history import StateHistory
from bigint_input.keymaps import KeymapRegistry, KeyStroke, bind_history_shortcuts
from bigint_input.masking import (
    EditKind,
    InputController,
    InputHooks,
    InputState,
    convert_scale,
)

DELETE_KEYS: Dict[str, EditKind] = {
    "backspace": "delete_backward",
    "ctrl+h": "delete_backward",
    "delete": "delete_forward",
}


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    apply_state: Callable[[InputState], None]
    update_value: Callable[[int, str], None] = _noop
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


class TextualInputAdapter:
    """Routes key and change events from a field into the masking engine.

    The adapter owns the value history: user edits are recorded with
    ``history.set`` and undo/redo moves are pushed back into the controller,
    whose equality check keeps the round trip from echoing.
    """

    def __init__(
        self,
        controller: InputController,
        hooks: TextualUIHooks,
        *,
        registry: Optional[KeymapRegistry] = None,
    ) -> None:
        self.controller = controller
        self.hooks = hooks
        self.controller.hooks = InputHooks(
            on_value_change=self._on_value_change,
            apply_state=hooks.apply_state,
        )
        self.history: StateHistory[int] = StateHistory(
            controller.value,
            on_change=self._on_history_change,
            name=controller.name,
        )
        self.registry = registry or KeymapRegistry(logger_name="bigint_input.keymaps")
        bind_history_shortcuts(self.registry, self.history)
        self._edit_kind: EditKind = "insert"

    def handle_key(self, key: str) -> bool:
        """Handle a Textual key name; ``True`` means a shortcut consumed it."""

        self._log_state("key ->", key=key)
        if self.registry.dispatch(KeyStroke.parse(key)):
            position = self.history.index + 1
            self.hooks.update_status(f"history {position}/{len(self.history.entries)}")
            return True
        if key in DELETE_KEYS:
            self.note_edit_kind(DELETE_KEYS[key])
        return False

    def note_edit_kind(self, kind: EditKind) -> None:
        self._edit_kind = kind

    def handle_changed(self, text: str, cursor: Optional[int]) -> Optional[InputState]:
        """Feed a raw field change to the controller.

        Returns ``None`` when ``text`` is the controller's own output being
        echoed back by the widget.
        """

        kind, self._edit_kind = self._edit_kind, "insert"
        if text == self.controller.display_text:
            return None
        state = self.controller.handle_edit(text, cursor, kind)
        self._log_state("edit <-", kind=kind)
        return state

    def set_value(self, value: int) -> None:
        """Impose a value from outside the field; recorded in history."""

        self.history.set(value)

    def set_decimals(self, decimals: int, *, keep_amount: bool = False) -> None:
        """Change the scale of the field.

        By default the scaled integer is kept and re-rendered under the new
        scale. With ``keep_amount`` the displayed amount is kept instead (as
        when switching between tokens of different decimals): the value is
        converted, truncating when the scale narrows, and recorded in history.
        """

        if not keep_amount:
            self.controller.sync(value=self.history.current, decimals=decimals)
        else:
            value = convert_scale(
                self.history.current, self.controller.decimals, decimals
            )
            self.controller.sync(value=value, decimals=decimals)
            self.history.set(value)
        self._log_state("decimals ->")

    def undo(self) -> bool:
        return self.history.undo()

    def redo(self) -> bool:
        return self.history.redo()

    def _on_value_change(
        self, value: int, masked: str, changed_from_external: bool
    ) -> None:
        self.hooks.update_value(value, masked)
        if not changed_from_external:
            self.history.set(value)

    def _on_history_change(self, value: int) -> None:
        self.controller.sync(value=value)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot: Dict[str, object] = {
            "field": self.controller.name,
            "text": self.controller.display_text,
            "cursor": self.controller.cursor,
            "decimals": self.controller.decimals,
            "history_index": self.history.index,
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))


__all__ = ["DELETE_KEYS", "TextualInputAdapter", "TextualUIHooks"]
