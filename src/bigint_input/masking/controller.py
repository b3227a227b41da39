"""Keeps a field's masked text, caret and scaled integer value in step."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from bigint_input.runtime import telemetry

from .caret import apply_masked_edit
from .formatting import FormattingOptions, formatting_options
from .state import EditKind, InputState
from .text import (
    format_scaled_value,
    mask,
    parse_scaled_value,
    unmask,
)


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class InputHooks:
    """Callbacks the controller invokes on its host."""

    # (value, masked_text, changed_from_external)
    on_value_change: Callable[[int, str, bool], None] = _noop
    # Host must copy text and caret onto the platform field.
    apply_state: Callable[[InputState], None] = _noop


class InputController:
    """Owns one field's :class:`InputState` and reconciles it with its value.

    Two entry points mutate the state: :meth:`handle_edit` for keystrokes
    coming from the field, and :meth:`sync` for values pushed by the host
    (another field changed, an undo fired, the scale was reconfigured).
    """

    def __init__(
        self,
        decimals: int,
        *,
        value: Optional[int] = None,
        options: Optional[FormattingOptions] = None,
        hooks: Optional[InputHooks] = None,
        name: str = "amount",
    ) -> None:
        if decimals < 0:
            raise ValueError("decimals must be non-negative")
        self.name = name
        self.hooks = hooks or InputHooks()
        self._options = options or formatting_options()
        self._decimals = decimals
        internal = self._display_for(value) if value else ""
        self._state = InputState(internal_value=internal, cursor=len(internal))

    @property
    def state(self) -> InputState:
        return InputState(self._state.internal_value, self._state.cursor)

    @property
    def display_text(self) -> str:
        return self._state.internal_value

    @property
    def cursor(self) -> int:
        return self._state.cursor

    @property
    def decimals(self) -> int:
        return self._decimals

    @property
    def options(self) -> FormattingOptions:
        return self._options

    @property
    def placeholder(self) -> str:
        return f"0{self._options.decimal_separator}00"

    @property
    def value(self) -> int:
        return parse_scaled_value(
            self._numeric_text(), self._decimals, options=self._options
        )

    def handle_edit(
        self,
        raw_text: str,
        cursor: Optional[int],
        edit_kind: EditKind = "insert",
    ) -> InputState:
        """Mask a raw edit from the field and report the resulting value."""

        with telemetry.span(
            "controller::edit",
            component="controller",
            metadata={"field": self.name, "edit_kind": edit_kind},
        ) as handle:
            edit = apply_masked_edit(
                raw_text, cursor, edit_kind, self._decimals, options=self._options
            )
            self._store(InputState(edit.masked_value, edit.cursor))
            value = parse_scaled_value(
                edit.numeric_value, self._decimals, options=self._options
            )
            handle.add_metadata("cursor", edit.cursor)
            self.hooks.on_value_change(value, edit.masked_value, False)
        return self.state

    def sync(self, value: Optional[int] = None, decimals: Optional[int] = None) -> bool:
        """Reconcile with a value and/or scale supplied by the host.

        Returns ``True`` when the displayed text was replaced. A value that
        already matches the current text is ignored, which is what keeps the
        host and the field from notifying each other forever.
        """

        if decimals is not None and decimals < 0:
            raise ValueError("decimals must be non-negative")

        with telemetry.span(
            "controller::sync",
            component="controller",
            metadata={"field": self.name},
        ) as handle:
            if decimals is not None and decimals != self._decimals:
                handle.add_metadata("decimals", decimals)
                self._decimals = decimals

            numeric = self._numeric_text()
            current = parse_scaled_value(numeric, self._decimals, options=self._options)

            if value is None or value == current:
                shown = unmask(self._state.internal_value, options=self._options)
                if numeric == shown:
                    return False
                # Narrower scale cut fractional digits off the displayed text.
                masked = mask(numeric, options=self._options)
                self._replace_text(masked)
                self.hooks.on_value_change(current, masked, True)
                return True

            masked = self._display_for(value) if value else ""
            self._replace_text(masked)
            handle.add_metadata("value", value)
            telemetry.record_event(
                "controller.reconciled",
                level="debug",
                data={"field": self.name, "value": value, "text": masked},
            )
            self.hooks.on_value_change(value, masked, True)
            return True

    def _numeric_text(self) -> str:
        # Re-limit to the current scale; the text may predate a scale change.
        shown = unmask(self._state.internal_value, options=self._options)
        whole, separator, fraction = shown.partition(self._options.decimal_separator)
        return whole + separator + fraction[: self._decimals]

    def _display_for(self, value: int) -> str:
        return mask(
            format_scaled_value(value, self._decimals, options=self._options),
            options=self._options,
        )

    def _replace_text(self, masked: str) -> None:
        # Programmatic change: no user caret, keep the previous offset.
        self._store(InputState(masked, min(self._state.cursor, len(masked))))

    def _store(self, state: InputState) -> None:
        self._state = state
        self.hooks.apply_state(self.state)


__all__ = ["InputController", "InputHooks"]
