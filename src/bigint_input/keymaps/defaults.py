"""Built-in undo/redo chords wired to a :class:`StateHistory`."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from bigint_input.history import StateHistory

from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapRegistry

UNDO_ACTION = "history.undo"
REDO_ACTION = "history.redo"

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    Binding(
        id="history.undo_ctrl",
        stroke=KeyStroke.parse("ctrl+z"),
        action_id=UNDO_ACTION,
        description="Undo",
    ),
    Binding(
        id="history.undo_meta",
        stroke=KeyStroke.parse("meta+z"),
        action_id=UNDO_ACTION,
        description="Undo",
    ),
    Binding(
        id="history.redo_ctrl_shift",
        stroke=KeyStroke.parse("ctrl+shift+z"),
        action_id=REDO_ACTION,
        description="Redo",
    ),
    Binding(
        id="history.redo_meta_shift",
        stroke=KeyStroke.parse("meta+shift+z"),
        action_id=REDO_ACTION,
        description="Redo",
    ),
    Binding(
        id="history.redo_ctrl_y",
        stroke=KeyStroke.parse("ctrl+y"),
        action_id=REDO_ACTION,
        description="Redo",
    ),
)


def bind_history_shortcuts(
    registry: KeymapRegistry,
    history: StateHistory[Any],
    *,
    replace: bool = False,
    exclude_bindings: Sequence[str] | None = None,
    extra_bindings: Iterable[Binding] | None = None,
) -> None:
    """Register undo/redo actions for ``history`` and their default chords."""

    registry.register_action(
        ActionRef(id=UNDO_ACTION, handler=history.undo, description="Undo"),
        replace=replace,
    )
    registry.register_action(
        ActionRef(id=REDO_ACTION, handler=history.redo, description="Redo"),
        replace=replace,
    )

    excluded = set(exclude_bindings or ())
    for binding in DEFAULT_BINDINGS:
        if binding.id in excluded:
            continue
        registry.register_binding(binding, replace=replace)

    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=replace)


__all__ = [
    "DEFAULT_BINDINGS",
    "REDO_ACTION",
    "UNDO_ACTION",
    "bind_history_shortcuts",
]
