"""Keyboard chords routed to registered actions (undo/redo by default)."""

from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .defaults import DEFAULT_BINDINGS, REDO_ACTION, UNDO_ACTION, bind_history_shortcuts

__all__ = [
    "ActionRef",
    "Binding",
    "KeyStroke",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "DEFAULT_BINDINGS",
    "REDO_ACTION",
    "UNDO_ACTION",
    "bind_history_shortcuts",
]
