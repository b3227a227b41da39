"""Masked fixed-point text input engine with linear undo/redo history."""

__all__ = [
    "adapters",
    "history",
    "keymaps",
    "masking",
    "runtime",
]

__version__ = "0.1.0"
