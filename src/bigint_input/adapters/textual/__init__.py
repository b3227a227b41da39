"""Textual host binding: adapter, masked input widget and demo app."""

from .controller import DELETE_KEYS, TextualInputAdapter, TextualUIHooks
from .widget import BigIntInput

__all__ = ["BigIntInput", "DELETE_KEYS", "TextualInputAdapter", "TextualUIHooks"]
