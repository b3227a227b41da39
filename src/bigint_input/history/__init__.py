"""Generic linear undo/redo history."""

from .timeline import StateHistory, Updater

__all__ = ["StateHistory", "Updater"]
