"""Linear undo/redo history over an arbitrary value."""

from __future__ import annotations

import operator
from typing import Callable, Generic, List, Optional, Tuple, TypeVar, Union

from bigint_input.runtime import telemetry

T = TypeVar("T")

Updater = Callable[[T], T]


class StateHistory(Generic[T]):
    """Single-timeline history: setting after an undo discards the redo branch.

    ``entries`` is never empty and ``0 <= index < len(entries)`` always holds.
    """

    def __init__(
        self,
        initial: T,
        *,
        equals: Callable[[T, T], bool] = operator.eq,
        on_change: Optional[Callable[[T], None]] = None,
        name: str = "history",
    ) -> None:
        self.name = name
        self._entries: List[T] = [initial]
        self._index: int = 0
        self._equals = equals
        self._on_change = on_change

    @property
    def current(self) -> T:
        return self._entries[self._index]

    @property
    def index(self) -> int:
        return self._index

    @property
    def entries(self) -> Tuple[T, ...]:
        return tuple(self._entries)

    def can_undo(self) -> bool:
        return self._index > 0

    def can_redo(self) -> bool:
        return self._index < len(self._entries) - 1

    def set(self, value: Union[T, Updater[T]]) -> bool:
        """Record ``value`` (or ``value(current)`` for callables).

        Returns ``False`` without touching the history when the new value
        equals the current one.
        """

        new_value = value(self.current) if callable(value) else value
        if self._equals(new_value, self.current):
            return False
        del self._entries[self._index + 1 :]
        self._entries.append(new_value)
        self._index = len(self._entries) - 1
        self._notify("set")
        return True

    def undo(self) -> bool:
        if not self.can_undo():
            return False
        self._index -= 1
        self._notify("undo")
        return True

    def redo(self) -> bool:
        if not self.can_redo():
            return False
        self._index += 1
        self._notify("redo")
        return True

    def _notify(self, action: str) -> None:
        telemetry.record_event(
            f"history.{action}",
            level="debug",
            data={
                "history": self.name,
                "index": self._index,
                "size": len(self._entries),
            },
        )
        if self._on_change is not None:
            self._on_change(self.current)


__all__ = ["StateHistory", "Updater"]
