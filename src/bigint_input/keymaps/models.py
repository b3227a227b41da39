"""Dataclasses describing keyboard chords, actions and their bindings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

MODIFIER_ALIASES = {
    "cmd": "meta",
    "command": "meta",
    "super": "meta",
    "control": "ctrl",
    "option": "alt",
}


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = []
    for modifier in modifiers:
        cleaned = modifier.strip().lower()
        if cleaned:
            values.append(MODIFIER_ALIASES.get(cleaned, cleaned))
    return tuple(sorted(dict.fromkeys(values)))


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single normalized chord such as ``ctrl+shift+z``.

    An upper-case letter key is folded to lower case plus ``shift`` so that
    ``ctrl+Z`` and ``ctrl+shift+z`` compare equal.
    """

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        key = self.key
        modifiers = tuple(self.modifiers)
        if len(key) == 1 and key.isalpha() and key.isupper():
            key = key.lower()
            modifiers += ("shift",)
        elif len(key) > 1:
            key = key.lower()
        object.__setattr__(self, "key", key)
        object.__setattr__(self, "modifiers", _normalize_modifiers(modifiers))

    @classmethod
    def parse(cls, chord: str) -> "KeyStroke":
        """Build a stroke from a ``+``-joined chord like ``meta+shift+z``."""

        parts = chord.strip().split("+")
        # A trailing empty part means the key itself is "+".
        if len(parts) > 1 and parts[-1] == "":
            parts = parts[:-2] + ["+"]
        *modifiers, key = parts
        return cls(key=key.strip(), modifiers=tuple(modifiers))

    @property
    def token(self) -> str:
        if self.modifiers:
            return "+".join(self.modifiers) + f"+{self.key}"
        return self.key


@dataclass(frozen=True, slots=True)
class ActionRef:
    """A named handler run when a binding fires."""

    id: str
    handler: Callable[[], object]
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")

    def __call__(self) -> object:
        return self.handler()


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a chord with an action id."""

    id: str
    stroke: KeyStroke
    action_id: str
    description: str = ""
    priority: int = 0

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")

    @property
    def key_signature(self) -> str:
        return self.stroke.token


__all__ = [
    "ActionRef",
    "Binding",
    "KeyStroke",
    "MODIFIER_ALIASES",
]
