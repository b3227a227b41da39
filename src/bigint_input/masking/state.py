"""Transient per-field state exchanged between the controller and its host."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

EditKind = Literal["insert", "delete_backward", "delete_forward", "replace"]


@dataclass(slots=True)
class InputState:
    """Displayed (masked) text plus the caret offset into it."""

    internal_value: str = ""
    cursor: int = 0


@dataclass(frozen=True, slots=True)
class MaskedEdit:
    """Outcome of masking a single raw edit."""

    numeric_value: str
    masked_value: str
    cursor: int


__all__ = ["EditKind", "InputState", "MaskedEdit"]
