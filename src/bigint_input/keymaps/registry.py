"""Chord registry routing key presses to registered actions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional

from bigint_input.runtime.telemetry import span

from .models import ActionRef, Binding, KeyStroke


@dataclass(slots=True)
class RegistryStats:
    action_count: int
    binding_count: int
    chords: tuple[str, ...]


class KeymapConflictError(RuntimeError):
    """A binding reuses a chord already bound at the same priority."""

    def __init__(self, binding: Binding, conflicts: Iterable[Binding]):
        self.binding = binding
        self.conflicts = tuple(conflicts)
        ids = ", ".join(conflict.id for conflict in self.conflicts)
        super().__init__(
            f"Binding '{binding.id}' on {binding.key_signature} conflicts with {ids}"
        )


def _rank(binding: Binding) -> tuple[int, str]:
    return (-binding.priority, binding.id)


class KeymapRegistry:
    """Actions by id plus, per chord, the bindings layered on it.

    Several bindings may share a chord as long as their priorities differ;
    the highest priority wins. Equal priorities on one chord are a conflict.
    """

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        # chord token -> bindings, best first
        self._layers: Dict[str, List[Binding]] = {}
        self._logger_name = logger_name

    def get_action(self, action_id: str) -> ActionRef:
        if action_id not in self._actions:
            raise KeyError(f"Action '{action_id}' is not registered")
        return self._actions[action_id]

    def get_binding(self, binding_id: str) -> Binding:
        if binding_id not in self._bindings:
            raise KeyError(f"Binding '{binding_id}' is not registered")
        return self._bindings[binding_id]

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        if action.id in self._actions and not replace:
            raise ValueError(f"Action '{action.id}' already registered")
        self._actions[action.id] = action
        return action

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        """Layer ``binding`` on its chord.

        ``replace`` evicts same-priority bindings on the chord and any earlier
        binding with the same id instead of raising.
        """

        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding": binding.id, "chord": binding.key_signature},
        ) as handle:
            if binding.action_id not in self._actions:
                handle.add_metadata("missing_action", binding.action_id)
                raise KeyError(
                    f"Binding '{binding.id}' needs unknown action '{binding.action_id}'"
                )

            conflicts = self.detect_conflicts(binding)
            if not replace:
                if conflicts:
                    handle.add_metadata("conflicts", [c.id for c in conflicts])
                    raise KeymapConflictError(binding, conflicts)
                if binding.id in self._bindings:
                    raise ValueError(f"Binding id '{binding.id}' already registered")
            for stale in [*conflicts, binding]:
                self.unregister_binding(stale.id)

            self._bindings[binding.id] = binding
            layer = self._layers.setdefault(binding.key_signature, [])
            layer.append(binding)
            layer.sort(key=_rank)
            return binding

    def unregister_binding(self, binding_id: str) -> Optional[Binding]:
        binding = self._bindings.pop(binding_id, None)
        if binding is None:
            return None
        layer = self._layers[binding.key_signature]
        layer.remove(binding)
        if not layer:
            del self._layers[binding.key_signature]
        return binding

    def iter_bindings(self) -> Iterator[Binding]:
        return iter(self._bindings.values())

    def detect_conflicts(self, binding: Binding) -> list[Binding]:
        return [
            other
            for other in self._layers.get(binding.key_signature, ())
            if other.priority == binding.priority and other.id != binding.id
        ]

    def resolve(self, stroke: KeyStroke) -> Optional[ActionRef]:
        """Action of the highest-priority binding on ``stroke``, if any."""

        layer = self._layers.get(stroke.token)
        if not layer:
            return None
        return self._actions[layer[0].action_id]

    def dispatch(self, stroke: KeyStroke) -> bool:
        """Run the action bound to ``stroke``; ``False`` when nothing is bound."""

        action = self.resolve(stroke)
        if action is None:
            return False
        with span(
            "keymaps::dispatch",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"chord": stroke.token, "action": action.id},
        ):
            action()
        return True

    def stats(self) -> RegistryStats:
        return RegistryStats(
            action_count=len(self._actions),
            binding_count=len(self._bindings),
            chords=tuple(sorted(self._layers)),
        )


__all__ = ["KeymapConflictError", "KeymapRegistry", "RegistryStats"]
