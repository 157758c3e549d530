"""Key stroke to command bindings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from tedit.runtime.telemetry import span

from .models import Command, InsertChar

CommandFactory = Callable[[], Command]
TEXT_BLOCKING_MODIFIERS = frozenset({"ctrl", "alt", "meta"})


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


@dataclass(frozen=True, slots=True)
class KeyStroke:
    """Single normalized key press."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "key", self.key.lower())
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @property
    def token(self) -> str:
        if self.modifiers:
            modifier = "+".join(self.modifiers)
            return f"{modifier}+{self.key}"
        return self.key

    @classmethod
    def parse(cls, value: str) -> "KeyStroke":
        """Build a stroke from ``"ctrl+s"``-style text."""

        if value == "+":
            return cls("+")
        *modifiers, key = value.split("+")
        return cls(key, tuple(modifiers))


@dataclass(frozen=True, slots=True)
class KeyBinding:
    """Associates a key stroke with the command it produces."""

    id: str
    stroke: KeyStroke
    command: CommandFactory
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not callable(self.command):
            raise TypeError("command must be callable")


class KeymapConflictError(RuntimeError):
    """Raised when a new binding claims a stroke that is already bound."""

    def __init__(self, binding: KeyBinding, existing: KeyBinding):
        super().__init__(
            f"Binding '{binding.id}' conflicts with '{existing.id}' "
            f"on {binding.stroke.token!r}"
        )
        self.binding = binding
        self.existing = existing


class KeymapRegistry:
    """Owns key bindings and decodes key presses into commands."""

    def __init__(self, *, logger_name: str | None = "tedit.keymaps") -> None:
        self._bindings: Dict[str, KeyBinding] = {}
        self._logger_name = logger_name

    def __len__(self) -> int:
        return len(self._bindings)

    def register_binding(
        self, binding: KeyBinding, *, replace: bool = False
    ) -> KeyBinding:
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "stroke": binding.stroke.token},
        ):
            existing = self._bindings.get(binding.stroke.token)
            if existing is not None and not replace:
                raise KeymapConflictError(binding, existing)
            self._bindings[binding.stroke.token] = binding
            return binding

    def unregister(self, stroke: KeyStroke) -> Optional[KeyBinding]:
        return self._bindings.pop(stroke.token, None)

    def resolve(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> Optional[Command]:
        """Return the command for a key press, or ``None`` if it means nothing.

        Unbound presses carrying a single printable character become
        :class:`InsertChar`, unless a control modifier is held.
        """

        modifiers = tuple(modifiers)
        stroke = KeyStroke(key, modifiers) if modifiers else KeyStroke.parse(key)
        binding = self._bindings.get(stroke.token)
        if binding is not None:
            return binding.command()
        if TEXT_BLOCKING_MODIFIERS.intersection(stroke.modifiers):
            return None
        if text is not None and len(text) == 1 and text.isprintable():
            return InsertChar(text)
        return None


__all__ = [
    "CommandFactory",
    "KeyBinding",
    "KeyStroke",
    "KeymapConflictError",
    "KeymapRegistry",
]
