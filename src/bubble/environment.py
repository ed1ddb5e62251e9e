"""Variable store for one Bubble session."""

from __future__ import annotations

from dataclasses import dataclass, field

from .values import Value


@dataclass
class Environment:
    """Holds every variable bound during a session.

    Each session owns its own instance; nothing is shared between them.
    """

    variables: dict[str, Value] = field(default_factory=dict)

    def set(self, name: str, value: Value) -> None:
        self.variables[name] = value

    def get(self, name: str) -> Value | None:
        """The bound value, or ``None`` when *name* was never assigned."""
        return self.variables.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self.variables

    def clear(self) -> None:
        self.variables.clear()
