"""A small counter value."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Foo:
    """Holds one integer that can be raised or lowered."""

    bar: int

    def add(self, amount: int) -> None:
        """Raise the value by ``amount``."""
        self.bar += amount

    def subtract(self, amount: int) -> None:
        """Lower the value by ``amount``."""
        self.bar -= amount

    def render(self) -> str:
        """The value on its own line."""
        return f"{self.bar}\n"