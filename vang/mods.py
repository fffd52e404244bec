"""Mods, identified by name, and the registry that holds them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Mod:
    """A mod; two mods are equal when their names are."""

    name: str


class ModManager:
    """Keeps the list of known mods."""

    def __init__(self) -> None:
        self._mods: list[Mod] = []
        self.initialized = False

    def initialize(self) -> bool:
        """Start the manager; always succeeds."""
        self.initialized = True
        return True

    def deinitialize(self) -> bool:
        """Stop the manager; always succeeds."""
        self.initialized = False
        return True

    def add_mod(self, mod: Mod) -> None:
        """Register a mod."""
        self._mods.append(mod)

    def remove_mod(self, mod: Mod) -> None:
        """Forget a mod if it is registered."""
        if mod in self._mods:
            self._mods.remove(mod)

    def __len__(self) -> int:
        return len(self._mods)

    def __iter__(self) -> Iterator[Mod]:
        return iter(self._mods)

    def __contains__(self, mod: object) -> bool:
        return mod in self._mods