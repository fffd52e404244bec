"""A universe of worlds and the process-wide current universe."""

from __future__ import annotations

from dataclasses import dataclass, field

from vang.world import World, WorldId


@dataclass
class PlayerData:
    """Where a player is: which world and which position in it."""

    world: WorldId = 0
    position: tuple[int, int, int] = (0, 0, 0)


class Universe:
    """A seeded collection of worlds and the players that visit them."""

    def __init__(self, seed: str = "") -> None:
        self.seed = seed
        self._worlds: list[World] = []
        self.player_data: dict[str, PlayerData] = field(default_factory=dict) if False else {}

    def create_world(self) -> WorldId:
        """Add an empty world and return its id."""
        self._worlds.append(World())
        return len(self._worlds) - 1

    def get_world(self, world_id: WorldId) -> World:
        """Return the world with the given id; raise IndexError if there is none."""
        if not 0 <= world_id < len(self._worlds):
            raise IndexError(f"no world with id {world_id}")
        return self._worlds[world_id]

    def __len__(self) -> int:
        return len(self._worlds)


_current_universe: Universe | None = None


def create_universe(seed: str) -> Universe:
    """Create a universe from a seed and make it the current one."""
    global _current_universe
    _current_universe = Universe(seed)
    return _current_universe


def get_current_universe() -> Universe | None:
    """Return the current universe, or None before one is created."""
    return _current_universe