"""Spherical entities and the manager that holds them."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass
class Entity:
    """A sphere in the world."""

    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    radius: float = 0.0
    dirty: bool = False


class EntityManager:
    """Owns all entities, addressed by the id returned when they are created."""

    def __init__(self) -> None:
        self._entities: list[Entity] = []
        self.dirty = True

    @property
    def entities(self) -> list[Entity]:
        """The entity list; handing it out marks the manager dirty, as it may be changed."""
        self.dirty = True
        return self._entities

    def create_entity(
        self, position: Sequence[float] = (0.0, 0.0, 0.0), radius: float = 0.0
    ) -> int:
        """Add an entity and return its id."""
        x, y, z = position
        self._entities.append(Entity((float(x), float(y), float(z)), float(radius)))
        self.dirty = True
        return len(self._entities) - 1

    def get_entity(self, entity_id: int) -> Entity:
        """Return the entity with the given id; raise IndexError if there is none."""
        if not 0 <= entity_id < len(self._entities):
            raise IndexError(f"no entity with id {entity_id}")
        return self._entities[entity_id]

    def __len__(self) -> int:
        return len(self._entities)