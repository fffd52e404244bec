"""A container of blueprints addressed by numeric id and by full technical name."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, TypeVar

from vang import log
from vang.items import ItemBlueprint

T = TypeVar("T", bound=ItemBlueprint)


class BlueprintContainer(Generic[T]):
    """Holds blueprints with unique names and reassignable ids."""

    def __init__(self) -> None:
        self._blueprints: list[T] = []
        self._id_to_index: list[int] = []
        self._name_to_id: dict[str, int] = {}

    def add_blueprint(self, blueprint: T) -> None:
        """Add a blueprint; raise FatalError if its full name is already present."""
        name = blueprint.full_technical_name
        if name in self._name_to_id:
            log.fatal("Two identical blueprint names can not exist!" + name)
        index = len(self._blueprints)
        self._name_to_id[name] = index
        self._blueprints.append(blueprint)
        self._id_to_index.append(index)

    def get_blueprint(self, blueprint_id: int) -> T:
        """Return the blueprint with the given id; raise FatalError if out of range."""
        if not 0 <= blueprint_id < len(self._id_to_index):
            log.fatal(
                f"blueprint_id out of range! ID: {blueprint_id}, SIZE: {len(self._id_to_index)}"
            )
        return self._blueprints[self._id_to_index[blueprint_id]]

    def get_blueprint_id(self, name: str) -> int | None:
        """Return the id for a full technical name, or None if it is unknown."""
        return self._name_to_id.get(name)

    def set_blueprint_id(self, full_technical_name: str, blueprint_id: int) -> None:
        """Give a blueprint a new id, swapping ids with the blueprint that held it."""
        if not 0 <= blueprint_id < len(self):
            raise IndexError(f"Blueprint ID is too large: {blueprint_id} Max: {len(self)}")
        current_id = self._name_to_id.get(full_technical_name)
        if current_id is None:
            raise KeyError(f"Blueprint Is Missing From BlueprintContainer: {full_technical_name}")
        if current_id == blueprint_id:
            return
        other_name = self.get_blueprint(blueprint_id).full_technical_name
        self._name_to_id[full_technical_name] = blueprint_id
        self._name_to_id[other_name] = current_id
        refs = self._id_to_index
        refs[current_id], refs[blueprint_id] = refs[blueprint_id], refs[current_id]

    def __len__(self) -> int:
        return len(self._blueprints)

    def __iter__(self) -> Iterator[T]:
        return (self.get_blueprint(i) for i in range(len(self)))