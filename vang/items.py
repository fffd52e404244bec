"""Item and block blueprints, stacks of items, and how items are used."""

from __future__ import annotations

import abc
import enum

from vang import log
from vang.mods import Mod


class UsabilityType(enum.Enum):
    """The ways in which an item can be used."""

    UNUSABLE = enum.auto()
    PLACEABLE = enum.auto()


class Usability(abc.ABC):
    """What happens when an item is used."""

    @abc.abstractmethod
    def use(self, item: Item) -> None:
        """Use the given item."""

    @property
    @abc.abstractmethod
    def type(self) -> UsabilityType:
        """The kind of usability."""


class Unusable(Usability):
    """An item that does nothing when used."""

    def use(self, item: Item) -> None:
        """Using an unusable item has no effect."""

    @property
    def type(self) -> UsabilityType:
        return UsabilityType.UNUSABLE


class Placeable(Usability):
    """An item that is placed into the world when used."""

    def use(self, item: Item) -> None:
        log.info("PLACE ITEM!")
        log.info(item.blueprint.full_technical_name)

    @property
    def type(self) -> UsabilityType:
        return UsabilityType.PLACEABLE


def create_usability(usability_type: UsabilityType) -> Usability:
    """Build the usability for a type; raise FatalError for unsupported types."""
    if usability_type is UsabilityType.UNUSABLE:
        return Unusable()
    if usability_type is UsabilityType.PLACEABLE:
        return Placeable()
    log.fatal("USABILITY TYPE NOT SUPPORTED!")
    raise AssertionError("unreachable")


class ItemBlueprint:
    """The shared description of one kind of item."""

    def __init__(
        self,
        mod: Mod,
        technical_name: str,
        display_name: str,
        max_stack: int = 1,
        usability: Usability | UsabilityType = UsabilityType.UNUSABLE,
    ) -> None:
        self.mod = mod
        self.technical_name = technical_name
        self.display_name = display_name
        self.max_stack = max_stack
        self.usability: Usability = Unusable()
        self.set_usability(usability)

    def set_usability(self, usability: Usability | UsabilityType) -> None:
        """Replace the usability, given either an instance or a type."""
        if isinstance(usability, Usability):
            self.usability = usability
        else:
            self.usability = create_usability(usability)

    @property
    def full_technical_name(self) -> str:
        """The technical name qualified by the mod's name."""
        return f"{self.mod.name}::{self.technical_name}"

    @property
    def usability_type(self) -> UsabilityType:
        return self.usability.type

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.full_technical_name!r})"


class BlockBlueprint(ItemBlueprint):
    """A blueprint for a block; blocks are placeable unless told otherwise."""

    def __init__(
        self,
        mod: Mod,
        technical_name: str,
        display_name: str,
        max_stack: int = 1,
        usability: Usability | UsabilityType = UsabilityType.PLACEABLE,
    ) -> None:
        super().__init__(mod, technical_name, display_name, max_stack, usability)


class Item:
    """A stack of items made from one blueprint."""

    def __init__(self, blueprint: ItemBlueprint, amount: int = 1) -> None:
        self.blueprint = blueprint
        self.amount = amount

    def use(self) -> None:
        """Use the item as its blueprint says."""
        self.blueprint.usability.use(self)

    def increment_amount(self, amount: int) -> None:
        """Add to the stack, keeping it between 0 and the blueprint's max stack."""
        self.amount = max(0, min(self.amount + amount, self.blueprint.max_stack))


class Block(Item):
    """A stack of blocks."""