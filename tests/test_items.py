import pytest

from vang import log
from vang.items import (
    Block,
    BlockBlueprint,
    Item,
    ItemBlueprint,
    Placeable,
    Unusable,
    UsabilityType,
    create_usability,
)
from vang.mods import Mod


@pytest.fixture
def mod():
    return Mod("Default")


def test_item_blueprint_defaults(mod):
    blueprint = ItemBlueprint(mod, "Test_Item", "Test Item")
    assert blueprint.max_stack == 1
    assert blueprint.usability_type is UsabilityType.UNUSABLE
    assert blueprint.display_name == "Test Item"
    assert blueprint.mod == mod


def test_full_technical_name(mod):
    blueprint = ItemBlueprint(mod, "Test_Item", "Test Item")
    assert blueprint.full_technical_name == "Default::Test_Item"


def test_block_blueprint_is_placeable(mod):
    blueprint = BlockBlueprint(mod, "Stone", "Stone", 64)
    assert blueprint.usability_type is UsabilityType.PLACEABLE
    assert blueprint.max_stack == 64


def test_block_blueprint_accepts_other_usability(mod):
    blueprint = BlockBlueprint(mod, "Stone", "Stone", usability=Unusable())
    assert blueprint.usability_type is UsabilityType.UNUSABLE


def test_set_usability_by_type_and_instance(mod):
    blueprint = ItemBlueprint(mod, "Test_Item", "Test Item")
    blueprint.set_usability(UsabilityType.PLACEABLE)
    assert isinstance(blueprint.usability, Placeable)
    blueprint.set_usability(Unusable())
    assert blueprint.usability_type is UsabilityType.UNUSABLE


def test_create_usability_types():
    assert create_usability(UsabilityType.UNUSABLE).type is UsabilityType.UNUSABLE
    assert create_usability(UsabilityType.PLACEABLE).type is UsabilityType.PLACEABLE


def test_create_usability_rejects_unknown():
    with pytest.raises(log.FatalError, match="USABILITY TYPE NOT SUPPORTED!"):
        create_usability(None)


def test_increment_amount_clamps(mod):
    blueprint = ItemBlueprint(mod, "Test_Item", "Test Item", 10)
    item = Item(blueprint, 5)
    item.increment_amount(3)
    assert item.amount == 8
    item.increment_amount(100)
    assert item.amount == blueprint.max_stack
    item.increment_amount(-100)
    assert item.amount == 0


def test_item_default_amount(mod):
    assert Item(ItemBlueprint(mod, "Test_Item", "Test Item")).amount == 1


def test_placeable_use_logs_name(mod, capsys):
    block = Block(BlockBlueprint(mod, "Stone", "Stone"))
    block.use()
    out = capsys.readouterr().out
    assert "PLACE ITEM!" in out
    assert "Default::Stone" in out


def test_unusable_use_prints_nothing(mod, capsys):
    Item(ItemBlueprint(mod, "Test_Item", "Test Item")).use()
    assert capsys.readouterr().out == ""