import pytest

from vang.universe import PlayerData, Universe, create_universe, get_current_universe
from vang.world import World


def test_create_world_returns_sequential_ids():
    universe = Universe("seed")
    ids = [universe.create_world() for _ in range(4)]
    assert ids == list(range(4))
    assert len(universe) == 4


def test_get_world_returns_distinct_worlds():
    universe = Universe()
    first = universe.create_world()
    second = universe.create_world()
    assert isinstance(universe.get_world(first), World)
    assert universe.get_world(first) is not universe.get_world(second)
    assert universe.get_world(first) is universe.get_world(first)


@pytest.mark.parametrize("world_id", [-1, 0, 5])
def test_get_missing_world_raises(world_id):
    universe = Universe()
    with pytest.raises(IndexError):
        universe.get_world(world_id)


def test_seed_and_player_data_are_kept():
    universe = Universe("abc")
    assert universe.seed == "abc"
    universe.player_data["alice"] = PlayerData(world=0, position=(1, 2, 3))
    assert universe.player_data["alice"].position == (1, 2, 3)
    assert Universe().seed == ""


def test_create_universe_becomes_current():
    universe = create_universe("first")
    assert get_current_universe() is universe
    replacement = create_universe("second")
    assert get_current_universe() is replacement
    assert replacement.seed == "second"