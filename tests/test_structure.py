import random

import pytest

from vang.chunk import Blocks
from vang.structure import generate_structure, living_neighbors, make_dungeon, place_column
from vang.world import World


@pytest.fixture
def world():
    return World()


def test_living_neighbors_counts_self_and_ignores_outside():
    full = [1] * 9
    assert living_neighbors(full, 3, 3, 1, 1) == 9
    assert living_neighbors(full, 3, 3, 0, 0) == 4


def test_living_neighbors_of_empty_grid():
    assert living_neighbors([0] * 12, 3, 4, 2, 1) == 0


def test_dungeon_shape_and_values():
    dungeon = make_dungeon(7, 5, 45, 3, 5, 4, random.Random(3))
    assert len(dungeon) == 35
    assert set(dungeon) <= {0, 1}


def test_dungeon_is_reproducible():
    first = make_dungeon(10, 10, 45, 4, 5, 4, random.Random(11))
    second = make_dungeon(10, 10, 45, 4, 5, 4, random.Random(11))
    assert first == second


def test_empty_dungeon_stays_empty():
    assert make_dungeon(6, 6, 0, 5, 5, 4, random.Random(1)) == [0] * 36


def test_full_dungeon_survives():
    assert make_dungeon(6, 6, 100, 5, 5, 4, random.Random(1)) == [1] * 36


def test_place_air_column_starts_with_fog(world):
    place_column(world, 3, 4, 6, Blocks.AIR)
    assert [world.get_block(3, y, 4) for y in range(1, 6)] == [
        Blocks.FOG,
        Blocks.FOG,
        Blocks.AIR,
        Blocks.AIR,
        Blocks.AIR,
    ]


def test_place_solid_column(world):
    place_column(world, 1, 1, 5, Blocks.GRAY)
    assert [world.get_block(1, y, 1) for y in range(1, 5)] == [Blocks.GRAY] * 4
    assert world.get_block(1, 5, 1) is Blocks.AIR
    assert world.get_block(1, 0, 1) is Blocks.AIR


def test_generate_structure_builds_columns(world):
    generate_structure(world, 2, 3, 6, 5, 4, Blocks.GRAY, Blocks.AIR, random.Random(7))
    for x in range(6):
        for z in range(5):
            column = [world.get_block(x + 2, y, z + 3) for y in range(1, 5)]
            assert column in (
                [Blocks.FOG, Blocks.FOG, Blocks.AIR, Blocks.AIR],
                [Blocks.GRAY, Blocks.GRAY, Blocks.GRAY, Blocks.AIR],
            )