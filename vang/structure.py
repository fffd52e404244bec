"""Cave-like structures grown with a cellular automaton and built out of block columns."""

from __future__ import annotations

import random

from vang.chunk import Blocks
from vang.world import World

LIFE_RATE = 45
ITERATIONS = 8
BIRTH_THRESHOLD = 5
SURVIVE_THRESHOLD = 4


def _in_grid(height: int, width: int, x: int, y: int) -> bool:
    return 0 <= x < width and 0 <= y < height


def living_neighbors(dungeon: list[int], height: int, width: int, x: int, y: int) -> int:
    """Count live cells in the 3x3 block around (x, y), the cell itself included.

    The dungeon is a flat list laid out row by row: cell (x, y) is at ``x + y * width``.
    """
    return sum(
        dungeon[nx + ny * width]
        for nx in range(x - 1, x + 2)
        for ny in range(y - 1, y + 2)
        if _in_grid(height, width, nx, ny)
    )


def _step(dungeon: list[int], height: int, width: int, birth: int, survive: int) -> list[int]:
    result = list(dungeon)
    for x in range(width):
        for y in range(height):
            index = x + y * width
            alive = living_neighbors(dungeon, height, width, x, y)
            if dungeon[index] != 1:
                if alive >= birth:
                    result[index] = 1
            elif alive < survive:
                result[index] = 0
    return result


def make_dungeon(
    height: int,
    width: int,
    life_rate: int,
    iterations: int,
    birth_threshold: int,
    survive_threshold: int,
    rng: random.Random | None = None,
) -> list[int]:
    """Seed cells alive with ``life_rate`` percent chance, then run the automaton."""
    rng = rng if rng is not None else random.Random()
    dungeon = [0] * (width * height)
    for x in range(width):
        for y in range(height):
            dungeon[x + y * width] = 1 if rng.randrange(100) < life_rate else 0
    for _ in range(iterations):
        dungeon = _step(dungeon, height, width, birth_threshold, survive_threshold)
    return dungeon


def place_column(world: World, x: int, z: int, height: int, block: Blocks) -> None:
    """Fill a column from y=1 up to below ``height``; air columns start with two fog blocks."""
    y = 1
    if block is Blocks.AIR:
        world.set_block(x, y, z, Blocks.FOG)
        world.set_block(x, y + 1, z, Blocks.FOG)
        y += 2
    for level in range(y, height):
        world.set_block(x, level, z, block)


def generate_structure(
    world: World,
    x_offset: int,
    z_offset: int,
    length: int,
    width: int,
    height: int,
    live_block: Blocks,
    dead_block: Blocks,
    rng: random.Random | None = None,
) -> None:
    """Grow a ``length`` by ``width`` cave and raise it as columns in the world."""
    dungeon = make_dungeon(
        length, width, LIFE_RATE, ITERATIONS, BIRTH_THRESHOLD, SURVIVE_THRESHOLD, rng
    )
    for x in range(length):
        for z in range(width):
            block = dead_block if dungeon[z + x * width] == 0 else live_block
            place_column(world, x + x_offset, z + z_offset, height, block)