"""A cubic chunk of voxels and its greedy cuboid compilation."""

from __future__ import annotations

import enum
from array import array

CHUNK_SIZE: tuple[int, int, int] = (64, 64, 64)
BLOCK_COUNT = CHUNK_SIZE[0] * CHUNK_SIZE[1] * CHUNK_SIZE[2]

ChunkCoord = tuple[int, int, int]

_ROW = CHUNK_SIZE[2]
_LAYER = CHUNK_SIZE[1] * CHUNK_SIZE[1]
_MAX_EXTENT = 31
# A cell belongs to a cuboid when any of its 30 direction bits is set.
_CUBOID_MASK = 0x3FFFFFFF


class Blocks(enum.IntEnum):
    """The kinds of block a voxel can hold."""

    NONE = 0
    AIR = 1
    FOG = 2
    BLACK = 3
    GRAY = 4
    LIGHT_GRAY = 5
    WHITE = 6
    RED = 7
    ORANGE = 8
    YELLOW = 9
    GREEN = 10
    BLUE = 11
    PURPLE = 12
    PINK = 13
    RAINBOW = 14
    GLASS = 15


class _Direction(enum.IntEnum):
    """Bit offsets of the five-bit distance fields in a cuboid word."""

    POSITIVE_X = 25
    NEGATIVE_X = 20
    POSITIVE_Y = 15
    NEGATIVE_Y = 10
    POSITIVE_Z = 5
    NEGATIVE_Z = 0


class Chunk:
    """A 64x64x64 block of voxels, each with a block type and a cuboid word.

    The cuboid word packs, for each axis direction, the distance from the cell
    to the face of the cuboid of equal blocks that the cell belongs to.
    """

    def __init__(self) -> None:
        self._blocks = array("I", [int(Blocks.AIR)]) * BLOCK_COUNT
        self._cuboids = array("I", [0]) * BLOCK_COUNT
        self.dirty = True
        self.greedy_cuboid_compilation()

    @staticmethod
    def _index(x: int, y: int, z: int) -> int:
        if not (
            0 <= x < CHUNK_SIZE[0] and 0 <= y < CHUNK_SIZE[1] and 0 <= z < CHUNK_SIZE[2]
        ):
            raise IndexError(f"chunk position out of range: ({x}, {y}, {z})")
        return x + _ROW * z + _LAYER * y

    def get_block(self, x: int, y: int, z: int) -> Blocks:
        """Return the block at a position inside the chunk."""
        return Blocks(self._blocks[self._index(x, y, z)])

    def set_block(self, x: int, y: int, z: int, block: Blocks) -> None:
        """Store a block and mark the chunk dirty."""
        index = self._index(x, y, z)
        self.dirty = True
        self._blocks[index] = int(Blocks(block))

    def get_cuboid(self, x: int, y: int, z: int) -> int:
        """Return the packed cuboid word of a position."""
        return self._cuboids[self._index(x, y, z)]

    @property
    def all_blocks(self) -> list[int]:
        """Block values and cuboid words interleaved, cell by cell."""
        data = [0] * (2 * BLOCK_COUNT)
        data[0::2] = self._blocks
        data[1::2] = self._cuboids
        return data

    def greedy_cuboid_compilation(self) -> None:
        """Recompute the cuboids of equal blocks throughout the chunk."""
        self._cuboids = array("I", [0]) * BLOCK_COUNT
        cuboids = self._cuboids
        cuboided = 0
        for x in range(CHUNK_SIZE[0]):
            for z in range(CHUNK_SIZE[2]):
                column = x + _ROW * z
                for y in range(CHUNK_SIZE[1] - 1, -1, -1):
                    if not cuboids[column + _LAYER * y] & _CUBOID_MASK:
                        cuboided += self._calc_cuboid(x, y, z)
                    if cuboided == BLOCK_COUNT:
                        return

    def _region_is_free(
        self, x0: int, x1: int, y0: int, y1: int, z0: int, z1: int, block: int
    ) -> bool:
        """True when every cell of the box holds ``block`` and is in no cuboid."""
        length = x1 - x0 + 1
        wanted = array("I", [block]) * length
        # Cuboid words never use bits above the mask, so "in no cuboid" means zero.
        empty = array("I", [0]) * length
        blocks, cuboids = self._blocks, self._cuboids
        for y in range(y0, y1 + 1):
            layer = y * _LAYER
            for z in range(z0, z1 + 1):
                start = layer + z * _ROW + x0
                end = start + length
                if blocks[start:end] != wanted or cuboids[start:end] != empty:
                    return False
        return True

    def _calc_cuboid(self, x: int, y: int, z: int) -> int:
        block = self._blocks[x + _ROW * z + _LAYER * y]
        grow_x = grow_y = grow_z = True
        size_x = size_y = size_z = 0

        # Each accepted step leaves the whole box verified, so only the new slab
        # needs checking on the next step.
        while grow_x or grow_y or grow_z:
            if grow_x:
                new_x = x + size_x + 1
                if new_x >= CHUNK_SIZE[2] or size_x >= _MAX_EXTENT:
                    grow_x = False
                elif self._region_is_free(new_x, new_x, y - size_y, y, z, z + size_z, block):
                    size_x += 1
                else:
                    grow_x = False

            if grow_z:
                new_z = z + size_z + 1
                if new_z >= CHUNK_SIZE[2] or size_z >= _MAX_EXTENT:
                    grow_z = False
                elif self._region_is_free(x, x + size_x, y - size_y, y, new_z, new_z, block):
                    size_z += 1
                else:
                    grow_z = False

            if grow_y:
                new_y = y - size_y - 1
                if new_y < 0 or size_y >= _MAX_EXTENT:
                    grow_y = False
                elif self._region_is_free(x, x + size_x, new_y, new_y, z, z + size_z, block):
                    size_y += 1
                else:
                    grow_y = False

        if size_x == size_y == size_z == 0:
            return 1

        x_parts = [
            ((size_x - cx) << _Direction.POSITIVE_X) | (cx << _Direction.NEGATIVE_X)
            for cx in range(size_x + 1)
        ]
        cuboids = self._cuboids
        for cy in range(size_y + 1):
            layer = (y - cy) * _LAYER
            for cz in range(size_z + 1):
                yz_part = (
                    (cy << _Direction.POSITIVE_Y)
                    | ((size_y - cy) << _Direction.NEGATIVE_Y)
                    | ((size_z - cz) << _Direction.POSITIVE_Z)
                    | (cz << _Direction.NEGATIVE_Z)
                )
                start = layer + (z + cz) * _ROW + x
                end = start + size_x + 1
                cuboids[start:end] = array(
                    "I",
                    (old | part | yz_part for old, part in zip(cuboids[start:end], x_parts)),
                )

        return size_x * size_y * size_z