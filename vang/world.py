"""A world made of chunks that are created on first use."""

from __future__ import annotations

import math
from collections.abc import Sequence

from vang.chunk import CHUNK_SIZE, Blocks, Chunk, ChunkCoord

WorldId = int

# Blocks beyond this coordinate on any axis read as Blocks.NONE.
WORLD_LIMIT = 576


def _trunc_div(value: int, divisor: int) -> int:
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def _round_half_away(value: float) -> int:
    magnitude = math.floor(abs(value) + 0.5)
    return magnitude if value >= 0 else -magnitude


def world_to_chunk_coord(x: float, y: float, z: float) -> ChunkCoord:
    """Return the chunk holding a world position, truncating toward zero."""
    return (
        _trunc_div(int(x), CHUNK_SIZE[0]),
        _trunc_div(int(y), CHUNK_SIZE[1]),
        _trunc_div(int(z), CHUNK_SIZE[2]),
    )


def world_to_block_coord(x: float, y: float, z: float) -> tuple[int, int, int]:
    """Return the block a world position lies in, rounding halves away from zero."""
    return (_round_half_away(x), _round_half_away(y), _round_half_away(z))


class World:
    """Blocks addressed by world position, stored in lazily created chunks."""

    def __init__(self) -> None:
        self._chunks: dict[ChunkCoord, Chunk] = {}

    def _chunk_and_local(self, x: int, y: int, z: int) -> tuple[Chunk, int, int, int]:
        cx, cy, cz = world_to_chunk_coord(x, y, z)
        chunk = self.load_chunk((cx, cy, cz))
        return (
            chunk,
            x - cx * CHUNK_SIZE[0],
            y - cy * CHUNK_SIZE[1],
            z - cz * CHUNK_SIZE[2],
        )

    def set_block(self, x: int, y: int, z: int, block: Blocks) -> None:
        """Place a block at a world position."""
        chunk, lx, ly, lz = self._chunk_and_local(x, y, z)
        chunk.set_block(lx, ly, lz, block)

    def get_block(self, x: int, y: int, z: int) -> Blocks:
        """Return the block at a world position, or NONE outside the world bounds."""
        if not (0 <= x <= WORLD_LIMIT and 0 <= y <= WORLD_LIMIT and 0 <= z <= WORLD_LIMIT):
            return Blocks.NONE
        chunk, lx, ly, lz = self._chunk_and_local(x, y, z)
        return chunk.get_block(lx, ly, lz)

    def is_solid(self, x: int, y: int, z: int) -> bool:
        """True for NONE, AIR and FOG, the block kinds ordered before BLACK."""
        return self.get_block(x, y, z) < Blocks.BLACK

    def load_chunk(self, chunk_position: Sequence[int]) -> Chunk:
        """Return the chunk at a chunk coordinate, creating it if needed."""
        key = (int(chunk_position[0]), int(chunk_position[1]), int(chunk_position[2]))
        chunk = self._chunks.get(key)
        if chunk is None:
            chunk = Chunk()
            self._chunks[key] = chunk
        return chunk

    def __contains__(self, chunk_position: object) -> bool:
        return chunk_position in self._chunks

    def __len__(self) -> int:
        return len(self._chunks)