"""Keeps the cube of chunks around a centre chunk loaded for drawing."""

from __future__ import annotations

import itertools
from collections.abc import Sequence

from vang.chunk import Chunk, ChunkCoord
from vang.world import World, world_to_chunk_coord


class ChunkRenderer:
    """Holds the chunks within a render distance and notes when that set changes."""

    def __init__(self, world: World, render_distance: int) -> None:
        self._world = world
        self._center: ChunkCoord = (0, 0, 0)
        self._render_distance = 0
        self._chunks: list[Chunk] = []
        self.dirty = False
        self.render_distance = render_distance

    @property
    def render_distance(self) -> int:
        """How many chunks are kept on each side of the centre."""
        return self._render_distance

    @render_distance.setter
    def render_distance(self, value: int) -> None:
        if value < 0:
            raise ValueError(f"render distance must not be negative: {value}")
        self.dirty = True
        self._render_distance = int(value)
        self._update_chunks()

    @property
    def render_diameter(self) -> int:
        """The edge length, in chunks, of the loaded cube."""
        return self._render_distance * 2 + 1

    @property
    def chunks(self) -> tuple[Chunk, ...]:
        """The loaded chunks, ordered by x, then y, then z."""
        return tuple(self._chunks)

    @property
    def center_chunk(self) -> ChunkCoord:
        """The chunk coordinate at the centre of the cube."""
        return self._center

    @center_chunk.setter
    def center_chunk(self, value: Sequence[int]) -> None:
        coord = (int(value[0]), int(value[1]), int(value[2]))
        if coord == self._center:
            return
        self.dirty = True
        self._center = coord
        self._update_chunks()

    def set_center(self, position: Sequence[float]) -> None:
        """Centre the cube on the chunk holding a world position."""
        self.center_chunk = world_to_chunk_coord(position[0], position[1], position[2])

    def _update_chunks(self) -> None:
        diameter = self.render_diameter
        self._chunks = [
            self._world.load_chunk(coord)
            for coord in itertools.product(range(diameter), repeat=3)
        ]