import pytest

from vang.rendering import ChunkRenderer
from vang.world import World


@pytest.fixture
def world():
    return World()


def test_zero_distance_loads_one_chunk(world):
    renderer = ChunkRenderer(world, 0)
    assert renderer.render_diameter == 1
    assert len(renderer.chunks) == 1
    assert renderer.chunks[0] is world.load_chunk((0, 0, 0))
    assert len(world) == 1


def test_new_renderer_is_dirty(world):
    renderer = ChunkRenderer(world, 0)
    assert renderer.dirty is True
    assert renderer.render_distance == 0


def test_negative_distance_rejected(world):
    with pytest.raises(ValueError):
        ChunkRenderer(world, -1)


def test_same_center_keeps_clean(world):
    renderer = ChunkRenderer(world, 0)
    renderer.dirty = False
    renderer.set_center((10.0, 20.0, 30.0))
    assert renderer.dirty is False
    assert renderer.center_chunk == (0, 0, 0)


def test_new_center_marks_dirty(world):
    renderer = ChunkRenderer(world, 0)
    renderer.dirty = False
    renderer.set_center((100.0, 0.0, 0.0))
    assert renderer.dirty is True
    assert renderer.center_chunk == (1, 0, 0)


def test_center_chunk_setter(world):
    renderer = ChunkRenderer(world, 0)
    renderer.dirty = False
    renderer.center_chunk = (2, 3, 4)
    assert renderer.center_chunk == (2, 3, 4)
    assert renderer.dirty is True