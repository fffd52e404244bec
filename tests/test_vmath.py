import pytest

from vang.chunk import Blocks
from vang.vmath import RaycastResult, plane_intersection_distance, raycast
from vang.world import World


def test_plane_intersection_along_axis():
    assert plane_intersection_distance((0, 0, 0), (1, 0, 0), (5, 0, 0), (-1, 0, 0)) == 5.0


def test_plane_parallel_to_ray_is_a_miss():
    assert plane_intersection_distance((0, 0, 0), (1, 0, 0), (0, 5, 0), (0, -1, 0)) == 100.0


@pytest.mark.parametrize("distance", [0.5, 2.0, 7.25])
def test_plane_intersection_is_symmetric_in_normal_sign(distance):
    forward = plane_intersection_distance((0, 0, 0), (0, 0, 1), (0, 0, distance), (0, 0, -1))
    backward = plane_intersection_distance((0, 0, 0), (0, 0, 1), (0, 0, distance), (0, 0, 1))
    assert forward == backward == distance


def test_raycast_hits_block_along_positive_x():
    world = World()
    world.set_block(5, 0, 0, Blocks.RED)
    result = raycast(world, (0.0, 0.0, 0.0), (1.0, 0.0, 0.0), 10.0)
    assert result.hit is True
    assert result.block_hit == Blocks.RED
    assert result.block_hit_position == (5, 0, 0)
    assert result.new_block_vector == (1, 0, 0)
    assert result.distance == 4.5


def test_raycast_hits_block_along_negative_x_and_leaves_air_in_front():
    world = World()
    world.set_block(1, 0, 0, Blocks.BLUE)
    result = raycast(world, (5.0, 0.0, 0.0), (-1.0, 0.0, 0.0), 10.0)
    assert result.hit is True
    assert result.block_hit_position == (1, 0, 0)
    assert result.new_block_vector == (-1, 0, 0)
    in_front = tuple(
        p - v for p, v in zip(result.block_hit_position, result.new_block_vector)
    )
    assert world.get_block(*in_front) == Blocks.AIR


def test_raycast_passes_through_fog():
    world = World()
    world.set_block(2, 0, 0, Blocks.FOG)
    world.set_block(4, 0, 0, Blocks.GREEN)
    result = raycast(world, (0.0, 0.0, 0.0), (1.0, 0.0, 0.0), 10.0)
    assert result.block_hit == Blocks.GREEN
    assert result.block_hit_position == (4, 0, 0)


def test_raycast_miss_reports_max_distance():
    world = World()
    world.set_block(10, 0, 0, Blocks.RED)
    result = raycast(world, (0.0, 0.0, 0.0), (1.0, 0.0, 0.0), 3.0)
    assert result.hit is False
    assert result.distance == 3.0
    assert result.block_hit == RaycastResult().block_hit