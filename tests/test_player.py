import math

import pytest

from vang.chunk import Blocks
from vang.player import Player
from vang.world import World


@pytest.fixture
def world():
    return World()


@pytest.fixture
def player(world):
    p = Player(world)
    p.initialize()
    return p


def test_camera_sits_at_eye_height(player):
    assert player.camera.position == pytest.approx((0.0, 1.8, 0.0))


def test_position_setter_moves_camera(player):
    player.position = (5, 2, 5)
    assert player.position == (5.0, 2.0, 5.0)
    assert player.camera.position == pytest.approx((5.0, 2.0 + Player.CAMERA_HEIGHT, 5.0))


def test_move_forward_distance_and_reverse(player):
    player.position = (10.0, 1.0, 10.0)
    start = player.position
    player.move_forward(0.5)
    assert math.dist(start, player.position) == pytest.approx(player.speed * 0.5)
    player.move_forward(-0.5)
    assert player.position == pytest.approx(start)


def test_move_right_is_horizontal(player):
    player.position = (10.0, 1.0, 10.0)
    player.move_right(1.0)
    assert player.position[1] == pytest.approx(1.0)
    assert math.dist((10.0, 1.0, 10.0), player.position) == pytest.approx(player.speed)


def test_move_up_changes_height_only(player):
    player.speed = 2.0
    player.move_up(1.5)
    assert player.position == pytest.approx((0.0, 3.0, 0.0))


def test_raycast_hits_block_ahead(world, player):
    world.set_block(0, 2, 5, Blocks.GRAY)
    player.reach_distance = 10.0
    result = player.raycast_result
    assert result.hit is True
    assert result.block_hit is Blocks.GRAY
    assert result.block_hit_position == (0, 2, 5)
    assert result.new_block_vector == (0, 0, 1)


def test_raycast_misses_beyond_reach(world, player):
    world.set_block(0, 2, 5, Blocks.GRAY)
    player.reach_distance = 2.0
    result = player.raycast_result
    assert result.hit is False
    assert result.distance == 2.0