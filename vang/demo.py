"""A sample game: fly around a voxel world, build and break blocks, and watch orbiting lights."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence

from vang import timing
from vang.chunk import Blocks
from vang.engine import Engine
from vang.events import Event, EventDispatcher, MouseMovedEvent
from vang.input import Key, Mouse
from vang.layers import Layer
from vang.structure import generate_structure

# Edge length of the floor and ceiling laid down by populate_world.
WORLD_EXTENT = 576

STRUCTURE_OFFSET = 28
STRUCTURE_SIZE = 456
STRUCTURE_HEIGHT = 6

TOWER_X = 10
TOWER_Z = 20

WALK_SPEED = 3.0
SPRINT_SPEED = 20.0
HEADLIGHT_RADIUS = 50.0

PLAYER_START = (50.0, 15.0, 50.0)
ORBIT_CENTER = (50.0, 15.0, 50.0)
ORBIT_RADIUS = 5.0
SPIN_TIME = 10.0


class PlayerMovementLayer(Layer):
    """Moves the player from the keyboard and mouse, and lets it build and break blocks."""

    def __init__(self, engine: Engine) -> None:
        super().__init__("Player Movement")
        self._engine = engine
        self.headlight_id = engine.light_manager.create_light(
            (0.0, 0.0, 0.0), (1.0, 1.0, 1.0), HEADLIGHT_RADIUS, 1.0
        )
        self.block_to_build = Blocks.RAINBOW
        self.headlight_follow = True
        self.rng = random.Random()
        self._held: dict[str, bool] = {}

    def _rising(self, name: str, down: bool) -> bool:
        """True only on the frame a control goes from released to pressed."""
        was_down = self._held.get(name, False)
        self._held[name] = down
        return down and not was_down

    def on_update(self) -> None:
        engine = self._engine
        keys = engine.input_cache
        player = engine.player
        world = engine.world
        lights = engine.light_manager

        if keys.is_key_pressed(Key.LEFT_CONTROL) or keys.is_mouse_button_pressed(Mouse.BUTTON_5):
            player.speed = SPRINT_SPEED
        else:
            player.speed = WALK_SPEED

        if keys.is_key_pressed(Key.W):
            player.move_forward(timing.delta_time())
        elif keys.is_key_pressed(Key.S):
            player.move_forward(-timing.delta_time())

        if keys.is_key_pressed(Key.D):
            player.move_right(timing.delta_time())
        elif keys.is_key_pressed(Key.A):
            player.move_right(-timing.delta_time())

        if keys.is_key_pressed(Key.NUM_1):
            self.block_to_build = Blocks.RAINBOW
        elif keys.is_key_pressed(Key.NUM_2):
            self.block_to_build = Blocks.GLASS

        if keys.is_key_pressed(Key.R):
            generate_structure(
                world,
                STRUCTURE_OFFSET,
                STRUCTURE_OFFSET,
                STRUCTURE_SIZE,
                STRUCTURE_SIZE,
                STRUCTURE_HEIGHT,
                Blocks.GRAY,
                Blocks.AIR,
                self.rng,
            )

        if self._rising("f", keys.is_key_pressed(Key.F)):
            headlight = lights.get_light(self.headlight_id)
            headlight.radius = HEADLIGHT_RADIUS if headlight.radius == 0.0 else 0.0

        if self._rising("g", keys.is_key_pressed(Key.G)):
            self.headlight_follow = not self.headlight_follow

        if keys.is_key_pressed(Key.SPACE):
            player.move_up(timing.delta_time())
        elif keys.is_key_pressed(Key.LEFT_SHIFT):
            player.move_up(-timing.delta_time())

        if self._rising("right", keys.is_mouse_button_pressed(Mouse.BUTTON_RIGHT)):
            result = player.raycast_result
            if result.hit:
                target = tuple(
                    p - v for p, v in zip(result.block_hit_position, result.new_block_vector)
                )
                if world.get_block(*target) != Blocks.NONE:
                    world.set_block(*target, self.block_to_build)

        if self._rising("left", keys.is_mouse_button_pressed(Mouse.BUTTON_LEFT)):
            result = player.raycast_result
            if result.hit and result.block_hit != Blocks.NONE:
                world.set_block(*result.block_hit_position, Blocks.AIR)

        if self.headlight_follow:
            lights.get_light(self.headlight_id).position = player.camera.position

    def on_event(self, event: Event) -> None:
        EventDispatcher(event).dispatch(MouseMovedEvent, self._mouse_moved)

    def _mouse_moved(self, event: MouseMovedEvent) -> bool:
        self._engine.player.camera.mouse_rotate(event.x, -event.y)
        return True


def populate_world(engine: Engine, rng: random.Random | None = None) -> tuple[int, int]:
    """Lay a floor, a ceiling, a tower and a cave; add two lights and place the player.

    Returns the ids of the two lights, for :func:`animate_lights`.
    """
    world = engine.world
    extent = WORLD_EXTENT

    for x in range(extent):
        for z in range(extent):
            world.set_block(x, 0, z, Blocks.WHITE)

    for x in range(extent):
        for z in range(extent):
            world.set_block(x, extent - 1, z, Blocks.BLUE)

    for i in range(2, 16):
        world.set_block(TOWER_X, i - 1, TOWER_Z, Blocks(i))

    generate_structure(
        world,
        STRUCTURE_OFFSET,
        STRUCTURE_OFFSET,
        STRUCTURE_SIZE,
        STRUCTURE_SIZE,
        STRUCTURE_HEIGHT,
        Blocks.GRAY,
        Blocks.AIR,
        rng,
    )

    lights = engine.light_manager
    first = lights.create_light((5.0, 5.0, 5.0), (1.0, 1.0, 1.0), 50.0, 1.0)
    second = lights.create_light((15.0, 5.0, 5.0), (0.0, 2.0, 2.0), 50.0, 1.0)

    engine.player.position = PLAYER_START
    return first, second


def animate_lights(
    engine: Engine, light_ids: Sequence[int], elapsed: float | None = None
) -> None:
    """Swing the first light up and down and circle the second around the orbit centre."""
    if elapsed is None:
        elapsed = timing.time_since_start()
    first, second = light_ids
    phase = math.fmod(elapsed, SPIN_TIME * 2.0 * math.pi)
    cx, cy, cz = ORBIT_CENTER
    lights = engine.light_manager
    lights.get_light(first).position = (cx, cy + ORBIT_RADIUS * math.cos(phase), cz)
    lights.get_light(second).position = (
        cx + ORBIT_RADIUS * math.cos(phase),
        cy,
        cz + ORBIT_RADIUS * math.sin(phase),
    )