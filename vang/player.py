"""The player: a body that carries the camera and knows which block it aims at."""

from __future__ import annotations

from collections.abc import Sequence

from vang.camera import Camera
from vang.vmath import RaycastResult, raycast
from vang.world import World

Vec3 = tuple[float, float, float]


class Player:
    """Moves through the world and keeps the camera at eye height above its feet."""

    CAMERA_HEIGHT = 1.8

    def __init__(self, world: World, camera: Camera | None = None) -> None:
        self._world = world
        self._camera = camera if camera is not None else Camera(world)
        self._position: Vec3 = (0.0, 0.0, 0.0)
        self._speed = 3.0
        self._reach_distance = 10.0
        self._raycast_result = RaycastResult()

    def initialize(self) -> None:
        """Put the camera in place and aim for the first time."""
        self._update_camera_position()

    def _move(self, direction: Vec3, amount: float) -> None:
        step = self._speed * amount
        x, y, z = self._position
        self._position = (x + direction[0] * step, y + direction[1] * step, z + direction[2] * step)
        self._update_camera_position()

    def move_forward(self, amount: float) -> None:
        """Walk along the ground in the facing direction."""
        self._move(self._camera.grounded_forward(), amount)

    def move_right(self, amount: float) -> None:
        """Step sideways along the ground."""
        self._move(self._camera.grounded_right(), amount)

    def move_up(self, amount: float) -> None:
        """Rise along the camera's up direction."""
        self._move(self._camera.up, amount)

    @property
    def position(self) -> Vec3:
        return self._position

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        x, y, z = value
        self._position = (float(x), float(y), float(z))
        self._update_camera_position()

    @property
    def speed(self) -> float:
        return self._speed

    @speed.setter
    def speed(self, value: float) -> None:
        self._speed = float(value)

    @property
    def reach_distance(self) -> float:
        return self._reach_distance

    @reach_distance.setter
    def reach_distance(self, value: float) -> None:
        self._reach_distance = float(value)
        self._update_raycast()

    @property
    def camera(self) -> Camera:
        """The player's camera; the aim is refreshed since the caller may turn it."""
        self._update_raycast()
        return self._camera

    @property
    def raycast_result(self) -> RaycastResult:
        """What the player aimed at when the aim was last refreshed."""
        return self._raycast_result

    def _update_camera_position(self) -> None:
        up = self._camera.up
        x, y, z = self._position
        h = self.CAMERA_HEIGHT
        self._camera.position = (x + up[0] * h, y + up[1] * h, z + up[2] * h)
        self._update_raycast()

    def _update_raycast(self) -> None:
        self._raycast_result = raycast(
            self._world, self._camera.position, self._camera.forward, self._reach_distance
        )