"""A first-person camera steered by yaw and pitch."""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence

from vang.rendering import ChunkRenderer
from vang.world import World

Vec3 = tuple[float, float, float]
Matrix4 = tuple[
    tuple[float, float, float, float],
    tuple[float, float, float, float],
    tuple[float, float, float, float],
    tuple[float, float, float, float],
]

PITCH_LIMIT = 89.0
DEFAULT_RENDER_DISTANCE = 4


def _vec(values: Sequence[float]) -> Vec3:
    x, y, z = values
    return (float(x), float(y), float(z))


def _sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _normalize(v: Vec3) -> Vec3:
    length = math.sqrt(_dot(v, v))
    if length == 0.0:
        raise ValueError("cannot normalise a zero vector")
    return (v[0] / length, v[1] / length, v[2] / length)


class Camera:
    """Position and orientation of the viewer; every change is reported to ``on_change``."""

    def __init__(
        self,
        world: World | None = None,
        on_change: Callable[[Camera], None] | None = None,
    ) -> None:
        self._world = world
        self._on_change = on_change
        self._position: Vec3 = (0.0, 1.0, 0.0)
        self._forward: Vec3 = (0.0, 0.0, 1.0)
        self._up: Vec3 = (0.0, 1.0, 0.0)
        self._pitch = 0.0
        self._yaw = 90.0
        self._look_sensitivity = 0.075
        self._fov = 90.0
        self._last_mouse: tuple[float, float] | None = None
        self._chunk_renderer: ChunkRenderer | None = None

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change(self)

    @property
    def position(self) -> Vec3:
        return self._position

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        self._position = _vec(value)
        self._changed()

    @property
    def fov(self) -> float:
        return self._fov

    @fov.setter
    def fov(self, value: float) -> None:
        self._fov = float(value)
        self._changed()

    @property
    def look_sensitivity(self) -> float:
        return self._look_sensitivity

    @look_sensitivity.setter
    def look_sensitivity(self, value: float) -> None:
        self._look_sensitivity = float(value)
        self._changed()

    @property
    def forward(self) -> Vec3:
        return self._forward

    @property
    def up(self) -> Vec3:
        return self._up

    @property
    def pitch(self) -> float:
        return self._pitch

    @property
    def yaw(self) -> float:
        return self._yaw

    @property
    def chunk_renderer(self) -> ChunkRenderer:
        """The chunks this camera can see, loaded on first use."""
        if self._chunk_renderer is None:
            if self._world is None:
                raise RuntimeError("camera has no world to render")
            self._chunk_renderer = ChunkRenderer(self._world, DEFAULT_RENDER_DISTANCE)
        return self._chunk_renderer

    def _recalculate_forward(self) -> None:
        yaw = math.radians(self._yaw)
        pitch = math.radians(self._pitch)
        self._forward = (
            math.cos(yaw) * math.cos(pitch),
            math.sin(pitch),
            math.sin(yaw) * math.cos(pitch),
        )

    def rotate_right(self, x_offset: float) -> None:
        """Turn right by ``x_offset`` degrees."""
        self._yaw -= x_offset
        self._recalculate_forward()
        self._changed()

    def rotate_up(self, y_offset: float) -> None:
        """Tilt up by ``y_offset`` degrees, never past straight up or down."""
        self._pitch = max(-PITCH_LIMIT, min(PITCH_LIMIT, self._pitch + y_offset))
        self._recalculate_forward()
        self._changed()

    def mouse_rotate(self, x_pos: float, y_pos: float) -> None:
        """Turn by the cursor's movement since the last call; the first call only records it."""
        if self._last_mouse is None:
            self._last_mouse = (x_pos, y_pos)
            return
        last_x, last_y = self._last_mouse
        self._last_mouse = (x_pos, y_pos)
        self.rotate_right((x_pos - last_x) * self._look_sensitivity)
        self.rotate_up((y_pos - last_y) * self._look_sensitivity)
        self._changed()

    def look_at(self, target: Sequence[float]) -> None:
        """Turn to face a point; raise ValueError if it is the camera's own position."""
        direction = _normalize(_sub(_vec(target), self._position))
        pitch = math.degrees(math.asin(max(-1.0, min(1.0, direction[1]))))
        self._pitch = max(-PITCH_LIMIT, min(PITCH_LIMIT, pitch))
        self._yaw = math.degrees(math.atan2(direction[2], direction[0]))
        self._recalculate_forward()
        self._changed()

    def grounded_forward(self) -> Vec3:
        """The forward direction flattened onto the ground plane."""
        return _normalize((self._forward[0], 0.0, self._forward[2]))

    def grounded_right(self) -> Vec3:
        """The right direction on the ground plane."""
        x, y, z = _normalize(_cross(self.grounded_forward(), self._up))
        return (-x, -y, -z)

    def right(self) -> Vec3:
        """The cross product of up and forward."""
        return _cross(self._up, self._forward)

    def view_matrix(self) -> Matrix4:
        """The row-major view matrix of a camera whose forward axis is ``forward``."""
        eye = self._position
        center = _sub(eye, self._forward)
        f = _normalize(_sub(center, eye))
        s = _normalize(_cross(f, self._up))
        u = _cross(s, f)
        return (
            (s[0], s[1], s[2], -_dot(s, eye)),
            (u[0], u[1], u[2], -_dot(u, eye)),
            (-f[0], -f[1], -f[2], _dot(f, eye)),
            (0.0, 0.0, 0.0, 1.0),
        )