"""Point lights and the manager that tracks which of them changed."""

from __future__ import annotations

from collections.abc import Sequence

Vec3 = tuple[float, float, float]


def _vec3(values: Sequence[float]) -> Vec3:
    x, y, z = values
    return (float(x), float(y), float(z))


class Light:
    """A point light; any change marks it dirty."""

    def __init__(
        self,
        position: Sequence[float] = (0.0, 0.0, 0.0),
        color: Sequence[float] = (0.0, 0.0, 0.0),
        radius: float = 0.0,
        intensity: float = 0.0,
    ) -> None:
        self._position = _vec3(position)
        self._color = _vec3(color)
        self._radius = float(radius)
        self._intensity = float(intensity)
        self.dirty = True

    @property
    def position(self) -> Vec3:
        return self._position

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        self.dirty = True
        self._position = _vec3(value)

    @property
    def color(self) -> Vec3:
        return self._color

    @color.setter
    def color(self, value: Sequence[float]) -> None:
        self.dirty = True
        self._color = _vec3(value)

    @property
    def radius(self) -> float:
        return self._radius

    @radius.setter
    def radius(self, value: float) -> None:
        self.dirty = True
        self._radius = float(value)

    @property
    def intensity(self) -> float:
        return self._intensity

    @intensity.setter
    def intensity(self, value: float) -> None:
        self.dirty = True
        self._intensity = float(value)

    def __repr__(self) -> str:
        return (
            f"Light(position={self._position}, color={self._color}, "
            f"radius={self._radius}, intensity={self._intensity})"
        )


class LightManager:
    """Owns all lights, addressed by the id returned when they are created."""

    def __init__(self) -> None:
        self._lights: list[Light] = []
        self.dirty = True

    @property
    def lights(self) -> tuple[Light, ...]:
        """All lights in id order."""
        return tuple(self._lights)

    def create_light(
        self,
        position: Sequence[float] = (0.0, 0.0, 0.0),
        color: Sequence[float] = (0.0, 0.0, 0.0),
        radius: float = 0.0,
        intensity: float = 0.0,
    ) -> int:
        """Add a light and return its id."""
        self._lights.append(Light(position, color, radius, intensity))
        self.dirty = True
        return len(self._lights) - 1

    def get_light(self, light_id: int) -> Light:
        """Return the light with the given id; raise IndexError if there is none."""
        if not 0 <= light_id < len(self._lights):
            raise IndexError(f"no light with id {light_id}")
        return self._lights[light_id]

    def clean_light(self, index: int) -> None:
        """Clear the dirty mark of one light."""
        self.get_light(index).dirty = False

    def __len__(self) -> int:
        return len(self._lights)