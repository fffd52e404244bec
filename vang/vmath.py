"""Ray casting through the voxel grid of a world."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from vang.chunk import Blocks
from vang.world import World, world_to_block_coord

Vec3 = tuple[float, float, float]

# Returned when the ray runs parallel to the plane: far enough to count as a miss.
_PARALLEL_DISTANCE = 100.0


@dataclass
class RaycastResult:
    """What a ray cast found."""

    hit: bool = False
    block_hit: Blocks = Blocks.AIR
    block_hit_position: tuple[int, int, int] = (0, 0, 0)
    new_block_vector: tuple[int, int, int] = (0, 0, 0)
    distance: float = 0.0


def _dot(a: Sequence[float], b: Sequence[float]) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def plane_intersection_distance(
    ray_origin: Sequence[float],
    ray_direction: Sequence[float],
    plane_origin: Sequence[float],
    plane_normal: Sequence[float],
) -> float:
    """Distance along the ray to the plane, or 100.0 if the ray is parallel to it."""
    denom = _dot(plane_normal, ray_direction)
    if abs(denom) > 0.0:
        offset = tuple(p - o for p, o in zip(plane_origin, ray_origin))
        return _dot(offset, plane_normal) / denom
    return _PARALLEL_DISTANCE


def raycast(
    world: World,
    ray_origin: Sequence[float],
    ray_direction: Sequence[float],
    max_distance: float,
) -> RaycastResult:
    """Step block by block along a ray until a block other than air or fog is met."""
    result = RaycastResult()
    origin = [float(c) for c in ray_origin]
    direction = [float(c) for c in ray_direction]
    signs = [_sign(c) for c in direction]
    block_pos = list(world_to_block_coord(*origin))

    while result.distance <= max_distance:
        best_distance: float | None = None
        best_step = (0, 0, 0)
        for axis in range(3):
            plane_origin = [float(c) for c in block_pos]
            plane_origin[axis] += 0.5 * signs[axis]
            normal = [0.0, 0.0, 0.0]
            normal[axis] = -float(signs[axis])
            distance = plane_intersection_distance(origin, direction, plane_origin, normal)
            if best_distance is None or distance < best_distance:
                best_distance = distance
                step = [0, 0, 0]
                step[axis] = signs[axis]
                best_step = (step[0], step[1], step[2])

        assert best_distance is not None
        block_pos = [p + s for p, s in zip(block_pos, best_step)]
        block = world.get_block(*block_pos)
        origin = [o + d * best_distance for o, d in zip(origin, direction)]
        result.distance += best_distance
        if block not in (Blocks.AIR, Blocks.FOG):
            result.hit = True
            result.block_hit = block
            result.block_hit_position = (block_pos[0], block_pos[1], block_pos[2])
            result.new_block_vector = best_step
            return result

    result.distance = max_distance
    return result