"""Grid ray casting that finds the wall hit by each screen column's ray."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from .config import EPSILON, FIELD_OF_VIEW, SCREEN_WIDTH, TILE, adjust_angle, deg_to_rad

_MAX_STEPS = 30
_FAR = 100000
_INT_MAX = 2147483647
_NUDGE = 0.0001


class WallSide(Enum):
    """Which kind of grid line a ray stopped on."""

    VERTICAL = 0
    HORIZONTAL = 1


@dataclass(frozen=True)
class RayHit:
    """Where a ray met a wall and its fisheye-corrected distance."""

    distance: float
    x: float
    y: float
    side: WallSide
    angle: float


def _tile(value: float) -> int:
    """Map index of a coordinate, truncating toward zero twice."""
    if not math.isfinite(value):
        return -1
    whole = int(value)
    return whole // TILE if whole >= 0 else -(-whole // TILE)


def _is_wall(grid: Sequence[str], rx: float, ry: float) -> bool:
    mx, my = _tile(rx), _tile(ry)
    if not 0 <= my < len(grid):
        return False
    row = grid[my]
    return 0 <= mx < len(row) and row[mx] == "1"


def _march(grid, rx, ry, dx, dy):
    for _ in range(_MAX_STEPS):
        if _is_wall(grid, rx, ry):
            break
        rx += dx
        ry += dy
    return rx, ry


def _flags(ra: float) -> tuple[int, int, int, float]:
    """Return the x step sign, y step sign, slope sign and tangent of a ray."""
    step_x = step_y = slope = 1
    tangent = 0.0
    radians = deg_to_rad(ra)
    if math.cos(radians) > EPSILON:
        step_y = -1
    if math.sin(radians) < -EPSILON:
        step_x = -1
    if ra not in (90, 270):
        tangent = math.tan(radians)
        if tangent < -EPSILON:
            slope = -1
    if ra in (90, 180):
        slope = -1
    return step_x, step_y, slope, tangent


def _truncate(distance: float) -> int:
    if not math.isfinite(distance) or distance > _INT_MAX:
        return _FAR
    return int(distance)


def _final_distance(ra, px, py, rx, ry, step_y):
    if ra in (90, 270):
        return _truncate((ry - py) * step_y)
    return _truncate((rx - px) / math.cos(deg_to_rad(ra)))


def _horizontal(grid, px, py, ra):
    step_x, step_y, slope, tangent = _flags(ra)
    step_y *= slope
    straight = ra in (90, 270)
    x_var = 0.0 if straight else TILE / tangent
    sine = math.sin(deg_to_rad(ra))
    base = (int(py) >> 6) << 6
    if sine > EPSILON:
        ry = base - _NUDGE
    elif sine < -EPSILON:
        ry = base + TILE
    else:
        ry = py
    rx = px if straight else px + (py - ry) / tangent
    rx, ry = _march(grid, rx, ry, step_x * x_var, step_y * TILE)
    return _final_distance(ra, px, py, rx, ry, step_y), rx, ry


def _vertical(grid, px, py, ra):
    step_x, step_y, slope, tangent = _flags(ra)
    step_x *= slope
    y_var = TILE * tangent
    cosine = math.cos(deg_to_rad(ra))
    base = (int(px) >> 6) << 6
    if cosine > EPSILON:
        rx = base + TILE
    elif cosine < -EPSILON:
        rx = base - _NUDGE
    else:
        rx = px
    ry = py + (px - rx) * tangent
    rx, ry = _march(grid, rx, ry, step_x * TILE, step_y * y_var)
    return _final_distance(ra, px, py, rx, ry, step_y), rx, ry


def _cast(grid, px, py, pa, ra, previous: WallSide) -> RayHit:
    hx = hy = vx = vy = 0.0
    dis_h = dis_v = 0
    if ra not in (0, 180):
        dis_h, hx, hy = _horizontal(grid, px, py, ra)
    if ra not in (90, 270):
        dis_v, vx, vy = _vertical(grid, px, py, ra)
    else:
        dis_v = dis_h + 1
    if ra in (0, 180):
        dis_h = dis_v + 1
    if dis_h < dis_v:
        x, y, distance, side = hx, hy, dis_h, WallSide.HORIZONTAL
    elif dis_h > dis_v:
        x, y, distance, side = vx, vy, dis_v, WallSide.VERTICAL
    else:
        x, y, distance, side = vx, vy, dis_v, previous
    corrected = distance * math.cos(deg_to_rad(adjust_angle(pa - ra)))
    return RayHit(distance=corrected, x=x, y=y, side=side, angle=ra)


def cast_ray(grid: Sequence[str], px: float, py: float, pa: float, ra: float) -> RayHit:
    """Cast one ray at angle ra (degrees) for a player looking at angle pa."""
    return _cast(grid, px, py, pa, ra, WallSide.VERTICAL)


def cast_rays(
    grid: Sequence[str], px: float, py: float, pa: float, count: int = SCREEN_WIDTH
) -> list[RayHit]:
    """Cast one ray per column across the field of view, left to right."""
    hits = []
    ra = adjust_angle(pa + FIELD_OF_VIEW / 2)
    step = FIELD_OF_VIEW / count
    side = WallSide.VERTICAL
    for _ in range(count):
        hit = _cast(grid, px, py, pa, ra, side)
        hits.append(hit)
        side = hit.side
        ra = adjust_angle(ra - step)
    return hits