"""Player state, keyboard intent and movement with wall checks."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum

from .config import ANGLE, EPSILON, FIELD_OF_VIEW, SPEED, TILE, adjust_angle, deg_to_rad

_START_ANGLES = {"N": 90.0, "S": 270.0, "W": 180.0, "E": 0.0}
_FORWARD_PROBE = 48
_BACKWARD_PROBE = 24
_SIDE_PROBE = 24
_WALL_MARGIN = SPEED + 20


class Key(IntEnum):
    """Key codes the game reacts to."""

    W = 119
    A = 97
    S = 115
    D = 100
    LEFT = 65361
    RIGHT = 65363
    ESCAPE = 65307


def _trunc_div(value: int) -> int:
    """Integer division by the tile size, truncating toward zero."""
    return value // TILE if value >= 0 else -(-value // TILE)


def _cell(grid: Sequence[str], x: int, y: int) -> str:
    """Map character under integer world coordinates; outside counts as wall."""
    mx, my = _trunc_div(x), _trunc_div(y)
    if not 0 <= my < len(grid) or not 0 <= mx < len(grid[my]):
        return "1"
    return grid[my][mx]


def _blocked(grid: Sequence[str], x: float, y: float) -> bool:
    return _cell(grid, int(x), int(y)) == "1"


@dataclass
class Player:
    """Position in world units, view angle in degrees and movement intent."""

    px: float
    py: float
    pa: float
    moving_left_right: int = 0
    moving_back_forth: int = 0
    look_rot: int = 0
    fov: float = deg_to_rad(FIELD_OF_VIEW)

    def __post_init__(self) -> None:
        self._update_direction()

    def _update_direction(self) -> None:
        self.pdx = math.cos(deg_to_rad(self.pa))
        self.pdy = -math.sin(deg_to_rad(self.pa))

    @classmethod
    def from_scene(cls, scene) -> Player:
        """Place a player at the centre of the scene's spawn cell."""
        return cls(
            px=scene.start_x * TILE + 32,
            py=scene.start_y * TILE + 32,
            pa=_START_ANGLES[scene.orientation],
        )

    def _cos_pair(self, offset: float) -> tuple[float, float]:
        return (
            math.cos(deg_to_rad(self.pa)),
            math.cos(deg_to_rad(adjust_angle(self.pa + offset))),
        )

    def _right_up(self) -> bool:
        a, b = self._cos_pair(-90)
        return a > EPSILON and b > EPSILON

    def _right_down(self) -> bool:
        a, b = self._cos_pair(90)
        return a > EPSILON and b > EPSILON

    def _left_up(self) -> bool:
        a, b = self._cos_pair(90)
        return a < -EPSILON and b < -EPSILON

    def _left_down(self) -> bool:
        a, b = self._cos_pair(-90)
        return a < -EPSILON and b < -EPSILON

    def _free(self, grid, dx: int, dy: int) -> bool:
        return _cell(grid, int(self.px) + dx, int(self.py) + dy) != "1"

    def _forward_along_wall(self, grid) -> None:
        m = _WALL_MARGIN
        if self._right_up() and self._free(grid, 0, -m):
            self.py -= SPEED
        elif self._right_down() and self._free(grid, 0, m):
            self.py += SPEED
        elif self._left_up() and self._free(grid, 0, -m):
            self.py -= SPEED
        elif self._left_down() and self._free(grid, 0, m):
            self.py += SPEED
        elif self._right_up() and self._free(grid, SPEED, 0):
            self.px += SPEED
        elif self._right_down() and self._free(grid, SPEED, 0):
            self.px += SPEED
        elif self._left_up() and self._free(grid, -SPEED, 0):
            self.px -= SPEED
        elif self._left_down() and self._free(grid, -SPEED, 0):
            self.px -= SPEED

    def _backward_along_wall(self, grid) -> None:
        m = _WALL_MARGIN
        if self._right_up() and self._free(grid, -SPEED, 0):
            self.px -= SPEED
        elif self._right_down() and self._free(grid, -SPEED, 0):
            self.px -= SPEED
        elif self._left_up() and self._free(grid, SPEED, 0):
            self.px += SPEED
        elif self._left_down() and self._free(grid, SPEED, 0):
            self.px += SPEED
        elif self._right_up() and self._free(grid, 0, m):
            self.py += SPEED
        elif self._right_down() and self._free(grid, 0, -m):
            self.py -= SPEED
        elif self._left_up() and self._free(grid, 0, m):
            self.py += SPEED
        elif self._left_down() and self._free(grid, 0, -m):
            self.py -= SPEED

    def move_forward(self, grid: Sequence[str]) -> None:
        """Step forward, sliding along a wall when one is ahead."""
        if _blocked(grid, self.px + self.pdx * _FORWARD_PROBE, self.py + self.pdy * _FORWARD_PROBE):
            self._forward_along_wall(grid)
            return
        self.px += self.pdx * SPEED
        self.py += self.pdy * SPEED

    def move_backward(self, grid: Sequence[str]) -> None:
        """Step backward, sliding along a wall when one is behind."""
        if _blocked(grid, self.px - self.pdx * _BACKWARD_PROBE, self.py - self.pdy * _BACKWARD_PROBE):
            self._backward_along_wall(grid)
            return
        self.px -= self.pdx * SPEED
        self.py -= self.pdy * SPEED

    def _strafe(self, grid, offset: float) -> None:
        radians = deg_to_rad(adjust_angle(self.pa + offset))
        move_x, move_y = math.cos(radians), -math.sin(radians)
        if _blocked(grid, self.px + move_x * _SIDE_PROBE, self.py + move_y * _SIDE_PROBE):
            return
        self.px += move_x * SPEED
        self.py += move_y * SPEED

    def strafe_left(self, grid: Sequence[str]) -> None:
        """Step sideways to the left unless a wall is there."""
        self._strafe(grid, 90)

    def strafe_right(self, grid: Sequence[str]) -> None:
        """Step sideways to the right unless a wall is there."""
        self._strafe(grid, -90)

    def rotate(self, direction: int) -> None:
        """Turn left for -1 and right for 1 by the rotation step."""
        if direction == -1:
            self.pa = adjust_angle(self.pa + ANGLE)
        elif direction == 1:
            self.pa = adjust_angle(self.pa - ANGLE)
        else:
            return
        self._update_direction()

    def press(self, key: int) -> bool:
        """Record a key press; return True when it asks to quit."""
        if key == Key.ESCAPE:
            return True
        if key == Key.A:
            self.moving_left_right = -1
        elif key == Key.D:
            self.moving_left_right = 1
        elif key == Key.S:
            self.moving_back_forth = -1
        elif key == Key.W:
            self.moving_back_forth = 1
        elif key == Key.LEFT:
            self.look_rot = -1
        elif key == Key.RIGHT:
            self.look_rot = 1
        return False

    def release(self, key: int) -> None:
        """Clear the movement intent of a released key."""
        if key in (Key.A, Key.D):
            self.moving_left_right = 0
        elif key in (Key.W, Key.S):
            self.moving_back_forth = 0
        elif key in (Key.LEFT, Key.RIGHT):
            self.look_rot = 0

    def update(self, grid: Sequence[str]) -> None:
        """Apply one frame of the current movement intent."""
        if self.moving_back_forth == 1:
            self.move_forward(grid)
        if self.moving_back_forth == -1:
            self.move_backward(grid)
        if self.moving_left_right == -1:
            self.strafe_left(grid)
        if self.moving_left_right == 1:
            self.strafe_right(grid)
        self.rotate(self.look_rot)