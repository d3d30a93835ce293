"""Drawing of textured wall columns, floor and ceiling into a frame."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .config import TILE, rgb_to_hex
from .raycast import RayHit, WallSide, cast_rays


@dataclass
class Frame:
    """A 32-bit BGRX pixel buffer."""

    width: int
    height: int
    pixels: bytearray = field(default=None)

    def __post_init__(self) -> None:
        if self.pixels is None:
            self.pixels = bytearray(self.width * self.height * 4)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store a 0xRRGGBB colour at (x, y)."""
        index = (y * self.width + x) * 4
        self.pixels[index:index + 4] = bytes(
            (color & 0xFF, (color >> 8) & 0xFF, (color >> 16) & 0xFF, 0)
        )

    def pixel(self, x: int, y: int) -> int:
        """Read back the 0xRRGGBB colour at (x, y)."""
        index = (y * self.width + x) * 4
        b, g, r = self.pixels[index:index + 3]
        return (r << 16) | (g << 8) | b


def wall_texture_index(hit: RayHit) -> int:
    """Index of the north, south, west or east texture for a hit."""
    if hit.side is WallSide.VERTICAL:
        return 2 if 90 < hit.angle < 270 else 3
    return 0 if 0 < hit.angle < 180 else 1


def draw_column(frame: Frame, hit: RayHit, column: int, scene, textures, fov: float) -> None:
    """Draw one screen column: the wall slice, then floor and ceiling."""
    projection = (frame.width / 2) / math.tan(fov / 2)
    wall_height = math.inf if hit.distance <= 0 else TILE / hit.distance * projection
    if math.isinf(wall_height):
        top, bottom, diff = 0.0, float(frame.height), 0
    else:
        top = frame.height / 2 - wall_height / 2
        bottom = min(frame.height / 2 + wall_height / 2, float(frame.height))
        diff = 0
        if top < 0:
            diff = int(top)
            top = 0.0
    step = TILE / wall_height
    position = -diff * step
    coordinate = hit.x if hit.side is WallSide.HORIZONTAL else hit.y
    tex_x = int(math.fmod(coordinate, TILE))
    texture = textures[wall_texture_index(hit)]
    y = int(top)
    while y < bottom:
        frame.put_pixel(column, y, texture.color_at(tex_x, int(position)))
        position += step
        y += 1
    floor = rgb_to_hex(*scene.floor)
    for y in range(int(bottom), frame.height):
        frame.put_pixel(column, y, floor)
    ceiling = rgb_to_hex(*scene.ceiling)
    y = 0
    while y < top:
        frame.put_pixel(column, y, ceiling)
        y += 1


def render_frame(frame: Frame, scene, player, textures) -> Frame:
    """Cast a ray per column and draw the whole view into the frame."""
    hits = cast_rays(scene.grid, player.px, player.py, player.pa, frame.width)
    for column, hit in enumerate(hits):
        draw_column(frame, hit, column, scene, textures, player.fov)
    return frame