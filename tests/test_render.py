import math

import pytest

from cubraycaster.elements import SceneElements
from cubraycaster.mapgrid import Scene
from cubraycaster.player import Player
from cubraycaster.raycast import RayHit, WallSide
from cubraycaster.render import Frame, draw_column, render_frame, wall_texture_index
from cubraycaster.textures import Texture

WALL = 0x112233
TEXTURES = tuple(Texture(width=1, height=1, pixels=((WALL + i,),)) for i in range(4))


def make_scene():
    grid = ("11111", "10001", "10N01", "10001", "11111")
    elements = SceneElements("n.xpm", "s.xpm", "w.xpm", "e.xpm", (10, 20, 30), (40, 50, 60))
    return Scene(elements=elements, grid=grid, start_x=2, start_y=2)


def test_put_pixel_bytes():
    frame = Frame(2, 2)
    frame.put_pixel(1, 1, 0x0A0B0C)
    assert frame.pixels[12:16] == bytes((0x0C, 0x0B, 0x0A, 0))
    assert frame.pixel(1, 1) == 0x0A0B0C


@pytest.mark.parametrize(
    "side,angle,index",
    [
        (WallSide.VERTICAL, 180, 2),
        (WallSide.VERTICAL, 10, 3),
        (WallSide.HORIZONTAL, 90, 0),
        (WallSide.HORIZONTAL, 270, 1),
    ],
)
def test_wall_texture_index(side, angle, index):
    hit = RayHit(distance=10, x=0, y=0, side=side, angle=angle)
    assert wall_texture_index(hit) == index


def test_draw_column_layers():
    frame = Frame(8, 40)
    hit = RayHit(distance=200, x=70, y=100, side=WallSide.HORIZONTAL, angle=90)
    draw_column(frame, hit, 3, make_scene(), TEXTURES, math.pi / 3)
    assert frame.pixel(3, 0) == 0x28323C
    assert frame.pixel(3, 39) == 0x0A141E
    assert frame.pixel(3, 20) == WALL
    assert frame.pixel(0, 20) == 0


def test_close_wall_fills_column():
    frame = Frame(4, 16)
    hit = RayHit(distance=1, x=5, y=5, side=WallSide.VERTICAL, angle=0)
    draw_column(frame, hit, 0, make_scene(), TEXTURES, math.pi / 3)
    assert all(frame.pixel(0, y) == WALL + 3 for y in range(16))


def test_render_frame_paints_every_column():
    scene = make_scene()
    frame = render_frame(Frame(16, 16), scene, Player.from_scene(scene), TEXTURES)
    assert all(frame.pixel(x, 0) == 0x28323C for x in range(16))
    assert all(frame.pixel(x, 15) == 0x0A141E for x in range(16))