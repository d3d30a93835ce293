# cubraycaster

A first-person raycaster for scene files in the `.cub` format. It reads a
scene, checks that it is valid, and then shows it in a 1400×1400 window titled
`cube`, with textured walls and flat floor and ceiling colours.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
cubraycaster scene.cub
```

Exactly one argument is accepted. The scene file is looked up in the `./maps/`
directory, so the line above opens `./maps/scene.cub`. The part of the name
from its first dot onwards must be exactly `.cub`.

Problems with the scene are written to standard error. Most messages start
with a line reading `Error`, followed by what went wrong, for example:

```
Error
There are less than 6 elements!
```

A texture path with the wrong extension is reported as
`Extension of the texture not valid : <>.xpm`, and textures that cannot be
decoded as `Wall textures could not be loaded!`, both without the `Error`
line.

### Controls

| Key          | Action              |
|--------------|---------------------|
| W / S        | move forward / back |
| A / D        | strafe left / right |
| Left / Right | turn                |
| Escape       | quit                |

Closing the window also quits. Moving into a wall slides the player along it.

## Scene format

A scene file starts with six elements. They can come in any order, each on its
own line, and blank lines may separate them. Each must appear exactly once.

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0
```

- `NO`, `SO`, `WE`, `EA` give the path of a texture for each wall face. The
  identifier must be followed by a blank. The part of the path from its first
  dot after the first character must be `.xpm`, and the file must exist and be
  readable. Paths are taken relative to the working directory.
- `F` and `C` give the floor and ceiling colours as three comma-separated
  values from 0 to 255. Blanks around the values are allowed.

The map comes after the elements:

```
111111
100101
101001
1100N1
111111
```

- `1` is a wall and `0` is open floor. Blanks are allowed as characters, but
  the player's reachable area must not touch one.
- Exactly one of `N`, `S`, `E` or `W` marks the starting cell and the direction
  the player faces.
- Every cell reachable from the start must be closed off by walls; the
  reachable area may not run off the edge of the grid.
- The map ends at the first blank line; nothing but blank lines may follow it.

### Textures

Textures are XPM images. Colours may be given as `#RGB`, `#RRGGBB`, `#RRRGGGBBB`
or `#RRRRGGGGBBBB`, as `None`, or as one of the names `black`, `white`, `red`,
`green`, `blue`, `yellow`, `cyan`, `magenta`, `gray` and `grey`. Each wall
texture is sampled as a 64×64 tile.

## Using it as a library

```python
from cubraycaster.mapgrid import load_scene
from cubraycaster.textures import load_textures
from cubraycaster.game import Game

scene = load_scene("maps/scene.cub")
textures = load_textures(scene)
Game(scene, textures).run()
```

`Game.step()` advances the player by one frame and redraws the view without
opening a window, returning the `Frame` it drew into.

The modules can also be used on their own:

- `cubraycaster.elements` parses texture and colour lines (`parse_element`,
  `parse_elements`, `check_texture_path`) and checks command arguments
  (`check_map_argument`).
- `cubraycaster.colors` validates and parses colour lines (`is_valid_color`,
  `parse_color`).
- `cubraycaster.mapgrid` checks the map grid and builds a `Scene`
  (`parse_scene`, `load_scene`, `parse_map_lines`, `find_start`,
  `has_valid_path`).
- `cubraycaster.textures` decodes XPM images into `Texture` objects
  (`parse_xpm`, `load_xpm`, `load_textures`).
- `cubraycaster.raycast` casts rays through a grid (`cast_ray`, `cast_rays`),
  returning `RayHit` values.
- `cubraycaster.player` holds a `Player` that reacts to `Key` presses and moves
  with wall sliding (`press`, `release`, `update`).
- `cubraycaster.render` draws wall columns, floor and ceiling into a `Frame`
  (`draw_column`, `render_frame`); `Frame.pixel` reads a colour back.

When a scene is invalid, a `CubError` is raised. Problems with the map grid
raise its subclass `MapError`, whose `kind` is a `MapErrorKind` telling what
went wrong. `format_error` in `cubraycaster.errors` gives the text shown on
standard error for an exception.

## What it does not do

The window size is fixed at 1400×1400. There are no sprites, doors, minimap,
mouse look or sound: the view shows walls, floor and ceiling only.