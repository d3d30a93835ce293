"""Loading of XPM wall textures."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .config import TILE
from .errors import CubError

TRANSPARENT = 0xFF000000
TEXTURE_LOAD_FAILED = "Wall textures could not be loaded!"

_TOKENS = re.compile(r'/\*.*?\*/|"((?:[^"\\]|\\.)*)"', re.S)
_COLOR_KEYS = ("c", "g", "g4", "m", "s")
_PREFERRED_KEYS = ("c", "g", "g4", "m")
_NAMED_COLORS = {
    "black": 0x000000,
    "white": 0xFFFFFF,
    "red": 0xFF0000,
    "green": 0x00FF00,
    "blue": 0x0000FF,
    "yellow": 0xFFFF00,
    "cyan": 0x00FFFF,
    "magenta": 0xFF00FF,
    "gray": 0xBEBEBE,
    "grey": 0xBEBEBE,
}


@dataclass(frozen=True)
class Texture:
    """A decoded image: rows of 0xRRGGBB pixel values."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def color_at(self, x: int, y: int) -> int:
        """Return the pixel for tile-relative texture coordinates."""
        column = (x % TILE) % self.width
        row = (y % TILE) % self.height
        return self.pixels[row][column]


def _scale(value: int, digits: int) -> int:
    bits = digits * 4
    if bits == 4:
        return value * 17
    return value >> (bits - 8)


def _parse_color_value(value: str) -> int:
    lowered = value.lower()
    if lowered == "none":
        return TRANSPARENT
    if value.startswith("#"):
        digits = value[1:]
        if len(digits) not in (3, 6, 9, 12) or not re.fullmatch(r"[0-9a-fA-F]+", digits):
            raise ValueError(f"bad colour value: {value!r}")
        size = len(digits) // 3
        red, green, blue = (
            _scale(int(digits[i * size:(i + 1) * size], 16), size) for i in range(3)
        )
        return (red << 16) | (green << 8) | blue
    name = lowered.replace(" ", "")
    if name in _NAMED_COLORS:
        return _NAMED_COLORS[name]
    raise ValueError(f"unknown colour name: {value!r}")


def _color_spec(spec: str) -> int:
    values: dict[str, list[str]] = {}
    key = None
    for token in spec.split():
        if token in _COLOR_KEYS:
            key = token
            values[key] = []
        elif key is None:
            raise ValueError(f"bad colour line: {spec!r}")
        else:
            values[key].append(token)
    for preferred in _PREFERRED_KEYS:
        if values.get(preferred):
            return _parse_color_value(" ".join(values[preferred]))
    raise ValueError(f"colour line without a colour: {spec!r}")


def parse_xpm(text: str) -> Texture:
    """Decode the text of an XPM image."""
    strings = [match.group(1) for match in _TOKENS.finditer(text) if match.group(1) is not None]
    if not strings:
        raise ValueError("no XPM values found")
    header = strings[0].split()
    if len(header) < 4 or not all(part.isdigit() for part in header[:4]):
        raise ValueError(f"bad XPM header: {strings[0]!r}")
    width, height, count, per_pixel = (int(part) for part in header[:4])
    if width <= 0 or height <= 0 or per_pixel <= 0:
        raise ValueError("XPM image has no pixels")
    color_lines = strings[1:1 + count]
    rows = strings[1 + count:1 + count + height]
    if len(color_lines) < count or len(rows) < height:
        raise ValueError("XPM image is truncated")
    palette = {line[:per_pixel]: _color_spec(line[per_pixel:]) for line in color_lines}
    pixels = []
    for row in rows:
        if len(row) < width * per_pixel:
            raise ValueError(f"XPM row too short: {row!r}")
        keys = (row[i * per_pixel:(i + 1) * per_pixel] for i in range(width))
        try:
            pixels.append(tuple(palette[key] for key in keys))
        except KeyError as error:
            raise ValueError(f"undefined XPM pixel {error.args[0]!r}") from error
    return Texture(width=width, height=height, pixels=tuple(pixels))


def load_xpm(path: str) -> Texture:
    """Read and decode the XPM file at the given path."""
    with open(path, encoding="utf-8") as handle:
        return parse_xpm(handle.read())


def load_textures(scene) -> tuple[Texture, Texture, Texture, Texture]:
    """Load the north, south, west and east textures of a scene."""
    try:
        return tuple(load_xpm(path) for path in scene.texture_paths)
    except (OSError, ValueError) as error:
        raise CubError(TEXTURE_LOAD_FAILED, headline=False) from error