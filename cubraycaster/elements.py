"""Parsing of the texture and colour elements at the top of a scene file."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from .colors import is_valid_color, parse_color
from .config import MAP_DIRECTORY, WHITESPACE
from .errors import CubError

WRONG_ARGUMENTS = "Must be only 2 Arguments: cubraycaster <map>"
WRONG_EXTENSION = "Extension of the map file not valid : <map>.cub"
WRONG_TEXTURE_EXTENSION = "Extension of the texture not valid : <>.xpm"
INVALID_ELEMENT = "Invalid element or can't open path!"
DUPLICATE_ELEMENTS = "There are duplicates in the elements!"
MISSING_ELEMENTS = "There are less than 6 elements!"

ELEMENT_COUNT = 6


class ElementKind(Enum):
    """The six element identifiers, in the order they are tried."""

    NO = 0
    SO = 1
    WE = 2
    EA = 3
    F = 4
    C = 5

    @property
    def is_texture(self) -> bool:
        return self.value < 4


_FIELDS = {
    ElementKind.NO: "north",
    ElementKind.SO: "south",
    ElementKind.WE: "west",
    ElementKind.EA: "east",
    ElementKind.F: "floor",
    ElementKind.C: "ceiling",
}


@dataclass(frozen=True)
class SceneElements:
    """Texture paths and floor/ceiling colours of a scene."""

    north: str
    south: str
    west: str
    east: str
    floor: tuple[int, int, int]
    ceiling: tuple[int, int, int]

    @property
    def texture_paths(self) -> tuple[str, str, str, str]:
        """Texture paths in north, south, west, east order."""
        return self.north, self.south, self.west, self.east


def check_map_argument(argv: list[str]) -> str:
    """Check the command arguments and return the path of the scene file."""
    if len(argv) != 1:
        raise CubError(WRONG_ARGUMENTS)
    name = argv[0]
    dot = name.find(".")
    if dot == -1 or name[dot:] != ".cub":
        raise CubError(WRONG_EXTENSION)
    return MAP_DIRECTORY + name


def has_valid_suffix(path: str) -> bool:
    """Tell whether the part from the first dot after the first character is ".xpm"."""
    dot = path.find(".", 1)
    return dot != -1 and path[dot:] == ".xpm"


def check_texture_path(line: str) -> str:
    """Return the readable texture path named by a texture element line."""
    rest = line.lstrip(WHITESPACE)[2:]
    if not rest or rest[0] not in WHITESPACE:
        raise CubError(INVALID_ELEMENT)
    path = rest.lstrip(WHITESPACE)
    if path.endswith("\n"):
        path = path[:-1]
    if not has_valid_suffix(path):
        raise CubError(WRONG_TEXTURE_EXTENSION, headline=False)
    descriptor = os.open(path, os.O_RDONLY)
    os.close(descriptor)
    return path


def line_is_space(line: str) -> bool:
    """Tell whether a line holds nothing but blanks."""
    return all(char in WHITESPACE for char in line)


def parse_element(line: str) -> tuple[ElementKind, str | tuple[int, int, int]]:
    """Identify an element line and return its kind and value."""
    stripped = line.lstrip(WHITESPACE)
    kind = next((k for k in ElementKind if stripped.startswith(k.name)), None)
    if kind is None:
        raise CubError(INVALID_ELEMENT)
    if kind.is_texture:
        try:
            return kind, check_texture_path(stripped)
        except (CubError, OSError) as error:
            raise CubError(INVALID_ELEMENT) from error
    if not is_valid_color(stripped):
        raise CubError(INVALID_ELEMENT)
    return kind, parse_color(stripped)


def parse_elements(lines: Iterable[str]) -> tuple[SceneElements, list[str]]:
    """Read the six elements and return them with the lines that follow.

    Blank lines between elements are skipped; the returned lines start at
    the first non-blank line after the sixth element.
    """
    found: dict[ElementKind, str | tuple[int, int, int]] = {}
    remaining = iter(lines)
    rest: list[str] = []
    for line in remaining:
        if line_is_space(line):
            continue
        if len(found) == ELEMENT_COUNT:
            rest = [line, *remaining]
            break
        kind, value = parse_element(line)
        if kind in found:
            raise CubError(DUPLICATE_ELEMENTS)
        found[kind] = value
    if len(found) < ELEMENT_COUNT:
        raise CubError(MISSING_ELEMENTS)
    elements = SceneElements(**{_FIELDS[kind]: value for kind, value in found.items()})
    return elements, rest