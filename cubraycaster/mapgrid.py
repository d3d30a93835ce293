"""Checking of the map grid and assembly of a whole scene."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .config import WHITESPACE
from .elements import SceneElements, line_is_space, parse_elements
from .errors import MapError, MapErrorKind

SPAWN_CHARACTERS = "NSEW"
MAP_CHARACTERS = SPAWN_CHARACTERS + "01"
_BARRIERS = "12"


@dataclass(frozen=True)
class Scene:
    """A fully checked scene: its elements, its grid and the spawn cell."""

    elements: SceneElements
    grid: tuple[str, ...]
    start_x: int
    start_y: int

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def orientation(self) -> str:
        """The spawn character, one of N, S, E or W."""
        return self.grid[self.start_y][self.start_x]

    @property
    def floor(self) -> tuple[int, int, int]:
        return self.elements.floor

    @property
    def ceiling(self) -> tuple[int, int, int]:
        return self.elements.ceiling

    @property
    def texture_paths(self) -> tuple[str, str, str, str]:
        return self.elements.texture_paths


def count_spawns(line: str) -> int:
    """Count the spawn characters in a map line."""
    return sum(char in SPAWN_CHARACTERS for char in line)


def _has_valid_characters(line: str) -> bool:
    return all(char in MAP_CHARACTERS or char in WHITESPACE for char in line)


def parse_map_lines(lines: Iterable[str]) -> tuple[str, ...]:
    """Check the map lines of a scene and return its grid rows.

    The map runs up to the first blank line; anything but blanks after it
    is an error. Trailing newlines are removed from the rows.
    """
    remaining = iter(lines)
    rows: list[str] = []
    spawns = 0
    line = next(remaining, None)
    while line is not None:
        if not _has_valid_characters(line):
            raise MapError(MapErrorKind.WRONG_CHARACTERS)
        spawns += count_spawns(line)
        rows.append(line)
        line = next(remaining, None)
        if line is not None and line_is_space(line):
            break
    if line is None and not rows:
        raise MapError(MapErrorKind.EMPTY)
    if line is not None and not all(line_is_space(rest) for rest in remaining):
        raise MapError(MapErrorKind.LEFTOVERS)
    if spawns != 1:
        raise MapError(MapErrorKind.SPAWN)
    return tuple(row[:-1] if row.endswith("\n") else row for row in rows)


def find_start(grid: Sequence[str]) -> tuple[int, int]:
    """Return the (x, y) cell of the last spawn character in the grid."""
    found = None
    for y, row in enumerate(grid):
        for x, char in enumerate(row):
            if char in SPAWN_CHARACTERS:
                found = (x, y)
    if found is None:
        raise MapError(MapErrorKind.SPAWN)
    return found


def has_valid_path(grid: Sequence[str], y: int, x: int) -> bool:
    """Tell whether the region reachable from (x, y) is closed by walls.

    The region fails when it reaches a blank cell or leaves the grid.
    """
    cells = [list(row) for row in grid]
    pending = [(y, x)]
    while pending:
        cy, cx = pending.pop()
        if not 0 <= cy < len(cells) or not 0 <= cx < len(cells[cy]):
            return False
        char = cells[cy][cx]
        if char in WHITESPACE:
            return False
        if char in _BARRIERS:
            continue
        cells[cy][cx] = "2"
        pending.extend(((cy, cx - 1), (cy, cx + 1), (cy + 1, cx), (cy - 1, cx)))
    return True


def parse_scene(lines: Iterable[str]) -> Scene:
    """Parse and check the lines of a scene file."""
    elements, rest = parse_elements(lines)
    grid = parse_map_lines(rest)
    start_x, start_y = find_start(grid)
    if not has_valid_path(grid, start_y, start_x):
        raise MapError(MapErrorKind.NOT_PLAYABLE)
    return Scene(elements=elements, grid=grid, start_x=start_x, start_y=start_y)


def load_scene(path: str) -> Scene:
    """Read and check the scene file at the given path."""
    with open(path, encoding="utf-8", errors="surrogateescape", newline="\n") as handle:
        return parse_scene(handle)