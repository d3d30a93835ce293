"""Errors raised while loading and checking a scene."""

from __future__ import annotations

from enum import Enum


class CubError(Exception):
    """A scene or startup problem with a message meant for the user."""

    def __init__(self, message: str, *, headline: bool = True) -> None:
        super().__init__(message)
        self.message = message
        self.headline = headline


class MapErrorKind(Enum):
    """The ways the map part of a scene can be wrong."""

    ALLOCATION = "Failed Allocation!"
    LEFTOVERS = "Wrong map format, remaining leftovers!"
    EMPTY = "Empty map!"
    WRONG_CHARACTERS = "The map contains wrong characters!"
    SPAWN = "The map should have 1 spawning position!"
    NOT_PLAYABLE = "The playable part of the map is invalid!"
    COPY_FAILED = "The copy of map to data failed!"


class MapError(CubError):
    """A problem with the map grid of a scene."""

    def __init__(self, kind: MapErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind


def format_error(error: BaseException) -> str:
    """Return the text written to standard error for an exception."""
    if isinstance(error, CubError):
        if error.headline:
            return f"Error\n{error.message}\n"
        return f"{error.message}\n"
    if isinstance(error, OSError) and error.strerror:
        return f"{error.strerror}\n"
    return f"{error}\n"