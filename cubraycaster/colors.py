"""Validation and parsing of floor and ceiling colour elements."""

from __future__ import annotations

import re

from .config import WHITESPACE

_SEPARATOR = re.compile(r"[, \t\n\v\f\r]")
_DIGITS = re.compile(r"[0-9]*")
_REMOVED = WHITESPACE + "\a"


def _components(text: str) -> list[int] | None:
    """Scan comma separated channels; None when the text is malformed.

    A channel is only checked once a comma or a blank follows it, so a last
    channel that runs to the very end of the text is not counted.
    """
    values: list[int] = []
    while True:
        match = _SEPARATOR.search(text)
        if match is None:
            return values
        token = text[: match.start()]
        after = text[match.start():].lstrip(WHITESPACE)
        if not _DIGITS.fullmatch(token) or (after and not after.startswith(",")):
            return None
        value = int(token) if token else 0
        if value > 255:
            return None
        values.append(value)
        comma = after.startswith(",")
        if len(values) > 3 or (len(values) == 3 and comma):
            return None
        text = (after[1:] if comma else after).lstrip(WHITESPACE)


def is_valid_color(line: str) -> bool:
    """Tell whether a line such as "F 220,100,0\\n" is a valid colour element."""
    body = line.lstrip(WHITESPACE)[1:]
    if not body or body[0] not in WHITESPACE:
        return False
    values = _components(body.lstrip(WHITESPACE))
    return values is not None and len(values) == 3


def handle_spaces(text: str) -> str:
    """Remove every blank character from the text."""
    return "".join(char for char in text if char not in _REMOVED)


def parse_color(line: str) -> tuple[int, int, int]:
    """Return the three channels of a colour element line."""
    if not is_valid_color(line):
        raise ValueError(f"invalid colour element: {line!r}")
    parts = handle_spaces(line.lstrip(WHITESPACE)[1:]).split(",")
    red, green, blue = (int(part) if part else 0 for part in parts)
    return red, green, blue