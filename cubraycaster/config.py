"""Game constants and small angle and colour helpers."""

import math

SCREEN_WIDTH = 1400
SCREEN_HEIGHT = 1400
MAX_SCREEN_WIDTH = 2560
MAX_SCREEN_HEIGHT = 1440
TILE = 64
FIELD_OF_VIEW = 60
SPEED = 10
ANGLE = 5
EPSILON = 0.0000001
PI = math.pi
LOG = False

# The characters the scene format treats as blanks: codes 9 to 13 and space.
WHITESPACE = " \t\n\v\f\r"

MAP_DIRECTORY = "./maps/"


def deg_to_rad(angle: float) -> float:
    """Convert an angle in degrees to radians."""
    return angle / 180 * PI


def adjust_angle(angle: float) -> float:
    """Bring an angle that went one turn out of range back into [0, 360]."""
    if angle < 0:
        return angle + 360
    if angle > 360:
        return angle - 360
    return angle


def rgb_to_hex(r: int, g: int, b: int) -> int:
    """Pack three colour channels into a 0xRRGGBB integer."""
    return (r << 16) | (g << 8) | b