"""Grid-based raycaster: .cub scene loading, XPM textures, ray casting and a pygame window."""

__version__ = "0.1.0"
__all__ = [
    "colors",
    "config",
    "elements",
    "errors",
    "game",
    "mapgrid",
    "player",
    "raycast",
    "render",
    "textures",
]