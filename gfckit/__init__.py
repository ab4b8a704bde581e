"""Building blocks for simple 2D games: colours, vectors, rectangles, sprites, game state and cached file loading."""

__version__ = "0.1.0"
__all__ = [
    "color",
    "vector",
    "rectangle",
    "filemgr",
    "prop",
    "game",
    "sprite_list",
    "timetext",
    "sprite_geometry",
    "sprite",
]