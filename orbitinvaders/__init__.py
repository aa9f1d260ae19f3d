"""Renderer-independent core of a 2D arcade game: maths, collisions, animation, particles, input, camera, text, tiles and saves."""

__version__ = "0.1.0"

__all__ = [
    "angles",
    "mathutil",
    "vec",
    "bounds",
    "matrix2d",
    "entity",
    "collide",
    "rand",
    "animation",
    "partsys",
    "savestate",
    "raw_input",
    "input",
    "input_conf",
    "camera",
    "text",
    "tilemap",
    "drawraw",
    "debugdraw",
    "loop",
]