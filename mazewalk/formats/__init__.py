"""
Maze file formats module.

Provides reading and rendering of mazes:
- read_map_file / parse_map_text: text-map input
- read_coordinate_file / parse_coordinate_text: coordinate-list input
- render_map: grid with the path marked
- render_coordinates: path as "+ROW COL LEVEL" lines
- render_result: either of the above, or the no-path message
"""

from mazewalk.formats.reader import (
    parse_coordinate_text,
    parse_map_text,
    read_coordinate_file,
    read_map_file,
)
from mazewalk.formats.writer import render_coordinates, render_map, render_result

__all__ = [
    "parse_coordinate_text",
    "parse_map_text",
    "read_coordinate_file",
    "read_map_file",
    "render_coordinates",
    "render_map",
    "render_result",
]
