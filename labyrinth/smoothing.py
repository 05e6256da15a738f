"""
Box-drawing smoothing.

Swaps the ASCII walls of a finished maze for Unicode box-drawing characters.
Junctions pick their glyph from which of their four neighbours are
non-blank, so corners round off and dead-end walls get a stub.
"""

from typing import Dict, Tuple

import numpy as np

from .grid import HORIZONTAL_WALL, JUNCTION, PASSAGE, VERTICAL_WALL, MazeGrid

WALL_GLYPHS = {
    HORIZONTAL_WALL: "─",
    VERTICAL_WALL: "│",
}

# (north, south, west, east) -> glyph
# An isolated junction (no neighbours) has no entry and stays a "+".
JUNCTION_GLYPHS: Dict[Tuple[bool, bool, bool, bool], str] = {
    (True, True, True, True): "┼",
    # T-junctions, named by the missing side
    (True, True, True, False): "┤",
    (True, True, False, True): "├",
    (True, False, True, True): "┴",
    (False, True, True, True): "┬",
    # Straight runs
    (True, True, False, False): "│",
    (False, False, True, True): "─",
    # Corners
    (True, False, False, True): "╰",
    (True, False, True, False): "╯",
    (False, True, False, True): "╭",
    (False, True, True, False): "╮",
    # Stubs, pointing at the one connected side
    (False, False, False, True): "╶",
    (False, False, True, False): "╴",
    (True, False, False, False): "╵",
    (False, True, False, False): "╷",
}


def junction_glyph(grid: MazeGrid, row: int, column: int) -> str:
    """The box-drawing glyph for the junction at (row, column) of an ASCII grid."""
    chars = grid.chars
    north = row > 0 and chars[row - 1, column] != PASSAGE
    south = row < grid.rows - 1 and chars[row + 1, column] != PASSAGE
    west = column > 0 and chars[row, column - 1] != PASSAGE
    east = column < grid.columns - 1 and chars[row, column + 1] != PASSAGE
    return JUNCTION_GLYPHS.get((bool(north), bool(south), bool(west), bool(east)), JUNCTION)


def smooth_walls(grid: MazeGrid) -> MazeGrid:
    """
    Return a copy of the maze drawn with box-drawing characters.

    Every neighbour check reads the untouched input grid, so the result does
    not depend on the order junctions are visited in.

    Raises:
        ValueError: If the grid has already been smoothed
    """
    if grid.smoothed:
        raise ValueError("Maze walls have already been smoothed")

    result = grid.copy()
    result.smoothed = True

    for (row, column), char in np.ndenumerate(grid.chars):
        if char in WALL_GLYPHS:
            result.chars[row, column] = WALL_GLYPHS[char]
        elif char == JUNCTION:
            result.chars[row, column] = junction_glyph(grid, row, column)

    return result
