"""
Maze Generation Algorithm
=========================

We carve a perfect maze (a spanning tree over every cell) out of a fully
walled grid with a randomized depth-first walk.

1. Start with every cell enclosed by four walls and marked unvisited
2. Pick a random start cell, mark it visited and push it onto the path
3. While some cell is still unvisited:
   a. Collect the unvisited neighbours of the current cell
   b. If there are any, pick one at random, knock down the wall between
      the two cells, mark it visited, push it and make it current
   c. Otherwise pop the path to backtrack to the previous cell
4. Every cell was entered exactly once through exactly one wall, so the
   maze has width * height - 1 passages and no loops
"""

import random
from typing import List, Optional, Tuple

import numpy as np

from .grid import (
    Direction,
    MazeGrid,
    PASSAGE,
    boundary_position,
)

Cell = Tuple[int, int]

# Order neighbours are considered in before the random pick
NEIGHBOR_DIRECTIONS = [Direction.NORTH, Direction.SOUTH, Direction.WEST, Direction.EAST]


def _unvisited_neighbors(
    unvisited: np.ndarray, current: Cell
) -> List[Tuple[Cell, Direction]]:
    """Neighbouring cells of `current` that are in bounds and not yet carved."""
    height, width = unvisited.shape
    row, col = current
    neighbors = []
    for direction in NEIGHBOR_DIRECTIONS:
        d_row, d_col = direction.step()
        next_row, next_col = row + d_row, col + d_col
        if 0 <= next_row < height and 0 <= next_col < width and unvisited[next_row, next_col]:
            neighbors.append(((next_row, next_col), direction))
    return neighbors


def carve_passage(grid: MazeGrid, cell: Cell, direction: Direction) -> None:
    """
    Remove the wall between `cell` and its neighbour in `direction`.

    North/south walls are three characters wide (the junctions stay);
    east/west walls are the single vertical wall character.
    """
    position = boundary_position(cell[0], cell[1], direction)
    if direction in (Direction.NORTH, Direction.SOUTH):
        for column in range(position.column - 1, position.column + 2):
            grid.set(position.row, column, PASSAGE)
    else:
        grid.set(position.row, position.column, PASSAGE)


def generate_maze(width: int, height: int, rng: Optional[random.Random] = None) -> MazeGrid:
    """
    Generate a perfect maze of width x height cells.

    Args:
        width: Number of cells across
        height: Number of cells down
        rng: Random source; pass a seeded random.Random for reproducible mazes

    Returns:
        A MazeGrid with every cell reachable from every other by exactly one path

    Raises:
        ValueError: If width or height is not a positive integer
    """
    grid = MazeGrid.walled(width, height)
    if rng is None:
        rng = random.Random()

    total_cells = width * height
    unvisited = np.ones((height, width), dtype=bool)

    current: Cell = (rng.randrange(height), rng.randrange(width))
    path: List[Cell] = [current]
    unvisited[current] = False
    visited = 1

    while visited < total_cells:
        neighbors = _unvisited_neighbors(unvisited, current)

        if neighbors:
            next_cell, direction = rng.choice(neighbors)
            carve_passage(grid, current, direction)

            current = next_cell
            unvisited[current] = False
            visited += 1
            path.append(current)
        else:
            # Dead end, back up a step and keep going
            current = path.pop()

    return grid


def count_passages(grid: MazeGrid) -> int:
    """Count the walls that have been knocked down between neighbouring cells."""
    passages = 0
    for row in range(grid.height):
        for col in range(grid.width):
            if col + 1 < grid.width and grid.is_open(row, col, Direction.EAST):
                passages += 1
            if row + 1 < grid.height and grid.is_open(row, col, Direction.SOUTH):
                passages += 1
    return passages


def open_neighbors(grid: MazeGrid, cell: Cell) -> List[Cell]:
    """Cells reachable from `cell` in one step through a passage or door."""
    row, col = cell
    neighbors = []
    for direction in NEIGHBOR_DIRECTIONS:
        d_row, d_col = direction.step()
        next_row, next_col = row + d_row, col + d_col
        if not (0 <= next_row < grid.height and 0 <= next_col < grid.width):
            continue
        if grid.is_open(row, col, direction):
            neighbors.append((next_row, next_col))
    return neighbors


def dead_ends(grid: MazeGrid) -> List[Cell]:
    """Cells with exactly one way in or out."""
    return [
        (row, col)
        for row in range(grid.height)
        for col in range(grid.width)
        if len(open_neighbors(grid, (row, col))) == 1
    ]
