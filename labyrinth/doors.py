"""
Door placement.

Doors go in dead ends whose only opening faces north or south. The door is
written into the opening itself as "-o-", so the cell reads as a small room
with a single door. Dead ends that open east or west are left alone.
"""

from typing import List, Optional, Tuple

from .grid import (
    DOOR,
    HORIZONTAL_WALL,
    Direction,
    MazeGrid,
    PASSAGE,
    Position,
    boundary_position,
    cell_position,
    iter_cells,
)


def _walled_directions(grid: MazeGrid, row: int, col: int) -> List[Direction]:
    """Directions in which the cell is closed off (not a passage, not a door)."""
    return [
        direction
        for direction in (Direction.WEST, Direction.EAST, Direction.NORTH, Direction.SOUTH)
        if not grid.is_open(row, col, direction)
    ]


def _door_direction(grid: MazeGrid, row: int, col: int) -> Optional[Direction]:
    """
    The side a door should be placed on for this cell, if any.

    Only cells with exactly three walls qualify, and only when the fourth,
    open side is north or south.
    """
    walls = _walled_directions(grid, row, col)
    if len(walls) != 3:
        return None
    if Direction.NORTH in walls and Direction.SOUTH not in walls:
        return Direction.SOUTH
    if Direction.SOUTH in walls and Direction.NORTH not in walls:
        return Direction.NORTH
    return None


def place_doors(grid: MazeGrid) -> Tuple[MazeGrid, List[Position]]:
    """
    Add doors to the north/south dead ends of a generated maze.

    Cells are visited in row-major order on a copy of the grid, so a door
    placed earlier counts as an opening when later cells are checked.

    Returns:
        (new grid, positions of the door characters that were written)
    """
    result = grid.copy()
    doors: List[Position] = []

    for row, col in iter_cells(result.width, result.height):
        center = cell_position(row, col)
        if result.get(center.row, center.column) != PASSAGE:
            continue

        direction = _door_direction(result, row, col)
        if direction is None:
            continue

        door = boundary_position(row, col, direction)
        if result.get(door.row, door.column) == DOOR:
            continue
        result.set(door.row, door.column - 1, HORIZONTAL_WALL)
        result.set(door.row, door.column, DOOR)
        result.set(door.row, door.column + 1, HORIZONTAL_WALL)
        doors.append(door)

    return result, doors
