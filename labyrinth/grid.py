"""
Character grid shared by every maze pass.

Each logical cell occupies a 4-wide by 2-tall block of characters and shares
its walls and junctions with its neighbours:

        0123456789012
      0 +---+---+---+
      1 |       |   |
      2 +---+   +-o-+
      3 |           |
      4 +---+---+---+

A maze of W x H cells is therefore (4W + 1) columns by (2H + 1) rows.
Cell interiors sit on odd rows at columns 2, 6, 10, ... and are the only
places items and creatures should be put.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, List, Tuple

import numpy as np

JUNCTION = "+"
HORIZONTAL_WALL = "-"
VERTICAL_WALL = "|"
PASSAGE = " "
DOOR = "o"

CELL_WIDTH = 4
CELL_HEIGHT = 2


@dataclass(frozen=True)
class Position:
    """A position in the character grid."""

    row: int
    column: int


class Direction(Enum):
    """Cardinal directions between neighbouring cells."""

    NORTH = auto()
    SOUTH = auto()
    EAST = auto()
    WEST = auto()

    def step(self) -> Tuple[int, int]:
        """Returns the (row, col) cell offset for moving one cell this way."""
        steps = {
            Direction.NORTH: (-1, 0),
            Direction.SOUTH: (1, 0),
            Direction.EAST: (0, 1),
            Direction.WEST: (0, -1),
        }
        return steps[self]


def x_offset(col: int) -> int:
    return col * CELL_WIDTH + 2


def y_offset(row: int) -> int:
    return row * CELL_HEIGHT + 1


def cell_position(row: int, col: int) -> Position:
    """Character position of the interior of cell (row, col)."""
    return Position(row=y_offset(row), column=x_offset(col))


def boundary_position(row: int, col: int, direction: Direction) -> Position:
    """Character position at the middle of a cell's wall in the given direction."""
    center = cell_position(row, col)
    offsets = {
        Direction.NORTH: (-1, 0),
        Direction.SOUTH: (1, 0),
        Direction.EAST: (0, 2),
        Direction.WEST: (0, -2),
    }
    d_row, d_col = offsets[direction]
    return Position(row=center.row + d_row, column=center.column + d_col)


def iter_cells(width: int, height: int) -> Iterator[Tuple[int, int]]:
    """Yield every (row, col) cell in row-major order."""
    for row in range(height):
        for col in range(width):
            yield row, col


def validate_dimensions(width, height) -> None:
    """
    Reject maze dimensions that are not positive integers.

    Raises:
        ValueError: If width or height is not a positive integer
    """
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise ValueError(f"{name.capitalize()} must be a positive integer, got {value!r}")
        if value <= 0:
            raise ValueError(f"{name.capitalize()} must be a positive integer, got {value}")


class MazeGrid:
    """
    An owned 2D character buffer for a maze of width x height cells.

    Accessors are bounds-checked; negative indices are rejected rather than
    wrapping around like numpy would.
    """

    def __init__(self, width: int, height: int, chars: np.ndarray, smoothed: bool = False):
        expected = (height * CELL_HEIGHT + 1, width * CELL_WIDTH + 1)
        if chars.shape != expected:
            raise ValueError(
                f"Character buffer is {chars.shape[1]}x{chars.shape[0]}, "
                f"expected {expected[1]}x{expected[0]} for a {width}x{height} maze"
            )
        self.width = width
        self.height = height
        self.chars = chars
        self.smoothed = smoothed

    @classmethod
    def walled(cls, width: int, height: int) -> "MazeGrid":
        """Create a grid where every cell is enclosed by four walls."""
        validate_dimensions(width, height)
        chars = np.full(
            (height * CELL_HEIGHT + 1, width * CELL_WIDTH + 1), PASSAGE, dtype="<U1"
        )
        chars[0::2, :] = HORIZONTAL_WALL
        chars[0::2, 0::CELL_WIDTH] = JUNCTION
        chars[1::2, 0::CELL_WIDTH] = VERTICAL_WALL
        return cls(width, height, chars)

    @classmethod
    def from_text(cls, text: str, smoothed: bool = False) -> "MazeGrid":
        """
        Parse a serialized map back into a grid.

        Raises:
            ValueError: If the rows are ragged or the size is not (4W+1)x(2H+1)
        """
        if text.endswith("\n"):
            text = text[:-1]
        lines = text.split("\n")
        row_length = len(lines[0])
        if any(len(line) != row_length for line in lines):
            raise ValueError("All map rows must have the same length")
        if len(lines) < 3 or len(lines) % CELL_HEIGHT != 1:
            raise ValueError(f"A map must have 2H+1 rows, got {len(lines)}")
        if row_length < 5 or row_length % CELL_WIDTH != 1:
            raise ValueError(f"A map must have 4W+1 columns, got {row_length}")

        chars = np.array([list(line) for line in lines], dtype="<U1")
        return cls(row_length // CELL_WIDTH, len(lines) // CELL_HEIGHT, chars, smoothed)

    @property
    def rows(self) -> int:
        return self.chars.shape[0]

    @property
    def columns(self) -> int:
        return self.chars.shape[1]

    def in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self.rows and 0 <= column < self.columns

    def get(self, row: int, column: int) -> str:
        if not self.in_bounds(row, column):
            raise IndexError(f"({row}, {column}) is outside a {self.columns}x{self.rows} grid")
        return str(self.chars[row, column])

    def set(self, row: int, column: int, char: str) -> None:
        if not self.in_bounds(row, column):
            raise IndexError(f"({row}, {column}) is outside a {self.columns}x{self.rows} grid")
        if len(char) != 1:
            raise ValueError(f"Expected a single character, got {char!r}")
        self.chars[row, column] = char

    def boundary(self, row: int, col: int, direction: Direction) -> str:
        """The character in the middle of a cell's wall in the given direction."""
        position = boundary_position(row, col, direction)
        return self.get(position.row, position.column)

    def is_open(self, row: int, col: int, direction: Direction) -> bool:
        """True if the cell's wall in this direction is a passage or a door."""
        return self.boundary(row, col, direction) in (PASSAGE, DOOR)

    def copy(self) -> "MazeGrid":
        return MazeGrid(self.width, self.height, self.chars.copy(), self.smoothed)

    def lines(self) -> List[str]:
        return ["".join(row) for row in self.chars]

    def to_text(self) -> str:
        """Serialize the grid: rows joined by newlines, no trailing newline."""
        return "\n".join(self.lines())

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"MazeGrid({self.width}x{self.height}, smoothed={self.smoothed})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MazeGrid):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self.smoothed == other.smoothed
            and bool(np.array_equal(self.chars, other.chars))
        )
