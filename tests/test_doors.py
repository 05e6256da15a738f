"""Unit tests for door placement in dead ends."""

import pytest
import random

from labyrinth.doors import place_doors
from labyrinth.grid import Direction, MazeGrid, Position
from labyrinth.maze_gen import generate_maze


def grid_from_lines(*lines: str) -> MazeGrid:
    return MazeGrid.from_text("\n".join(lines))


class TestPlaceDoors:
    """Doors only go in dead ends that open north or south."""

    def test_single_cell_gets_no_door(self):
        grid = generate_maze(1, 1, random.Random(0))

        result, doors = place_doors(grid)

        assert doors == []
        assert result.to_text() == "+---+\n|   |\n+---+"

    def test_north_facing_dead_ends(self):
        """Both bottom cells open only to the north and get a door there."""
        grid = grid_from_lines(
            "+---+---+",
            "|       |",
            "+   +   +",
            "|   |   |",
            "+---+---+",
        )

        result, doors = place_doors(grid)

        assert doors == [Position(row=2, column=2), Position(row=2, column=6)]
        assert result.lines()[2] == "+-o-+-o-+"

    def test_south_facing_dead_end(self):
        """The shared wall becomes a single door even though both cells qualify."""
        grid = grid_from_lines(
            "+---+",
            "|   |",
            "+   +",
            "|   |",
            "+---+",
        )

        result, doors = place_doors(grid)

        assert doors == [Position(row=2, column=2)]
        assert result.to_text() == "+---+\n|   |\n+-o-+\n|   |\n+---+"

    def test_east_west_dead_ends_get_no_door(self):
        grid = grid_from_lines(
            "+---+---+",
            "|       |",
            "+---+   +",
            "|       |",
            "+---+---+",
        )

        result, doors = place_doors(grid)

        assert doors == []
        assert result == grid

    def test_corridor_gets_no_door(self):
        grid = grid_from_lines(
            "+---+---+---+",
            "|           |",
            "+---+---+---+",
        )

        _result, doors = place_doors(grid)

        assert doors == []

    def test_input_grid_is_not_modified(self):
        grid = grid_from_lines(
            "+---+",
            "|   |",
            "+   +",
            "|   |",
            "+---+",
        )
        before = grid.to_text()

        place_doors(grid)

        assert grid.to_text() == before


class TestDoorInvariants:
    """Door placement on generated mazes."""

    @pytest.mark.parametrize("seed", range(20))
    def test_doors_only_open_walls_into_doors(self, seed):
        """Door placement only writes into openings, never removes a wall."""
        grid = generate_maze(8, 8, random.Random(seed))

        result, _doors = place_doors(grid)

        changed = result.chars != grid.chars
        assert (grid.chars[changed] == " ").all()
        assert set(result.chars[changed].tolist()) <= {"-", "o"}
        # Only horizontal wall rows are touched
        assert not changed[1::2, :].any()

    @pytest.mark.parametrize("seed", range(20))
    def test_every_door_closes_a_north_south_dead_end(self, seed):
        grid = generate_maze(8, 8, random.Random(seed))

        _result, doors = place_doors(grid)

        for door in doors:
            assert door.row % 2 == 0
            assert door.column % 4 == 2
            col = (door.column - 2) // 4
            above = (door.row // 2 - 1, col)
            below = (door.row // 2, col)

            candidates = []
            if above[0] >= 0:
                candidates.append((above, Direction.SOUTH))
            if below[0] < grid.height:
                candidates.append((below, Direction.NORTH))

            def only_open_side(cell, direction):
                open_sides = [d for d in Direction if grid.is_open(cell[0], cell[1], d)]
                return open_sides == [direction]

            assert any(only_open_side(cell, d) for cell, d in candidates)

    @pytest.mark.parametrize("seed", range(20))
    def test_every_qualifying_dead_end_gets_a_door(self, seed):
        grid = generate_maze(8, 8, random.Random(seed))

        result, _doors = place_doors(grid)

        for row in range(grid.height):
            for col in range(grid.width):
                open_sides = [d for d in Direction if grid.is_open(row, col, d)]
                if open_sides in ([Direction.NORTH], [Direction.SOUTH]):
                    assert result.boundary(row, col, open_sides[0]) == "o"

    @pytest.mark.parametrize("seed", range(20))
    def test_no_door_on_east_west_walls(self, seed):
        grid = generate_maze(8, 8, random.Random(seed))

        result, _doors = place_doors(grid)

        assert not (result.chars[1::2, :] == "o").any()
