"""Perfect-maze map generation with doors and box-drawing walls."""

from labyrinth.grid import (
    Direction,
    MazeGrid,
    Position,
    cell_position,
    iter_cells,
    validate_dimensions,
)
from labyrinth.maze_gen import generate_maze, count_passages, dead_ends, open_neighbors
from labyrinth.doors import place_doors
from labyrinth.smoothing import smooth_walls
from labyrinth.builder import BuildOptions, MapBuilder, build_map, map_path, save_map
