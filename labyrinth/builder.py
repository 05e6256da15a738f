"""
Map building pipeline: generate, add doors, optionally smooth, save.
"""

import random
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .doors import place_doors
from .grid import MazeGrid, validate_dimensions
from .maze_gen import generate_maze
from .smoothing import smooth_walls

# Maps are read by the game from public/art/maps/<name>/map.art
DEFAULT_MAPS_ROOT = Path("public") / "art" / "maps"
MAP_FILENAME = "map.art"


@dataclass(frozen=True)
class BuildOptions:
    """Everything needed to build and save one map."""

    width: int
    height: int
    directory_name: str
    smooth: bool = False
    seed: Optional[int] = None
    maps_root: Path = DEFAULT_MAPS_ROOT


def build_map(
    width: int,
    height: int,
    rng: Optional[random.Random] = None,
    smooth: bool = False,
) -> MazeGrid:
    """
    Build a finished map: a perfect maze with doors, optionally smoothed.

    Raises:
        ValueError: If width or height is not a positive integer
    """
    validate_dimensions(width, height)
    grid = generate_maze(width, height, rng)
    grid, _doors = place_doors(grid)
    if smooth:
        grid = smooth_walls(grid)
    return grid


def map_path(directory_name: str, maps_root: Union[str, Path] = DEFAULT_MAPS_ROOT) -> Path:
    """Where the map for `directory_name` is stored."""
    return Path(maps_root) / directory_name / MAP_FILENAME


def save_map(grid: MazeGrid, path: Union[str, Path]) -> Path:
    """
    Write the serialized map as UTF-8 text, creating parent directories.

    Raises:
        OSError: If the directory cannot be created or the file written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(grid.to_text(), encoding="utf-8")
    return path


class MapBuilder:
    """Runs the whole pipeline for one map, reporting progress on stderr."""

    def __init__(self, options: BuildOptions):
        validate_dimensions(options.width, options.height)
        self.options = options
        self.rng = random.Random(options.seed)
        self.grid: Optional[MazeGrid] = None

    @property
    def path(self) -> Path:
        return map_path(self.options.directory_name, self.options.maps_root)

    def generate(self) -> MazeGrid:
        """Generate the map in memory without writing it anywhere."""
        options = self.options
        print(f"--- building map ({options.width}x{options.height}) ---", file=sys.stderr)

        grid = generate_maze(options.width, options.height, self.rng)
        print(" - created base map", file=sys.stderr)

        grid, doors = place_doors(grid)
        print(f" - added {len(doors)} doors", file=sys.stderr)

        if options.smooth:
            grid = smooth_walls(grid)
            print(" - smoothed map appearance with Unicode characters", file=sys.stderr)

        self.grid = grid
        return grid

    def build(self) -> Path:
        """
        Generate the map and save it.

        Returns:
            The path the map was written to

        Raises:
            OSError: If the map could not be written
        """
        grid = self.generate()
        path = save_map(grid, self.path)
        print(f" - wrote map data to {path}", file=sys.stderr)
        print("--- map build complete ---", file=sys.stderr)
        return path
