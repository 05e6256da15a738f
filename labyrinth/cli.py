"""
Command-line entry point for building maze maps.

Usage:
    build-map 10 10 dungeon-level-1              # public/art/maps/dungeon-level-1/map.art
    build-map 10 10 dungeon-level-1 --smooth     # Unicode box-drawing walls
    build-map 8 4 test-level --seed 42 --stdout  # Reproducible, printed instead of saved
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .builder import DEFAULT_MAPS_ROOT, BuildOptions, MapBuilder


def positive_int(value: str) -> int:
    """argparse type for a strictly positive integer."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="build-map",
        description="Generate a perfect maze map with doors",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("width", type=positive_int, help="Maze width in cells")
    parser.add_argument("height", type=positive_int, help="Maze height in cells")
    parser.add_argument(
        "directory_name",
        help="Map directory; the map is saved as <maps-root>/<directory-name>/map.art",
    )
    parser.add_argument(
        "--smooth", "--unicode",
        action="store_true",
        dest="smooth",
        help="Draw walls with Unicode box-drawing characters",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Random seed for reproducible maps",
    )
    parser.add_argument(
        "--maps-root",
        type=Path,
        default=DEFAULT_MAPS_ROOT,
        help=f"Directory holding all maps (default: {DEFAULT_MAPS_ROOT})",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the map instead of saving it",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = make_parser().parse_args(argv)

    options = BuildOptions(
        width=args.width,
        height=args.height,
        directory_name=args.directory_name,
        smooth=args.smooth,
        seed=args.seed,
        maps_root=args.maps_root,
    )
    builder = MapBuilder(options)

    if args.stdout:
        print(builder.generate().to_text())
        return 0

    try:
        builder.build()
    except OSError as e:
        print(f"Error writing map to {builder.path}: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
