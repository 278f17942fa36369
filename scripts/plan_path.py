#!/usr/bin/env python3
"""
Plan a shortest path across a text map.

Reads a map where one character marks blocked cells (default 'X'), runs A*
between the start and goal, and prints the map with the path drawn on it.
"""

import argparse
import logging
import sys
from pathlib import Path

from gridpath import (
    GridModel,
    GridError,
    MapConfig,
    RenderConfig,
    parse_map,
    find_path,
    path_length,
    format_path,
    create_grid_image,
    load_map_rows,
    path_to_dict,
    save_json,
    save_image,
)


def resolve_endpoints(rows, args, map_config):
    """Pick start and goal from the command line, falling back to the map markers."""
    if args.start and args.goal:
        grid = GridModel.from_rows(rows, blocked_marker=map_config.blocked_marker)
        return grid, tuple(args.start), tuple(args.goal)

    grid, start, goal = parse_map(rows, map_config)
    if args.start:
        start = tuple(args.start)
    if args.goal:
        goal = tuple(args.goal)
    return grid, start, goal


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Find a shortest path on a text grid map with A*",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Use the S and G markers in the map
  gridpath-plan -i examples/maps/workshop.txt

  # Explicit endpoints, cells are (x y) = (column row)
  gridpath-plan -i examples/maps/workshop.txt --start 0 2 --goal 5 0

  # Export the result for another tool
  gridpath-plan -i examples/maps/workshop.txt -o path.json --image path.png --scale 16
        """
    )

    parser.add_argument("-i", "--input", type=Path, required=True, help="Path to text map file")
    parser.add_argument("-o", "--output", type=Path, help="Output JSON file for the path")
    parser.add_argument("--image", type=Path, help="Output PNG file with the rendered path")
    parser.add_argument("--start", nargs=2, type=int, help="Start cell (x y)")
    parser.add_argument("--goal", nargs=2, type=int, help="Goal cell (x y)")
    parser.add_argument("--blocked-marker", default="X",
                        help="Character marking blocked cells (default: X)")
    parser.add_argument("--path-marker", default="0",
                        help="Character used to draw the path (default: 0)")
    parser.add_argument("--scale", type=int, default=16,
                        help="Pixels per cell in the PNG output (default: 16)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)
    if args.scale < 1:
        parser.error(f"--scale must be at least 1, got {args.scale}")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s: %(message)s",
    )

    if not args.input.exists():
        print(f"Error: {args.input} does not exist")
        return 1

    rows = load_map_rows(args.input)
    if not rows:
        print(f"Error: Failed to load map from {args.input}")
        return 1

    map_config = MapConfig(blocked_marker=args.blocked_marker)
    try:
        grid, start, goal = resolve_endpoints(rows, args, map_config)
        path = find_path(start, goal, grid)
    except (GridError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    print(f"Map {args.input.name}: {grid.width}x{grid.height}, {grid.free_cell_count()} free cells")
    print(f"Start {start} -> goal {goal}")

    if path is None:
        print("✗ No path found (obstacles blocking)")
    else:
        print(f"✓ Found path with {path_length(path)} steps\n")
        print(format_path(rows, path, args.path_marker))

    if args.output:
        if save_json(path_to_dict(start, goal, path), args.output):
            print(f"\n✓ Exported path to {args.output}")

    if args.image:
        render_config = RenderConfig(scale=args.scale)
        if save_image(create_grid_image(grid, path, render_config), args.image):
            print(f"✓ Saved image to {args.image}")

    return 0 if path is not None else 1


if __name__ == "__main__":
    sys.exit(main())
