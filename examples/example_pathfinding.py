#!/usr/bin/env python3
"""
Example: Finding a path across a small text map.

This demonstrates how to parse a map with start/goal markers,
run A* on it, and print the map with the path drawn in.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from gridpath import parse_map, find_path, path_length, format_path, load_map_rows

WORKSHOP_MAP = [
    "G-----",
    "XXXXX-",
    "S-X-X-",
    "--X-X-",
    "--X-X-",
    "------",
]


def pathfinding_example(rows, path_marker: str = "0"):
    """Example of planning a path on a text map."""
    grid, start, goal = parse_map(rows)
    print(f"Grid: {grid.width}x{grid.height}, {grid.free_cell_count()} free cells")
    print(f"Start: {start}  Goal: {goal}")

    path = find_path(start, goal, grid)
    if path is None:
        print("No path found")
        return None

    print(f"Path with {path_length(path)} steps:")
    print(format_path(rows, path, path_marker))
    return path


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Pathfinding example")
    parser.add_argument("-i", "--input", type=Path,
                       help="Path to text map (default: built-in workshop map)")
    parser.add_argument("--path-marker", default="0",
                       help="Character used to draw the path (default: 0)")
    args = parser.parse_args()

    rows = WORKSHOP_MAP
    if args.input:
        rows = load_map_rows(args.input)
        if rows is None:
            sys.exit(1)

    pathfinding_example(rows, args.path_marker)
