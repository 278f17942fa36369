"""
Pathfinding algorithms for navigation in passability grids.
"""

import logging
import numbers
from heapq import heappush, heappop
from typing import Dict, List, Optional, Sequence

from .errors import InvalidEndpoint
from .grid import Cell, GridModel

logger = logging.getLogger(__name__)


def manhattan_distance(a: Cell, b: Cell) -> int:
    """Manhattan distance heuristic."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def reconstruct_path(came_from: Dict[Cell, Cell], goal: Cell) -> List[Cell]:
    """
    Follow predecessor links back from the goal.

    Args:
        came_from: Mapping of cell -> cell it was reached from
        goal: Last cell of the path

    Returns:
        List of cells from start to goal inclusive
    """
    current = goal
    path = [current]
    while current in came_from:
        current = came_from[current]
        path.append(current)
    return path[::-1]


def path_length(path: Sequence[Cell]) -> int:
    """Number of steps (edges) in a path."""
    return max(len(path) - 1, 0)


def _normalize_endpoint(cell, role: str) -> Cell:
    if len(cell) != 2 or not all(isinstance(v, numbers.Integral) for v in cell):
        raise InvalidEndpoint(tuple(cell), role, "coordinates must be integers")
    return (int(cell[0]), int(cell[1]))


def _check_endpoint(grid: GridModel, cell: Cell, role: str) -> None:
    if not grid.in_bounds(cell):
        raise InvalidEndpoint(cell, role, "outside the grid")
    if not grid.is_passable(cell):
        raise InvalidEndpoint(cell, role, "cell is blocked")


def find_path(start: Cell, goal: Cell, grid: GridModel) -> Optional[List[Cell]]:
    """
    A* path finding on a 4-connected grid with unit step cost.

    Args:
        start: (x, y) start cell, must be passable
        goal: (x, y) goal cell, must be passable
        grid: GridModel to search; it is only read

    Returns:
        List of (x, y) cells from start to goal inclusive, or None if the goal
        cannot be reached

    Raises:
        InvalidEndpoint: start or goal is blocked, outside the grid or not an integer cell
    """
    start = _normalize_endpoint(start, "start")
    goal = _normalize_endpoint(goal, "goal")
    _check_endpoint(grid, start, "start")
    _check_endpoint(grid, goal, "goal")

    if start == goal:
        return [start]

    logger.debug("Searching path %s -> %s on %r", start, goal, grid)

    # Heap entries are (f, h, cell): ties on f go to the cell closer to the
    # goal, then to the smaller (x, y).
    h_start = manhattan_distance(start, goal)
    open_set = []
    heappush(open_set, (h_start, h_start, start))
    came_from = {}
    g_score = {start: 0}
    f_score = {start: h_start}
    closed = set()

    while open_set:
        f, _, current = heappop(open_set)

        # Stale entry from before a cheaper path was recorded
        if current in closed or f != f_score[current]:
            continue

        if current == goal:
            path = reconstruct_path(came_from, current)
            logger.debug(
                "Found path of %d steps after expanding %d cells",
                path_length(path), len(closed)
            )
            return path

        closed.add(current)

        for neighbor in grid.neighbors4(current):
            if neighbor in closed or not grid.is_passable(neighbor):
                continue

            tentative_g = g_score[current] + 1

            if neighbor not in g_score or tentative_g < g_score[neighbor]:
                h = manhattan_distance(neighbor, goal)
                came_from[neighbor] = current
                g_score[neighbor] = tentative_g
                f_score[neighbor] = tentative_g + h
                heappush(open_set, (f_score[neighbor], h, neighbor))

    logger.debug("No path %s -> %s, expanded %d cells", start, goal, len(closed))
    return None  # No path found
