"""
Grid model for pathfinding: a fixed 2D passability map with bounds checks.
"""

from typing import List, Optional, Sequence, Tuple

import numpy as np

from .config import DEFAULT_MAP_CONFIG, MapConfig
from .errors import OutOfBounds

Cell = Tuple[int, int]  # (x, y) = (col, row)


class GridModel:
    """
    Immutable 2D passability map.

    Cells are addressed as ``(x, y)`` where ``x`` is the column and ``y`` the
    row. The underlying array is stored row-major with shape ``(height, width)``
    and is read-only, so one grid can be shared by any number of searches.
    """

    def __init__(self, passable):
        array = np.array(passable, dtype=bool)
        if array.ndim != 2:
            raise ValueError(f"Passability map must be 2D, got {array.ndim}D")
        if array.size == 0:
            raise ValueError("Passability map must not be empty")
        array.setflags(write=False)
        self._passable = array

    @classmethod
    def from_rows(cls, rows: Sequence[str], blocked_marker: str = "X") -> "GridModel":
        """
        Build a grid from text rows.

        Args:
            rows: One string per row, all of the same length
            blocked_marker: Character marking a blocked cell; anything else is free

        Returns:
            GridModel for the rows
        """
        if not rows:
            raise ValueError("Map has no rows")
        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(
                    f"Row {y} has length {len(row)}, expected {width}"
                )
        return cls([[char != blocked_marker for char in row] for row in rows])

    @classmethod
    def from_occupancy(cls, occupancy_grid) -> "GridModel":
        """Build a grid from an occupancy array indexed [y, x] where 0=free, non-zero=occupied."""
        return cls(np.asarray(occupancy_grid) == 0)

    @property
    def width(self) -> int:
        return self._passable.shape[1]

    @property
    def height(self) -> int:
        return self._passable.shape[0]

    @property
    def shape(self) -> Tuple[int, int]:
        """(height, width), matching the array layout."""
        return self._passable.shape

    @property
    def passable(self) -> np.ndarray:
        """Read-only boolean array indexed [y, x]."""
        return self._passable

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def is_passable(self, cell: Cell) -> bool:
        """Whether the cell may be entered. Raises OutOfBounds outside the grid."""
        if not self.in_bounds(cell):
            raise OutOfBounds(cell, self.shape)
        x, y = cell
        return bool(self._passable[y, x])

    def neighbors4(self, cell: Cell) -> List[Cell]:
        """
        Get the in-bounds axis-aligned neighbours of a cell.

        Passability is not checked here.

        Args:
            cell: (x, y) cell inside the grid

        Returns:
            Neighbours in the order left, right, up, down
        """
        if not self.in_bounds(cell):
            raise OutOfBounds(cell, self.shape)
        x, y = cell
        neighbors = []
        if x > 0:
            neighbors.append((x - 1, y))
        if x < self.width - 1:
            neighbors.append((x + 1, y))
        if y > 0:
            neighbors.append((x, y - 1))
        if y < self.height - 1:
            neighbors.append((x, y + 1))
        return neighbors

    def free_cell_count(self) -> int:
        return int(self._passable.sum())

    def __repr__(self) -> str:
        return f"GridModel(width={self.width}, height={self.height}, free={self.free_cell_count()})"


def _find_marker(rows: Sequence[str], marker: str) -> Optional[Cell]:
    found = None
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char != marker:
                continue
            if found is not None:
                raise ValueError(f"Marker '{marker}' appears more than once")
            found = (x, y)
    return found


def parse_map(rows: Sequence[str], config: MapConfig = DEFAULT_MAP_CONFIG) -> Tuple[GridModel, Cell, Cell]:
    """
    Parse a text map that marks its own start and goal.

    Args:
        rows: Map rows, e.g. ["G-----", "XXXXX-", "S-X-X-", ...]
        config: Marker characters

    Returns:
        grid: GridModel built from the rows
        start: (x, y) of the start marker
        goal: (x, y) of the goal marker
    """
    grid = GridModel.from_rows(rows, blocked_marker=config.blocked_marker)

    start = _find_marker(rows, config.start_marker)
    if start is None:
        raise ValueError(f"Map has no start marker '{config.start_marker}'")
    goal = _find_marker(rows, config.goal_marker)
    if goal is None:
        raise ValueError(f"Map has no goal marker '{config.goal_marker}'")

    return grid, start, goal
