"""
Exceptions raised for invalid grid queries and search endpoints.

An unreachable goal is not an error: ``find_path`` returns ``None`` for it.
"""

from typing import Tuple


class GridError(ValueError):
    """Base class for grid and search input errors."""


class OutOfBounds(GridError, IndexError):
    """A queried cell lies outside the grid."""

    def __init__(self, cell: Tuple[int, int], shape: Tuple[int, int]):
        self.cell = cell
        self.shape = shape
        height, width = shape
        super().__init__(
            f"Cell {cell} is outside grid of width {width} and height {height}"
        )


class InvalidEndpoint(GridError):
    """Start or goal cell is blocked or outside the grid."""

    def __init__(self, cell: Tuple[int, int], role: str, reason: str):
        self.cell = cell
        self.role = role
        self.reason = reason
        super().__init__(f"Invalid {role} cell {cell}: {reason}")
