"""
Rendering of grids and paths for display.
"""

from typing import List, Optional, Sequence

import numpy as np

from .config import DEFAULT_RENDER_CONFIG, RenderConfig
from .grid import Cell, GridModel


def render_path(rows: Sequence[str], path: Optional[Sequence[Cell]], path_marker: str = "0") -> List[str]:
    """
    Overlay a path on text map rows.

    Args:
        rows: Original map rows
        path: Cells to mark, or None to return the rows unchanged
        path_marker: Character written into every path cell

    Returns:
        New list of rows with path cells replaced by the marker
    """
    chars = [list(row) for row in rows]
    for x, y in path or []:
        chars[y][x] = path_marker
    return ["".join(row) for row in chars]


def format_path(rows: Sequence[str], path: Optional[Sequence[Cell]], path_marker: str = "0") -> str:
    """Rendered map as a single printable string."""
    return "\n".join(render_path(rows, path, path_marker))


def create_grid_image(grid: GridModel, path: Optional[Sequence[Cell]] = None,
                      config: RenderConfig = DEFAULT_RENDER_CONFIG) -> np.ndarray:
    """
    Create colored visualization of a grid and optional path.

    Args:
        grid: GridModel to draw
        path: Cells from start to goal, or None
        config: Colors and pixel scale

    Returns:
        Colored image array (H * scale, W * scale, 3) with uint8 dtype
    """
    grid_viz = np.zeros((*grid.shape, 3), dtype=np.uint8)
    grid_viz[grid.passable] = config.free_color
    grid_viz[~grid.passable] = config.blocked_color

    if path:
        for x, y in path:
            grid_viz[y, x] = config.path_color
        start_x, start_y = path[0]
        goal_x, goal_y = path[-1]
        grid_viz[start_y, start_x] = config.start_color
        grid_viz[goal_y, goal_x] = config.goal_color

    if config.scale > 1:
        grid_viz = np.repeat(np.repeat(grid_viz, config.scale, axis=0), config.scale, axis=1)
    return grid_viz
