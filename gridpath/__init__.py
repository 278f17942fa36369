"""
Shortest paths on 2D grids with blocked cells, using A* search.
"""

from .errors import GridError, OutOfBounds, InvalidEndpoint
from .grid import Cell, GridModel, parse_map
from .pathfinding import find_path, manhattan_distance, reconstruct_path, path_length
from .visualization import render_path, format_path, create_grid_image
from .config import (
    MapConfig,
    RenderConfig,
    DEFAULT_MAP_CONFIG,
    DEFAULT_RENDER_CONFIG,
)
from .io_utils import load_map_rows, path_to_dict, save_json, save_image

__all__ = [
    # Errors
    'GridError',
    'OutOfBounds',
    'InvalidEndpoint',
    # Grid
    'Cell',
    'GridModel',
    'parse_map',
    # Pathfinding
    'find_path',
    'manhattan_distance',
    'reconstruct_path',
    'path_length',
    # Visualization
    'render_path',
    'format_path',
    'create_grid_image',
    # Config
    'MapConfig',
    'RenderConfig',
    'DEFAULT_MAP_CONFIG',
    'DEFAULT_RENDER_CONFIG',
    # IO utilities
    'load_map_rows',
    'path_to_dict',
    'save_json',
    'save_image',
]
