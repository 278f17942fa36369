"""
Input/Output utilities for map files and search results.
"""

import json
import numpy as np
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence
from PIL import Image

from .grid import Cell
from .pathfinding import path_length


def load_map_rows(file_path: Path) -> Optional[List[str]]:
    """
    Load a text map, one row per line.

    Line endings are stripped and empty lines skipped; spaces are map cells.

    Args:
        file_path: Path to map file

    Returns:
        List of rows, or None if loading fails
    """
    try:
        with open(file_path, 'r', encoding="utf-8") as f:
            rows = [line.rstrip("\r\n") for line in f]
        return [row for row in rows if row]
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error loading map from {file_path}: {e}")
        return None


def path_to_dict(start: Cell, goal: Cell, path: Optional[Sequence[Cell]]) -> Dict[str, Any]:
    """JSON-ready description of a search result."""
    return {
        'start': [int(start[0]), int(start[1])],
        'goal': [int(goal[0]), int(goal[1])],
        'found': path is not None,
        'length': path_length(path) if path is not None else None,
        'path': [[int(x), int(y)] for x, y in path] if path is not None else [],
    }


def save_json(data: Dict[str, Any], file_path: Path, indent: int = 2) -> bool:
    """
    Save data to JSON file.

    Args:
        data: Dictionary to save
        file_path: Path to save JSON file
        indent: JSON indentation

    Returns:
        True if successful, False otherwise
    """
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        with open(file_path, 'w') as f:
            json.dump(data, f, indent=indent)
        return True
    except (OSError, TypeError) as e:
        print(f"Error saving JSON to {file_path}: {e}")
        return False


def save_image(image: np.ndarray, image_path: Path) -> bool:
    """
    Save numpy array as image.

    Args:
        image: Numpy array of image (H, W) or (H, W, 3)
        image_path: Path to save image

    Returns:
        True if successful, False otherwise
    """
    try:
        image_path.parent.mkdir(parents=True, exist_ok=True)
        if image.dtype != np.uint8:
            image = image.astype(np.uint8)
        Image.fromarray(image).save(image_path)
        return True
    except (OSError, ValueError) as e:
        print(f"Error saving image to {image_path}: {e}")
        return False
