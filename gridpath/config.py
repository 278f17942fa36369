"""
Configuration utilities and default settings.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class MapConfig:
    """Characters used in text maps."""
    blocked_marker: str = "X"
    start_marker: str = "S"
    goal_marker: str = "G"


@dataclass
class RenderConfig:
    """Configuration for path rendering."""
    free_color: Tuple[int, int, int] = (255, 255, 255)
    blocked_color: Tuple[int, int, int] = (40, 40, 40)
    path_color: Tuple[int, int, int] = (0, 160, 255)
    start_color: Tuple[int, int, int] = (0, 200, 0)
    goal_color: Tuple[int, int, int] = (220, 0, 0)
    scale: int = 1  # Pixels per cell edge in rendered images


# Default configurations
DEFAULT_MAP_CONFIG = MapConfig()
DEFAULT_RENDER_CONFIG = RenderConfig()
