"""
Configuration for pwlayout

Holds the layouts offered to the LayoutManager, the main column step sizes and
the colors used when rendering layouts.
"""

from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from .layouts.layout_base import (
    DEFAULT_MAIN_SIZE_STEP_PX,
    DEFAULT_MAIN_SIZE_STEP_RATIO,
    LayoutDefinition,
)

Color = Union[str, Tuple[int, int, int, int]]


def parse_color(color: Color) -> Tuple[int, int, int, int]:
    """
    Parse a color value into RGBA tuple.

    Accepts:
    - Hex string: "#RRGGBB" or "#RRGGBBAA" (e.g., "#4c4c4c" or "#4c4c4cff")
    - Tuple: (R, G, B, A) where each value is 0-255

    Returns:
    - Tuple of (R, G, B, A) values from 0-255
    """
    if isinstance(color, str):
        hex_value = color.lstrip("#")

        try:
            if len(hex_value) == 6:
                # RGB format - add full opacity
                r, g, b = (int(hex_value[i : i + 2], 16) for i in (0, 2, 4))
                return (r, g, b, 0xFF)
            elif len(hex_value) == 8:
                r, g, b, a = (int(hex_value[i : i + 2], 16) for i in (0, 2, 4, 6))
                return (r, g, b, a)
        except ValueError:
            raise ValueError(
                f"Invalid color format: {color}. Use #RRGGBB or #RRGGBBAA"
            ) from None
        raise ValueError(f"Invalid color format: {color}. Use #RRGGBB or #RRGGBBAA")
    elif isinstance(color, tuple) and len(color) == 4:
        if not all(isinstance(c, int) and 0 <= c <= 255 for c in color):
            raise ValueError(f"Invalid color value: {color}. Components must be 0-255")
        return color
    else:
        raise ValueError(
            f"Invalid color type: {type(color)}. Use hex string or RGBA tuple"
        )


def _debug_from_env() -> bool:
    return bool(os.getenv("PWL_DEBUG"))


@dataclass
class LayoutConfig:
    """Layout engine configuration."""

    # Layouts (default to all built-in presets)
    layouts: Optional[List[LayoutDefinition]] = None
    default_layout: str = "MainAndVertStack"

    # Number of workspaces
    num_workspaces: int = 9

    # Main column resize steps, per unit of the current main size
    main_size_step_px: int = DEFAULT_MAIN_SIZE_STEP_PX
    main_size_step_ratio: float = DEFAULT_MAIN_SIZE_STEP_RATIO
    # Largest pixel main size reachable through CMD_INCREASE_MAIN_SIZE
    main_size_upper_bound: int = 3840

    # Print every bus event
    debug: bool = field(default_factory=_debug_from_env)

    # Rendering
    background_color: Color = "#2e3440"
    tile_color: Color = "#3b4252"
    border_color: Color = "#5e81ac"
    text_color: Color = "#d8dee9"

    def __post_init__(self):
        """Validate settings and parse color strings into tuples."""
        if self.num_workspaces < 1:
            raise ValueError(
                f"Invalid number of workspaces: {self.num_workspaces}. Must be >= 1"
            )
        if self.main_size_step_px < 0 or self.main_size_step_ratio < 0:
            raise ValueError("Main size steps must be >= 0")

        self.background_color = parse_color(self.background_color)
        self.tile_color = parse_color(self.tile_color)
        self.border_color = parse_color(self.border_color)
        self.text_color = parse_color(self.text_color)

    def get_layouts(self) -> List[LayoutDefinition]:
        """Get configured layouts or default layouts."""
        if self.layouts is not None:
            return [layout.copy() for layout in self.layouts]

        from .layouts.presets import default_layouts

        return default_layouts()
