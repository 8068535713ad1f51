"""
pwlayout - Window Layout Engine

Computes window rectangles for dynamic tiling window managers. Given a
workspace, a number of windows and a layout definition, it returns one
rectangle per window.

This package provides:
- Geometry primitives and integer division helpers
- Split strategies (horizontal, vertical, grid, fibonacci, dwindle)
- Column composition for stack, main-and-stack and center-main layouts
- Named layout presets
- A LayoutManager driven by pub/sub commands
- ASCII and PNG rendering of resolved layouts

Example usage:
    from pwlayout import Layouts, Rect, resolve

    layout = Layouts.default().get("MainAndVertStack")
    rects = resolve(Rect(0, 0, 1920, 1080), 3, layout)

Or run directly:
    python -m pwlayout --layout Fibonacci --windows 5
"""

__version__ = "0.1.0"
__author__ = "pinpox"

from .geometry import (
    Rect,
    Axis,
    ColumnType,
    Split,
    Flip,
    Reserve,
    Rotation,
    Size,
    divrem,
    remainderless_division,
    split_evenly,
    subrect,
)

from .layouts import (
    LayoutDefinition,
    Workspace,
    LayoutManager,
    Column,
    ColumnKind,
    compose_columns,
    resolve,
    flip_rects,
    rotate_rects,
    Layouts,
    default_layouts,
)

from .config import LayoutConfig, parse_color

from .render import render_ascii, RenderStyle, LayoutRenderer

__all__ = [
    # Geometry
    "Rect",
    "Axis",
    "ColumnType",
    "Split",
    "Flip",
    "Reserve",
    "Rotation",
    "Size",
    "divrem",
    "remainderless_division",
    "split_evenly",
    "subrect",
    # Layouts
    "LayoutDefinition",
    "Workspace",
    "LayoutManager",
    "Column",
    "ColumnKind",
    "compose_columns",
    "resolve",
    "flip_rects",
    "rotate_rects",
    "Layouts",
    "default_layouts",
    # Configuration
    "LayoutConfig",
    "parse_color",
    # Rendering
    "render_ascii",
    "RenderStyle",
    "LayoutRenderer",
]
