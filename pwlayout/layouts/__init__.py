"""
Layout System

Provides the layout resolution engine, named presets and layout management.
"""

from .layout_base import (
    LayoutDefinition,
    Workspace,
    LayoutManager,
)
from .columns import Column, ColumnKind, allocate_windows, compose_columns
from .resolver import resolve, arrange_columns, flip_rects, rotate_rects
from .presets import Layouts, default_layouts

__all__ = [
    # Definition and management
    "LayoutDefinition",
    "Workspace",
    "LayoutManager",
    # Resolution
    "Column",
    "ColumnKind",
    "allocate_windows",
    "compose_columns",
    "resolve",
    "arrange_columns",
    "flip_rects",
    "rotate_rects",
    # Presets
    "Layouts",
    "default_layouts",
]
