"""
Layout Presets

Named, ready-made layout definitions and a small registry to look them up.
The resolver never uses names; callers pick a definition here and hand it over.
"""

from __future__ import annotations
from typing import List, Optional

from ..geometry import ColumnType, Reserve, Rotation, Split
from .layout_base import LayoutDefinition

EVEN_HORIZONTAL = "EvenHorizontal"
EVEN_VERTICAL = "EvenVertical"
MONOCLE = "Monocle"
GRID = "Grid"
MAIN_AND_VERT_STACK = "MainAndVertStack"
MAIN_AND_HORIZONTAL_STACK = "MainAndHorizontalStack"
RIGHT_MAIN_AND_VERT_STACK = "RightMainAndVertStack"
FIBONACCI = "Fibonacci"
DWINDLE = "Dwindle"
MAIN_AND_DECK = "MainAndDeck"
CENTER_MAIN = "CenterMain"
CENTER_MAIN_BALANCED = "CenterMainBalanced"
CENTER_MAIN_FLUID = "CenterMainFluid"


def default_layouts() -> List[LayoutDefinition]:
    """
    The built-in layouts.

    Single column:
        EvenHorizontal   windows side by side
        EvenVertical     windows stacked top to bottom
        Monocle          every window fills the workspace
        Grid             near-square grid
    Main and stack:
        MainAndVertStack, MainAndHorizontalStack, RightMainAndVertStack,
        Fibonacci, Dwindle, MainAndDeck
    Center main:
        CenterMain, CenterMainBalanced, CenterMainFluid
    """
    return [
        LayoutDefinition(
            name=EVEN_HORIZONTAL,
            column_type=ColumnType.STACK,
            stack_split=Split.VERTICAL,
        ),
        LayoutDefinition(
            name=EVEN_VERTICAL,
            column_type=ColumnType.STACK,
            stack_split=Split.HORIZONTAL,
        ),
        LayoutDefinition(
            name=MONOCLE,
            column_type=ColumnType.STACK,
            stack_split=Split.NONE,
        ),
        LayoutDefinition(
            name=GRID,
            column_type=ColumnType.STACK,
            stack_split=Split.GRID,
        ),
        LayoutDefinition(
            name=MAIN_AND_VERT_STACK,
            main_split=Split.VERTICAL,
            stack_split=Split.HORIZONTAL,
        ),
        LayoutDefinition(
            name=MAIN_AND_HORIZONTAL_STACK,
            main_split=Split.VERTICAL,
            stack_split=Split.VERTICAL,
        ),
        LayoutDefinition(
            name=RIGHT_MAIN_AND_VERT_STACK,
            main_split=Split.VERTICAL,
            stack_split=Split.HORIZONTAL,
            columns_rotation=Rotation.SOUTH,
        ),
        LayoutDefinition(
            name=FIBONACCI,
            main_split=Split.VERTICAL,
            stack_split=Split.FIBONACCI,
        ),
        LayoutDefinition(
            name=DWINDLE,
            main_split=Split.VERTICAL,
            stack_split=Split.DWINDLE,
        ),
        LayoutDefinition(
            name=MAIN_AND_DECK,
            main_split=Split.NONE,
            stack_split=Split.NONE,
        ),
        LayoutDefinition(
            name=CENTER_MAIN,
            column_type=ColumnType.CENTER_MAIN,
            stack_split=Split.HORIZONTAL,
            balance_stacks=False,
        ),
        LayoutDefinition(
            name=CENTER_MAIN_BALANCED,
            column_type=ColumnType.CENTER_MAIN,
            stack_split=Split.DWINDLE,
            second_stack_split=Split.DWINDLE,
        ),
        LayoutDefinition(
            name=CENTER_MAIN_FLUID,
            column_type=ColumnType.CENTER_MAIN,
            stack_split=Split.HORIZONTAL,
            reserve=Reserve.RESERVE,
        ),
    ]


class Layouts:
    """Registry of named layout definitions."""

    def __init__(self, layouts: Optional[List[LayoutDefinition]] = None):
        self.layouts: List[LayoutDefinition] = (
            list(layouts) if layouts is not None else default_layouts()
        )

    @classmethod
    def default(cls) -> "Layouts":
        return cls(default_layouts())

    def __len__(self) -> int:
        return len(self.layouts)

    def get(self, name: str) -> Optional[LayoutDefinition]:
        """Copy of the layout called `name`, safe for the caller to mutate."""
        index = self.get_index(name)
        if index is None:
            return None
        return self.layouts[index].copy()

    def get_index(self, name: str) -> Optional[int]:
        for i, layout in enumerate(self.layouts):
            if layout.name == name:
                return i
        return None

    def names(self) -> List[str]:
        return [layout.name for layout in self.layouts]

    def append_or_overwrite(self, layout: LayoutDefinition):
        """Replace the layout of the same name, or put a new one first."""
        index = self.get_index(layout.name)
        if index is None:
            self.layouts.insert(0, layout)
        else:
            self.layouts[index] = layout
