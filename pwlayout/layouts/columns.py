"""
Column Composer

Partitions a workspace into the main and stack columns of a layout and decides
how many windows each column receives.

    MAIN_AND_STACK           CENTER_MAIN
    +--------+-----+     +-----+--------+-----+
    |        |     |     |     |        |     |
    |  MAIN  |STACK|     |FIRST|  MAIN  |SECND|
    |        |     |     |     |        |     |
    +--------+-----+     +-----+--------+-----+
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Tuple, TYPE_CHECKING

from ..geometry import (
    ColumnType,
    Flip,
    Rect,
    Reserve,
    Rotation,
    Split,
    remainderless_division,
)

if TYPE_CHECKING:
    from .layout_base import LayoutDefinition


class ColumnKind(Enum):
    """Role of a column, in canonical window order."""

    MAIN = auto()
    FIRST_STACK = auto()
    SECOND_STACK = auto()


@dataclass(frozen=True)
class Column:
    """
    A column rect together with the windows assigned to it.

    `flip` and `rotation` apply to the windows inside the column only.
    """

    kind: ColumnKind
    rect: Rect
    window_count: int
    split: Split
    flip: Flip = Flip.NONE
    rotation: Rotation = Rotation.NORTH


@dataclass
class _Slot:
    kind: ColumnKind
    window_count: int
    occupies: bool
    width: int = 0


def allocate_windows(
    window_count: int, definition: "LayoutDefinition"
) -> Tuple[int, int, int]:
    """
    Distribute windows as (main, first stack, second stack).

    A main column split with Split.NONE holds one window at most; any further
    main windows are handed to the stacks. With balance_stacks the first stack
    receives the extra window of an odd split.
    """
    if definition.column_type == ColumnType.STACK:
        return 0, window_count, 0

    main_n = min(definition.main_window_count, window_count)
    if definition.main_split == Split.NONE:
        main_n = min(main_n, 1)
    stack_n = window_count - main_n

    if definition.column_type == ColumnType.MAIN_AND_STACK:
        return main_n, stack_n, 0
    elif definition.column_type == ColumnType.CENTER_MAIN:
        if definition.balance_stacks:
            first_n, second_n = remainderless_division(stack_n, 2)
        else:
            first_n, second_n = stack_n, 0
        return main_n, first_n, second_n
    raise ValueError(f"Unknown column type: {definition.column_type!r}")


def _slots(window_count: int, definition: "LayoutDefinition") -> List[_Slot]:
    """Column slots in left-to-right order."""
    main_n, first_n, second_n = allocate_windows(window_count, definition)
    reserved = definition.reserve.is_reserved()

    first = _Slot(ColumnKind.FIRST_STACK, first_n, first_n > 0 or reserved)
    if definition.column_type == ColumnType.STACK:
        return [first]

    main = _Slot(ColumnKind.MAIN, main_n, main_n > 0)
    if definition.column_type == ColumnType.MAIN_AND_STACK:
        return [main, first]

    # The second stack can only take space next to an existing first stack
    second = _Slot(
        ColumnKind.SECOND_STACK,
        second_n,
        (second_n > 0 and first.occupies) or reserved,
    )
    return [first, main, second]


def _modifiers(
    kind: ColumnKind, definition: "LayoutDefinition"
) -> Tuple[Split, Flip, Rotation]:
    """Split, flip and rotation of the windows inside a column."""
    if kind == ColumnKind.MAIN:
        return definition.main_split, definition.main_flip, definition.main_rotation
    elif kind == ColumnKind.FIRST_STACK:
        return definition.stack_split, definition.stack_flip, definition.stack_rotation
    return (
        definition.get_second_stack_split(),
        definition.second_stack_flip,
        definition.second_stack_rotation,
    )


def compose_columns(
    container: Rect, window_count: int, definition: "LayoutDefinition"
) -> List[Column]:
    """
    Compute the columns of a layout inside `container`.

    Columns are returned in canonical order: main, first stack, second stack.
    Columns without windows are left out, unless the layout reserves their
    space in place (Reserve.RESERVE), in which case they are returned with a
    window count of 0.
    """
    if window_count < 0:
        raise ValueError(f"Invalid window count: {window_count}")
    if window_count == 0:
        return []

    slots = _slots(window_count, definition)
    occupying = [slot for slot in slots if slot.occupies]
    stacks = [slot for slot in occupying if slot.kind != ColumnKind.MAIN]
    main = next((slot for slot in occupying if slot.kind == ColumnKind.MAIN), None)

    stack_space = container.width
    if main is not None:
        main.width = (
            definition.main_size.into_absolute(container.width)
            if stacks
            else container.width
        )
        stack_space -= main.width
    for slot, width in zip(stacks, remainderless_division(stack_space, len(stacks))):
        slot.width = width

    if definition.reserve == Reserve.RESERVE_AND_CENTER:
        placed = [slot for slot in occupying if slot.window_count > 0]
        x = container.x + (container.width - sum(s.width for s in placed)) // 2
    else:
        placed = occupying
        x = container.x

    columns = {}
    for slot in placed:
        split, flip, rotation = _modifiers(slot.kind, definition)
        columns[slot.kind] = Column(
            kind=slot.kind,
            rect=Rect(x, container.y, slot.width, container.height),
            window_count=slot.window_count,
            split=split,
            flip=flip,
            rotation=rotation,
        )
        x += slot.width

    return [columns[kind] for kind in ColumnKind if kind in columns]
