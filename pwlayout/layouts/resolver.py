"""
Layout Resolver

Turns a workspace rect, a window count and a LayoutDefinition into one rect per
window.

Transforms are applied at three levels, innermost first:

    windows in a column   main_/stack_/second_stack_ flip and rotation
    column arrangement    columns_flip, columns_rotation
    whole layout          flip, rotation

Window order is part of the contract: the returned list starts with the main
column windows, followed by the first stack and then the second stack, each in
the order their split strategy produced them. Flipping and rotating move rects
around but never reorder the list.
"""

from __future__ import annotations
from dataclasses import replace
from typing import List, TYPE_CHECKING

from ..geometry import Flip, Rect, Rotation, Split
from .columns import Column, compose_columns
from .split import split

if TYPE_CHECKING:
    from .layout_base import LayoutDefinition


def resolve(
    container: Rect, window_count: int, definition: "LayoutDefinition"
) -> List[Rect]:
    """
    Calculate window rects for a layout.

    Args:
        container: Workspace area available to the layout
        window_count: Amount of windows to place, may be 0
        definition: Layout to apply, not modified

    Returns:
        Exactly `window_count` rects in canonical window order
    """
    if window_count < 0:
        raise ValueError(f"Invalid window count: {window_count}")
    if window_count == 0:
        return []

    # Lay out at the origin; quarter turns get a transposed area so that the
    # rotated result covers the real container exactly
    origin = Rect(0, 0, container.width, container.height)
    local = _layout_area(origin, definition.rotation)

    rects: List[Rect] = []
    for column in arrange_columns(local, window_count, definition):
        rects.extend(_split_column(column))

    rects = flip_rects(rects, definition.flip, local)
    rects = rotate_rects(rects, definition.rotation, local)
    return [
        Rect(r.x + container.x, r.y + container.y, r.width, r.height) for r in rects
    ]


def arrange_columns(
    container: Rect, window_count: int, definition: "LayoutDefinition"
) -> List[Column]:
    """Compose the columns and apply columns_flip and columns_rotation to them."""
    area = _layout_area(container, definition.columns_rotation)
    columns = compose_columns(area, window_count, definition)
    rects = [column.rect for column in columns]
    rects = flip_rects(rects, definition.columns_flip, area)
    rects = rotate_rects(rects, definition.columns_rotation, area)
    return [replace(column, rect=rect) for column, rect in zip(columns, rects)]


def _layout_area(container: Rect, rotation: Rotation) -> Rect:
    """Area to lay out in so that rotating by `rotation` lands on `container`."""
    if rotation.swaps_axes():
        return Rect(container.x, container.y, container.height, container.width)
    return container


def _split_column(column: Column) -> List[Rect]:
    area = _layout_area(column.rect, column.rotation)
    if column.split == Split.NONE and column.window_count > 1:
        # Unsplit stacks hold their windows on top of each other (monocle, deck).
        # The composer never puts more than one window in an unsplit main column.
        rects = [area] * column.window_count
    else:
        rects = split(area, column.window_count, column.split)
    rects = flip_rects(rects, column.flip, area)
    return rotate_rects(rects, column.rotation, area)


def flip_rects(rects: List[Rect], flip: Flip, container: Rect) -> List[Rect]:
    """Mirror rects inside `container` according to `flip`."""
    if flip == Flip.NONE:
        return list(rects)

    result = []
    for rect in rects:
        x, y = rect.x, rect.y
        if flip.is_flipped_horizontal():
            # As far from the left edge as it was from the right edge
            x = container.x + (container.right - rect.right)
        if flip.is_flipped_vertical():
            y = container.y + (container.bottom - rect.bottom)
        result.append(Rect(x, y, rect.width, rect.height))
    return result


def rotate_rects(rects: List[Rect], rotation: Rotation, container: Rect) -> List[Rect]:
    """
    Rotate rects clockwise around `container` by quarter turns.

    For EAST and WEST the result lives in a container with width and height
    swapped, sharing the same top-left corner. Rects tiling `container` tile
    the rotated container too.
    """
    if rotation == Rotation.NORTH:
        return list(rects)

    result = []
    for rect in rects:
        # Relative to the container origin
        x = rect.x - container.x
        y = rect.y - container.y
        if rotation == Rotation.EAST:
            new = (container.height - (y + rect.height), x, rect.height, rect.width)
        elif rotation == Rotation.SOUTH:
            new = (
                container.width - (x + rect.width),
                container.height - (y + rect.height),
                rect.width,
                rect.height,
            )
        elif rotation == Rotation.WEST:
            new = (y, container.width - (x + rect.width), rect.height, rect.width)
        else:
            raise ValueError(f"Unknown rotation: {rotation!r}")
        result.append(
            Rect(new[0] + container.x, new[1] + container.y, new[2], new[3])
        )
    return result
