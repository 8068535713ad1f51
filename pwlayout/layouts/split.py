"""
Split Strategies

Each strategy turns one rect and a window count into exactly that many rects.
All of them tile the input rect without gaps or overlaps, except `none`, which
only accepts zero or one window.
"""

from __future__ import annotations
import math
from typing import List

from ..geometry import Axis, Rect, Split, split_evenly


def none(rect: Rect, count: int) -> List[Rect]:
    """The rect is not subdivided and can hold a single window."""
    if count > 1:
        raise ValueError(f"Split.NONE cannot hold {count} windows")
    return [rect] if count == 1 else []


def horizontal(rect: Rect, count: int) -> List[Rect]:
    """
    Full-width rows of even height.

    +--------+      +--------+
    |        |      +--------+
    |        |  =>  +--------+
    |        |      +--------+
    +--------+      +--------+
    """
    return split_evenly(rect, count, Axis.VERTICAL)


def vertical(rect: Rect, count: int) -> List[Rect]:
    """
    Full-height columns of even width.

    +--------+      +--+--+--+
    |        |      |  |  |  |
    |        |  =>  |  |  |  |
    |        |      |  |  |  |
    +--------+      +--+--+--+
    """
    return split_evenly(rect, count, Axis.HORIZONTAL)


def grid(rect: Rect, count: int) -> List[Rect]:
    """
    Near-square grid, filled row by row.

    Every row holds the same number of cells except the last one, whose cells
    stretch across the whole width so the rect is still covered completely.

    +---+---+---+
    |   |   |   |
    +---+---+---+   7 windows
    |   |   |   |
    +---+---+---+
    |           |
    +-----------+
    """
    if count == 0:
        return []

    cols = math.ceil(count / math.ceil(math.sqrt(count)))
    rows = math.ceil(count / cols)

    result = []
    remaining = count
    for row in split_evenly(rect, rows, Axis.VERTICAL):
        cells = min(cols, remaining)
        result.extend(split_evenly(row, cells, Axis.HORIZONTAL))
        remaining -= cells
    return result


def _halve(rect: Rect, step: int) -> List[Rect]:
    # Even steps cut side by side, odd steps cut top and bottom
    axis = Axis.HORIZONTAL if step % 2 == 0 else Axis.VERTICAL
    return split_evenly(rect, 2, axis)


def fibonacci(rect: Rect, count: int) -> List[Rect]:
    """
    Halve the remaining space for every window, cascading to the bottom right.

    +-------+-------+
    |       |   2   |
    |   1   +---+---+
    |       | 3 | 4 |
    +-------+---+---+
    """
    result = []
    remaining = rect
    for step in range(count - 1):
        current, remaining = _halve(remaining, step)
        result.append(current)
    if count > 0:
        result.append(remaining)
    return result


def dwindle(rect: Rect, count: int) -> List[Rect]:
    """
    Halve the remaining space for every window, spiralling inwards.

    The cut axis alternates exactly like `fibonacci`, but the half taken by
    the current window goes around counter-clockwise: left, bottom, right, top.

    +-------+---+---+
    |       | 4 | 3 |
    |   1   +---+---+
    |       |   2   |
    +-------+-------+
    """
    result = []
    remaining = rect
    for step in range(count - 1):
        first, second = _halve(remaining, step)
        if step % 4 in (1, 2):
            current, remaining = second, first
        else:
            current, remaining = first, second
        result.append(current)
    if count > 0:
        result.append(remaining)
    return result


def split(rect: Rect, count: int, strategy: Split) -> List[Rect]:
    """Subdivide `rect` into `count` rects using `strategy`."""
    if count < 0:
        raise ValueError(f"Invalid window count: {count}")

    if strategy == Split.NONE:
        return none(rect, count)
    elif strategy == Split.HORIZONTAL:
        return horizontal(rect, count)
    elif strategy == Split.VERTICAL:
        return vertical(rect, count)
    elif strategy == Split.GRID:
        return grid(rect, count)
    elif strategy == Split.FIBONACCI:
        return fibonacci(rect, count)
    elif strategy == Split.DWINDLE:
        return dwindle(rect, count)
    raise ValueError(f"Unknown split strategy: {strategy!r}")
