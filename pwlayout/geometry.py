"""
Layout Geometry

Rectangles, integer division helpers and the small enumerations that describe
how a layout is shaped (column type, split strategy, flip, reserve, rotation).
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Tuple, Union


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in pixel space."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Invalid rect size: {self.width}x{self.height}. "
                "Width and height must not be negative"
            )

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def surface_area(self) -> int:
        return self.width * self.height

    def center(self) -> Tuple[int, int]:
        """Center point, rounded down to whole pixels."""
        return (self.x + self.width // 2, self.y + self.height // 2)

    def contains(self, point: Tuple[int, int]) -> bool:
        """Whether the point lies inside the rect (right/bottom edges excluded)."""
        px, py = point
        return self.x <= px < self.right and self.y <= py < self.bottom


class Axis(Enum):
    """Direction along which a rect is cut into pieces."""

    HORIZONTAL = auto()  # Pieces side by side, left-to-right
    VERTICAL = auto()  # Pieces stacked top-to-bottom


class ColumnType(Enum):
    """Top-level arrangement of main and stack columns."""

    STACK = auto()  # Single stack, no main column
    MAIN_AND_STACK = auto()  # Main column on the left, one stack on the right
    CENTER_MAIN = auto()  # Main column centered between two stacks


class Split(Enum):
    """
    Strategy used to subdivide a column among its windows.

    The names refer to the resulting arrangement: HORIZONTAL yields full-width
    rows, VERTICAL yields full-height columns.
    """

    NONE = auto()
    HORIZONTAL = auto()
    VERTICAL = auto()
    GRID = auto()
    FIBONACCI = auto()
    DWINDLE = auto()


class Flip(Enum):
    """
    Mirroring applied to a layout, its column arrangement or one column.

    HORIZONTAL mirrors along x (columns swap sides), VERTICAL mirrors along y
    (rows swap top and bottom).
    """

    NONE = auto()
    HORIZONTAL = auto()
    VERTICAL = auto()
    BOTH = auto()

    def is_flipped_horizontal(self) -> bool:
        return self in (Flip.HORIZONTAL, Flip.BOTH)

    def is_flipped_vertical(self) -> bool:
        return self in (Flip.VERTICAL, Flip.BOTH)

    def toggle_horizontal(self) -> "Flip":
        return {
            Flip.NONE: Flip.HORIZONTAL,
            Flip.HORIZONTAL: Flip.NONE,
            Flip.VERTICAL: Flip.BOTH,
            Flip.BOTH: Flip.VERTICAL,
        }[self]

    def toggle_vertical(self) -> "Flip":
        return {
            Flip.NONE: Flip.VERTICAL,
            Flip.HORIZONTAL: Flip.BOTH,
            Flip.VERTICAL: Flip.NONE,
            Flip.BOTH: Flip.HORIZONTAL,
        }[self]


class Reserve(Enum):
    """What happens to the space of a stack column that has no windows."""

    NONE = auto()  # Neighbouring columns take over the space
    RESERVE = auto()  # Space stays blank, in place
    RESERVE_AND_CENTER = auto()  # Space stays blank, populated columns centered

    def is_reserved(self) -> bool:
        return self is not Reserve.NONE


class Rotation(Enum):
    """Quarter-turn rotation applied to a whole layout, clockwise."""

    NORTH = 0
    EAST = 90
    SOUTH = 180
    WEST = 270

    def clockwise(self) -> "Rotation":
        return Rotation((self.value + 90) % 360)

    def counter_clockwise(self) -> "Rotation":
        return Rotation((self.value + 270) % 360)

    def swaps_axes(self) -> bool:
        """Whether width and height trade places under this rotation."""
        return self in (Rotation.EAST, Rotation.WEST)


@dataclass(frozen=True)
class Size:
    """Column size, either absolute pixels or a ratio of the available extent."""

    value: Union[int, float]
    is_ratio: bool = False

    @classmethod
    def pixel(cls, value: int) -> "Size":
        return cls(max(0, int(value)), False)

    @classmethod
    def ratio(cls, value: float) -> "Size":
        return cls(min(1.0, max(0.0, float(value))), True)

    @classmethod
    def coerce(cls, value: Union["Size", int, float]) -> "Size":
        """Build a clamped Size from a Size, an int (pixels) or a float (ratio)."""
        if isinstance(value, Size):
            return cls.ratio(value.value) if value.is_ratio else cls.pixel(value.value)
        if isinstance(value, bool):
            raise ValueError(f"Invalid size: {value!r}")
        if isinstance(value, int):
            return cls.pixel(value)
        if isinstance(value, float):
            return cls.ratio(value)
        raise ValueError(
            f"Invalid size type: {type(value)}. Use Size, int pixels or float ratio"
        )

    def into_absolute(self, whole: int) -> int:
        """Pixel extent of this size within `whole` pixels."""
        if self.is_ratio:
            return int(whole * self.value)
        return min(int(self.value), whole)

    def changed_by(self, delta: Union[int, float], upper_bound: Union[int, float]) -> "Size":
        """Add `delta` (same unit as this size), clamped to [0, upper_bound]."""
        new_value = max(0, min(self.value + delta, upper_bound))
        if self.is_ratio:
            return Size.ratio(new_value)
        return Size.pixel(new_value)

    def __str__(self) -> str:
        if self.is_ratio:
            return f"{self.value * 100:g}%"
        return f"{self.value}px"


def divrem(a: int, b: int) -> Tuple[int, int]:
    """Integer division result and remainder, e.g. divrem(11, 3) == (3, 2)."""
    return a // b, a % b


def remainderless_division(a: int, b: int) -> List[int]:
    """
    Divide `a` into `b` integer parts that sum to exactly `a`.

    The remainder is handed out one by one to the earliest parts, so
    remainderless_division(11, 3) == [4, 4, 3].
    """
    if b < 0 or a < 0:
        raise ValueError(f"Cannot divide {a} into {b} parts")
    if b == 0:
        return []
    div, rem = divrem(a, b)
    return [div + 1 if i < rem else div for i in range(b)]


def split_evenly(rect: Rect, count: int, axis: Axis) -> List[Rect]:
    """
    Cut `rect` into `count` pieces along `axis` that tile it exactly.

    Pieces differ by one pixel at most; the earliest pieces are the larger ones.
    """
    if count < 0:
        raise ValueError(f"Cannot split a rect into {count} pieces")

    result = []
    if axis == Axis.HORIZONTAL:
        from_left = rect.x
        for width in remainderless_division(rect.width, count):
            result.append(Rect(from_left, rect.y, width, rect.height))
            from_left += width
    else:
        from_top = rect.y
        for height in remainderless_division(rect.height, count):
            result.append(Rect(rect.x, from_top, rect.width, height))
            from_top += height
    return result


def subrect(
    rect: Rect, x_ratio: float, y_ratio: float, w_ratio: float, h_ratio: float
) -> Rect:
    """Proportional sub-rectangle of `rect`, all ratios in [0.0, 1.0]."""
    for ratio in (x_ratio, y_ratio, w_ratio, h_ratio):
        if not 0.0 <= ratio <= 1.0:
            raise ValueError(f"Invalid ratio: {ratio}. Ratios must be within 0.0-1.0")

    x = rect.x + int(rect.width * x_ratio)
    y = rect.y + int(rect.height * y_ratio)
    width = min(int(rect.width * w_ratio), rect.right - x)
    height = min(int(rect.height * h_ratio), rect.bottom - y)
    return Rect(x, y, width, height)
