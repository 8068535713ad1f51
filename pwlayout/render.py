"""
Layout Rendering

Draws resolved window rects for inspection: as ASCII art for terminals and
tests, or onto a cairo ImageSurface that can be saved as PNG.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import cairo

from .geometry import Rect


def _put(grid: List[List[str]], row: int, col: int, char: str):
    existing = grid[row][col]
    if existing == "+" or (existing in "-|" and existing != char):
        grid[row][col] = "+"
    else:
        grid[row][col] = char


def render_ascii(
    rects: Sequence[Rect], container: Rect, columns: int = 60, rows: int = 20
) -> str:
    """
    Draw tile outlines and 1-based window indices on a character grid.

    The container is scaled to `columns` x `rows` characters. Neighbouring
    tiles share their border line. Tiles covering each other (monocle, deck)
    are drawn in order, so the label of the last one is visible.
    """
    if columns < 1 or rows < 1:
        raise ValueError(f"Invalid grid size: {columns}x{rows}")
    if container.width == 0 or container.height == 0:
        return ""

    grid = [[" "] * (columns + 1) for _ in range(rows + 1)]

    for index, rect in enumerate(rects, start=1):
        if rect.width == 0 or rect.height == 0:
            continue

        left = (rect.x - container.x) * columns // container.width
        right = (rect.right - container.x) * columns // container.width
        top = (rect.y - container.y) * rows // container.height
        bottom = (rect.bottom - container.y) * rows // container.height

        for col in range(left, right + 1):
            _put(grid, top, col, "-")
            _put(grid, bottom, col, "-")
        for row in range(top, bottom + 1):
            _put(grid, row, left, "|")
            _put(grid, row, right, "|")
        for row, col in ((top, left), (top, right), (bottom, left), (bottom, right)):
            grid[row][col] = "+"

        # Clear the inside so covered tiles do not shine through
        for row in range(top + 1, bottom):
            for col in range(left + 1, right):
                grid[row][col] = " "

        label = str(index)
        if bottom - top >= 2 and right - left > len(label) + 1:
            row = (top + bottom) // 2
            col = (left + right) // 2 - len(label) // 2
            for offset, char in enumerate(label):
                grid[row][col + offset] = char

    return "\n".join("".join(line).rstrip() for line in grid)


@dataclass
class RenderStyle:
    """Styling configuration for PNG rendering."""

    bg_color: Tuple[int, int, int, int] = (46, 52, 64, 255)
    tile_color: Tuple[int, int, int, int] = (59, 66, 82, 255)
    border_color: Tuple[int, int, int, int] = (94, 129, 172, 255)
    text_color: Tuple[int, int, int, int] = (216, 222, 233, 255)
    font_family: str = "sans-serif"
    font_size: int = 24
    border_width: int = 2
    gap: int = 4  # Space left around every tile so the background shows

    @classmethod
    def from_config(cls, config) -> "RenderStyle":
        """Take the colors of a LayoutConfig."""
        return cls(
            bg_color=config.background_color,
            tile_color=config.tile_color,
            border_color=config.border_color,
            text_color=config.text_color,
        )


class LayoutRenderer:
    """Renders window rects onto a cairo image surface."""

    def __init__(self, style: RenderStyle = None):
        self.style = style if style is not None else RenderStyle()

    def render(self, rects: Sequence[Rect], container: Rect) -> cairo.ImageSurface:
        """Render rects into a new surface the size of `container`.

        Args:
            rects: Window rects in window order
            container: Workspace the rects were resolved in

        Returns:
            ARGB32 surface with one filled, outlined and numbered tile per rect
        """
        if container.width == 0 or container.height == 0:
            raise ValueError(f"Cannot render an empty workspace: {container}")

        surface = cairo.ImageSurface(
            cairo.FORMAT_ARGB32, container.width, container.height
        )
        ctx = cairo.Context(surface)

        self._set_color(ctx, self.style.bg_color)
        ctx.rectangle(0, 0, container.width, container.height)
        ctx.fill()

        ctx.select_font_face(
            self.style.font_family, cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_BOLD
        )
        ctx.set_font_size(self.style.font_size)

        for index, rect in enumerate(rects, start=1):
            self._render_tile(ctx, rect, container, str(index))

        surface.flush()
        return surface

    def write_png(self, rects: Sequence[Rect], container: Rect, path: str):
        """Render rects and save the result as PNG at `path`."""
        surface = self.render(rects, container)
        surface.write_to_png(path)

    def _render_tile(self, ctx: cairo.Context, rect: Rect, container: Rect, label: str):
        gap = self.style.gap
        x = rect.x - container.x + gap
        y = rect.y - container.y + gap
        w = rect.width - 2 * gap
        h = rect.height - 2 * gap
        if w <= 0 or h <= 0:
            return

        self._set_color(ctx, self.style.tile_color)
        ctx.rectangle(x, y, w, h)
        ctx.fill()

        # Stroke inside the tile so borders never bleed into the gap
        half = self.style.border_width / 2.0
        self._set_color(ctx, self.style.border_color)
        ctx.set_line_width(self.style.border_width)
        ctx.rectangle(x + half, y + half, w - 2 * half, h - 2 * half)
        ctx.stroke()

        extents = ctx.text_extents(label)
        if extents.width < w and extents.height < h:
            self._set_color(ctx, self.style.text_color)
            ctx.move_to(
                x + (w - extents.width) / 2 - extents.x_bearing,
                y + (h - extents.height) / 2 - extents.y_bearing,
            )
            ctx.show_text(label)

    def _set_color(self, ctx: cairo.Context, color: Tuple[int, int, int, int]):
        """Set Cairo color from RGBA tuple.

        Args:
            ctx: Cairo context
            color: (R, G, B, A) tuple with values 0-255
        """
        r, g, b, a = color
        ctx.set_source_rgba(r / 255.0, g / 255.0, b / 255.0, a / 255.0)
