"""
Main entry point for running pwlayout as a module.

Usage:
    python -m pwlayout [options]
"""

import argparse
import sys
from typing import List, Optional

from .config import LayoutConfig
from .geometry import Flip, Rect, Rotation
from .layouts.presets import Layouts
from .layouts.resolver import resolve
from .render import LayoutRenderer, RenderStyle, render_ascii


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog="pwlayout",
        description="Resolve a window layout and draw it",
    )
    parser.add_argument(
        "--layout",
        default="MainAndVertStack",
        help="Name of the layout preset (default: MainAndVertStack)",
    )
    parser.add_argument(
        "--windows",
        type=int,
        default=3,
        metavar="N",
        help="Number of windows to place (default: 3)",
    )
    parser.add_argument(
        "--width", type=int, default=1920, help="Workspace width (default: 1920)"
    )
    parser.add_argument(
        "--height", type=int, default=1080, help="Workspace height (default: 1080)"
    )
    parser.add_argument(
        "--main-count",
        type=int,
        metavar="N",
        help="Override the main window count of the layout",
    )
    parser.add_argument(
        "--flip",
        choices=[flip.name.lower() for flip in Flip],
        help="Mirror the layout",
    )
    parser.add_argument(
        "--rotation",
        choices=[rotation.name.lower() for rotation in Rotation],
        help="Rotate the layout",
    )
    parser.add_argument(
        "--png",
        metavar="FILE",
        help="Also render the layout to a PNG file",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available layouts and exit",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point.

    Returns:
        Exit code
    """
    args = parse_args(argv)
    config = LayoutConfig()
    layouts = Layouts(config.get_layouts())

    if args.list:
        for name in layouts.names():
            print(name)
        return 0

    layout = layouts.get(args.layout)
    if layout is None:
        print(f"Error: Unknown layout '{args.layout}'", file=sys.stderr)
        return 1

    try:
        if args.main_count is not None:
            layout.set_main_window_count(args.main_count)
        if args.flip:
            layout.flip = Flip[args.flip.upper()]
        if args.rotation:
            layout.rotation = Rotation[args.rotation.upper()]

        container = Rect(0, 0, args.width, args.height)
        rects = resolve(container, args.windows, layout)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"{layout.name}: {args.windows} windows in {args.width}x{args.height}")
    for index, rect in enumerate(rects, start=1):
        print(f"  {index}: x={rect.x} y={rect.y} w={rect.width} h={rect.height}")
    print(render_ascii(rects, container))

    if args.png:
        try:
            LayoutRenderer(RenderStyle.from_config(config)).write_png(
                rects, container, args.png
            )
        except (ValueError, OSError) as e:
            print(f"Error: Cannot write {args.png}: {e}", file=sys.stderr)
            return 1
        print(f"Wrote {args.png}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
