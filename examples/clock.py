#!/usr/bin/env python3
"""Draw the twelve hour marks of a clock face.

Each mark is the point (0, 1, 0) rotated about the z axis by a multiple of
30 degrees, then mapped from [-1, 1] onto the canvas.

Usage:
    python -m examples.clock [--size SIZE] [--output OUTPUT] [--quiet]

Example:
    python -m examples.clock --size 400 --output clock-face.ppm
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from src.raycaster.common.logging import setup_default_logging
from src.raycaster.core.colour import WHITE
from src.raycaster.core.matrix import identity
from src.raycaster.core.numeric import radians
from src.raycaster.core.tuples import point
from src.raycaster.preview.canvas import Canvas
from src.raycaster.preview.export import save_ppm

# Clock radius as a fraction of the canvas size
CLOCK_RADIUS_FRACTION = 3.0 / 8.0


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="Draw the hour marks of a clock face.")
    parser.add_argument(
        "--size",
        type=int,
        default=800,
        help="Canvas width and height in pixels (default: 800)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="clock-face.ppm",
        help="Output file path (default: clock-face.ppm)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args(argv)


def to_canvas_coordinate(value: float, size: int) -> int:
    """Map a coordinate in [-1, 1] onto a canvas axis of ``size`` pixels."""
    radius = size * CLOCK_RADIUS_FRACTION
    return min(size - 1, max(0, round(size / 2 + value * radius)))


def draw_clock(size: int = 800) -> Canvas:
    """Draw the twelve hour marks onto a new canvas.

    Args:
        size: Canvas width and height in pixels.

    Returns:
        The canvas with one white pixel per hour.
    """
    canvas = Canvas(size, size)
    twelve = point(0.0, 1.0, 0.0)
    for hour in range(12):
        # Negative angle so the hours run clockwise
        mark = identity().rotate_z(radians(-30.0 * hour)) * twelve
        x = to_canvas_coordinate(mark.x, size)
        # Canvas rows grow downward
        y = to_canvas_coordinate(-mark.y, size)
        canvas.write_pixel(x, y, WHITE)
    return canvas


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_default_logging("WARNING" if args.quiet else "INFO")

    try:
        output_file = save_ppm(draw_clock(args.size), Path(args.output))
        if not args.quiet:
            print(f"Saved to: {output_file.absolute()}")
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
