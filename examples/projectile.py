#!/usr/bin/env python3
"""Plot the trajectory of a projectile under gravity and wind.

The projectile starts at (0, 2, 0) with a normalized launch velocity scaled
by 11.25, and each tick adds gravity and wind to its velocity. Every position
that lands on the canvas is plotted in red until the projectile reaches the
ground.

Usage:
    python -m examples.projectile [--output OUTPUT] [--quiet]
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from src.raycaster.common.logging import setup_default_logging
from src.raycaster.core.colour import RED
from src.raycaster.core.tuples import Tuple, point, vector
from src.raycaster.preview.canvas import Canvas
from src.raycaster.preview.export import save_ppm

CANVAS_WIDTH = 900
CANVAS_HEIGHT = 550

# Guard against a launch that never comes down
MAX_TICKS = 10_000


@dataclass(frozen=True)
class Projectile:
    """A projectile state.

    Attributes:
        position: Current position (point).
        velocity: Current velocity (vector).
    """

    position: Tuple
    velocity: Tuple


@dataclass(frozen=True)
class Environment:
    """Forces applied every tick.

    Attributes:
        gravity: Gravity (vector).
        wind: Wind (vector).
    """

    gravity: Tuple
    wind: Tuple


def tick(environment: Environment, projectile: Projectile) -> Projectile:
    """Advance the projectile by one time step."""
    return Projectile(
        position=projectile.position + projectile.velocity,
        velocity=projectile.velocity + environment.gravity + environment.wind,
    )


def simulate(
    projectile: Projectile,
    environment: Environment,
    width: int = CANVAS_WIDTH,
    height: int = CANVAS_HEIGHT,
) -> tuple[Canvas, int]:
    """Run the simulation until the projectile falls to y <= 0.

    Args:
        projectile: The initial projectile state.
        environment: Gravity and wind.
        width: Canvas width in pixels.
        height: Canvas height in pixels.

    Returns:
        Tuple of (canvas with the plotted trajectory, number of ticks).
    """
    canvas = Canvas(width, height)
    ticks = 0
    while projectile.position.y > 0.0 and ticks < MAX_TICKS:
        ticks += 1
        projectile = tick(environment, projectile)
        x = round(projectile.position.x)
        y = height - round(projectile.position.y)
        if 0 <= x < width and 0 <= y < height:
            canvas.write_pixel(x, y, RED)
    return canvas, ticks


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="Plot a projectile trajectory.")
    parser.add_argument(
        "--output",
        type=str,
        default="projectile-simulation.ppm",
        help="Output file path (default: projectile-simulation.ppm)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_default_logging("WARNING" if args.quiet else "INFO")

    start = Projectile(
        position=point(0.0, 2.0, 0.0),
        velocity=vector(1.0, 1.8, 0.0).normalize() * 11.25,
    )
    environment = Environment(gravity=vector(0.0, -0.1, 0.0), wind=vector(-0.01, 0.0, 0.0))

    try:
        canvas, ticks = simulate(start, environment)
        output_file = save_ppm(canvas, Path(args.output))
        if not args.quiet:
            print(f"Projectile flew for {ticks} ticks.")
            print(f"Saved to: {output_file.absolute()}")
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
