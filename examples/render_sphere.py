#!/usr/bin/env python3
"""Render the silhouette of a transformed sphere.

Casts one ray per pixel from an eye point through a virtual wall and colours
every pixel whose ray hits the sphere. Rendering can be split across worker
threads, one contiguous band of rows per thread.

Usage:
    python -m examples.render_sphere [options]

Options:
    --pixels PIXELS     Canvas width and height in pixels (default: 100)
    --wall-size SIZE    Physical size of the wall (default: 7.0)
    --wall-z Z          Distance of the wall from the origin (default: 10.0)
    --threads THREADS   Worker threads, 1 renders inline (default: 1)
    --scale X Y Z       Scale applied to the sphere (default: 1 1 1)
    --rotate-z DEGREES  Rotation about z applied after scaling (default: 0)
    --output OUTPUT     Output file path (default: sphere.ppm)
    --preview           Show the result in a Matplotlib window
    --quiet             Suppress progress output

Example:
    python -m examples.render_sphere --pixels 200 --threads 8 --scale 1 0.5 1
"""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Sequence
from pathlib import Path

from src.raycaster.common.logging import setup_default_logging
from src.raycaster.core.matrix import identity
from src.raycaster.core.numeric import radians
from src.raycaster.core.render import RenderConfig, render, render_parallel
from src.raycaster.geometry.sphere import sphere
from src.raycaster.preview.export import save_ppm


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the silhouette of a transformed sphere.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--pixels",
        type=int,
        default=100,
        help="Canvas width and height in pixels (default: 100)",
    )
    parser.add_argument(
        "--wall-size",
        type=float,
        default=7.0,
        help="Physical size of the wall (default: 7.0)",
    )
    parser.add_argument(
        "--wall-z",
        type=float,
        default=10.0,
        help="Distance of the wall from the origin (default: 10.0)",
    )
    parser.add_argument(
        "--threads",
        type=int,
        default=1,
        help="Worker threads, 1 renders inline (default: 1)",
    )
    parser.add_argument(
        "--scale",
        type=float,
        nargs=3,
        default=(1.0, 1.0, 1.0),
        metavar=("X", "Y", "Z"),
        help="Scale applied to the sphere (default: 1 1 1)",
    )
    parser.add_argument(
        "--rotate-z",
        type=float,
        default=0.0,
        help="Rotation about z in degrees, applied after scaling (default: 0)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="sphere.ppm",
        help="Output file path (default: sphere.ppm)",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Show the result in a Matplotlib window",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args(argv)


def render_sphere(
    pixels: int = 100,
    wall_size: float = 7.0,
    wall_z: float = 10.0,
    threads: int = 1,
    scale: Sequence[float] = (1.0, 1.0, 1.0),
    rotate_z_degrees: float = 0.0,
    output_path: str = "sphere.ppm",
    preview: bool = False,
    quiet: bool = False,
) -> Path:
    """Render the sphere silhouette and save it as a PPM file.

    Args:
        pixels: Canvas width and height in pixels.
        wall_size: Physical size of the wall.
        wall_z: Distance of the wall from the origin.
        threads: Number of worker threads; 1 renders on the calling thread.
        scale: (x, y, z) scale applied to the unit sphere.
        rotate_z_degrees: Rotation about z applied after the scale.
        output_path: Output file path (PPM).
        preview: If True, show the image after saving.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    transform = identity().scale(*scale).rotate_z(radians(rotate_z_degrees))
    shape = sphere(transformation=transform)
    config = RenderConfig(
        canvas_pixels=pixels,
        wall_size=wall_size,
        wall_z=wall_z,
        threads=threads,
    )

    if not quiet:
        print(f"Rendering {pixels}x{pixels} sphere on {threads} thread(s)...")

    start_time = time.time()
    if threads == 1:
        canvas = render(shape, config)
    else:
        canvas = render_parallel(shape, config)
    render_time = time.time() - start_time

    output_file = save_ppm(canvas, output_path)

    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Render time: {render_time:.2f}s")

    if preview:
        from src.raycaster.preview.display import show_canvas

        show_canvas(canvas, title=f"Sphere {pixels}x{pixels}")

    return output_file


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_default_logging("WARNING" if args.quiet else "INFO")

    try:
        render_sphere(
            pixels=args.pixels,
            wall_size=args.wall_size,
            wall_z=args.wall_z,
            threads=args.threads,
            scale=args.scale,
            rotate_z_degrees=args.rotate_z,
            output_path=args.output,
            preview=args.preview,
            quiet=args.quiet,
        )
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
