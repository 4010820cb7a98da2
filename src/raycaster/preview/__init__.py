"""Preview module for output and visualization.

This module handles the framebuffer and rendering output:

Components:
    canvas: Pixel framebuffer and P3 serialization
    export: File-write sink for exported images
    display: Matplotlib-based preview

Example:
    >>> from src.raycaster.preview import Canvas, save_ppm
    >>> canvas = Canvas(64, 64)
    >>> save_ppm(canvas, "output.ppm")  # doctest: +SKIP
"""

from src.raycaster.preview.canvas import (
    PPM_MAX_LINE_LENGTH,
    Canvas,
    canvas_to_ppm,
    quantise,
    wrap_tokens,
)
from src.raycaster.preview.display import canvas_to_display_image, show_canvas
from src.raycaster.preview.export import save_ppm, write_file

__all__ = [
    # Canvas
    "Canvas",
    "canvas_to_ppm",
    "quantise",
    "wrap_tokens",
    "PPM_MAX_LINE_LENGTH",
    # Display functions
    "show_canvas",
    "canvas_to_display_image",
    # Export functions
    "write_file",
    "save_ppm",
]
