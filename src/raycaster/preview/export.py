"""Image export utilities for rendered canvases.

This module is the file-write sink for exported images. Writes are attempted
once; any ``OSError`` (missing directory, permission denied, full disk)
propagates to the caller unchanged.

Supported formats:
    - PPM (plain-text P3)

Example:
    >>> from src.raycaster.preview.canvas import Canvas
    >>> from src.raycaster.preview.export import save_ppm
    >>> save_ppm(Canvas(10, 10), "blank.ppm")  # doctest: +SKIP
"""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path

from src.raycaster.preview.canvas import Canvas

logger = logging.getLogger(__name__)


def write_file(filepath: str | PathLike[str], content: str) -> Path:
    """Write exported image text to a file, replacing any existing file.

    Args:
        filepath: Output file path.
        content: The full file contents.

    Returns:
        The path that was written.

    Raises:
        OSError: If the file cannot be created or written.
    """
    path = Path(filepath)
    with path.open("w", encoding="ascii", newline="\n") as handle:
        handle.write(content)
    logger.debug("Wrote %d bytes to %s", len(content), path)
    return path


def save_ppm(canvas: Canvas, filepath: str | PathLike[str]) -> Path:
    """Save a canvas as a plain-text PPM (P3) file.

    Args:
        canvas: The canvas to save.
        filepath: Output file path (should end in .ppm).

    Returns:
        The path that was written.

    Raises:
        OSError: If the file cannot be created or written.
    """
    return write_file(filepath, canvas.to_ppm())
