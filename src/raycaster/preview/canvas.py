"""Pixel framebuffer with plain-text PPM (P3) export.

The canvas stores linear float RGB in a NumPy array of shape
(height, width, 3), row-major, initialised to black. It is the only mutable
object in the package and is meant to live for one render pass.

Example:
    >>> from src.raycaster.core.colour import colour
    >>> from src.raycaster.preview.canvas import Canvas
    >>> canvas = Canvas(5, 3)
    >>> canvas.write_pixel(0, 0, colour(1.5, 0.0, 0.0))
    >>> canvas.to_ppm().splitlines()[:4]
    ['P3', '5 3', '255', '255 0 0 0 0 0 0 0 0 0 0 0 0 0 0']
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from src.raycaster.core.colour import MAX_CHANNEL_VALUE, Colour

# Longest physical line allowed in the pixel section of a P3 file
PPM_MAX_LINE_LENGTH = 70


class Canvas:
    """A width x height grid of colours.

    Attributes:
        width: Image width in pixels.
        height: Image height in pixels.
    """

    def __init__(self, width: int, height: int) -> None:
        """Create a black canvas.

        Args:
            width: Image width in pixels (non-negative).
            height: Image height in pixels (non-negative).

        Raises:
            ValueError: If either dimension is negative.
        """
        if width < 0 or height < 0:
            raise ValueError(f"Canvas dimensions must be non-negative, got {width}x{height}")
        self._width = width
        self._height = height
        self._pixels = np.zeros((height, width, 3), dtype=np.float64)

    @property
    def width(self) -> int:
        """Get the canvas width."""
        return self._width

    @property
    def height(self) -> int:
        """Get the canvas height."""
        return self._height

    def write_pixel(self, x: int, y: int, colour: Colour) -> None:
        """Set the colour of one pixel.

        Args:
            x: Column index, 0 <= x < width.
            y: Row index, 0 <= y < height.
            colour: The colour to store.

        Raises:
            IndexError: If (x, y) lies outside the canvas.
        """
        self._check_bounds(x, y)
        self._pixels[y, x] = (colour.red, colour.green, colour.blue)

    def pixel_at(self, x: int, y: int) -> Colour:
        """Read the colour of one pixel.

        Raises:
            IndexError: If (x, y) lies outside the canvas.
        """
        self._check_bounds(x, y)
        r, g, b = self._pixels[y, x]
        return Colour(float(r), float(g), float(b))

    def paste(self, band: Canvas, row_offset: int) -> None:
        """Copy a band canvas into this one starting at ``row_offset``.

        Args:
            band: A canvas of the same width.
            row_offset: The row at which the band's first row lands.

        Raises:
            ValueError: If the widths differ or the band does not fit.
        """
        if band.width != self._width:
            raise ValueError(f"Band width {band.width} does not match canvas width {self._width}")
        if row_offset < 0 or row_offset + band.height > self._height:
            raise ValueError(
                f"Band of {band.height} rows at offset {row_offset} "
                f"does not fit canvas of height {self._height}"
            )
        self._pixels[row_offset : row_offset + band.height] = band._pixels

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return a copy of the pixels as an array of shape (height, width, 3)."""
        return self._pixels.copy()

    def to_ppm(self) -> str:
        """Serialize the canvas as a P3 image. See ``canvas_to_ppm``."""
        return canvas_to_ppm(self)

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"Pixel ({x}, {y}) out of range for {self._width}x{self._height} canvas"
            )

    def __repr__(self) -> str:
        return f"Canvas(width={self._width}, height={self._height})"


def quantise(pixels: npt.NDArray[np.float64]) -> npt.NDArray[np.int64]:
    """Convert linear channels to integers in [0, 255].

    Channels are scaled by 255, rounded half up and clamped.
    """
    scaled = np.floor(pixels * MAX_CHANNEL_VALUE + 0.5)
    return np.clip(scaled, 0, MAX_CHANNEL_VALUE).astype(np.int64)


def wrap_tokens(tokens: list[str], max_length: int = PPM_MAX_LINE_LENGTH) -> list[str]:
    """Greedily pack tokens into space-separated lines.

    No line exceeds ``max_length`` characters and no token is split.

    Args:
        tokens: The words to pack, in order.
        max_length: Maximum characters per line.

    Returns:
        The packed lines, without trailing spaces.
    """
    lines: list[str] = []
    current = ""
    for token in tokens:
        if not current:
            current = token
        elif len(current) + 1 + len(token) <= max_length:
            current = f"{current} {token}"
        else:
            lines.append(current)
            current = token
    if current:
        lines.append(current)
    return lines


def canvas_to_ppm(canvas: Canvas) -> str:
    """Serialize a canvas as a plain-text PPM (P3) image.

    Format:
        P3
        <width> <height>
        255
        <row 0 channel values, wrapped at 70 chars per line>
        ...

    Each canvas row starts on a new line and is wrapped independently. The
    output always ends with a newline.

    Args:
        canvas: The canvas to serialize.

    Returns:
        The image as a string.
    """
    parts = [f"P3\n{canvas.width} {canvas.height}\n{MAX_CHANNEL_VALUE}\n"]
    channels = quantise(canvas.to_numpy())
    for row in channels:
        tokens = [str(value) for value in row.reshape(-1)]
        for line in wrap_tokens(tokens):
            parts.append(line)
            parts.append("\n")
    return "".join(parts)
