"""Matplotlib-based preview display for rendered canvases.

Example:
    >>> from src.raycaster.preview.display import show_canvas
    >>> show_canvas(canvas, title="Sphere")  # doctest: +SKIP
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt

if TYPE_CHECKING:
    from src.raycaster.preview.canvas import Canvas


def canvas_to_display_image(canvas: Canvas) -> npt.NDArray[np.float32]:
    """Convert a canvas to an image array ready for ``imshow``.

    Args:
        canvas: The canvas to convert.

    Returns:
        Float32 array of shape (height, width, 3) clamped to [0, 1].
    """
    return np.clip(canvas.to_numpy(), 0.0, 1.0).astype(np.float32)


def show_canvas(
    canvas: Canvas,
    *,
    title: str | None = None,
    figsize: tuple[float, float] = (6, 6),
    block: bool = True,
) -> None:
    """Display a canvas as a Matplotlib figure.

    Args:
        canvas: The canvas to display.
        title: Custom title (default shows the canvas size).
        figsize: Figure size in inches (width, height).
        block: Whether to block execution until the figure is closed.
    """
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(1, 1, figsize=figsize)
    ax.imshow(canvas_to_display_image(canvas), interpolation="nearest")
    ax.axis("off")
    ax.set_title(title if title is not None else f"Canvas {canvas.width}x{canvas.height}")

    plt.tight_layout()
    plt.show(block=block)
