"""Silhouette renderer casting one ray per pixel at a single shape.

The eye sits in front of a square virtual wall. The wall is divided into
``canvas_pixels x canvas_pixels`` cells; a ray is cast from the eye through
each cell and the matching pixel is coloured if the ray hits the shape.

Two entry points share the same per-pixel algorithm:
    - render: single-threaded loop over the whole canvas
    - render_parallel: rows split into equal contiguous bands, one worker
      thread per band, bands reassembled by index

Workers are pure: each builds and returns its own band canvas and never
touches the output canvas, so the coordinator needs no locking.

Example:
    >>> from src.raycaster.core.render import RenderConfig, render_parallel
    >>> from src.raycaster.core.matrix import identity
    >>> from src.raycaster.geometry.sphere import sphere
    >>> shape = sphere(transformation=identity().scale(1, 0.5, 1))
    >>> canvas = render_parallel(shape, RenderConfig(canvas_pixels=100, threads=4))
    >>> canvas.width, canvas.height
    (100, 100)
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from concurrent.futures import TimeoutError as FuturesTimeoutError
from dataclasses import dataclass, field, replace

from src.raycaster.core.colour import BLACK, RED, Colour
from src.raycaster.core.ray import Ray
from src.raycaster.core.tuples import Tuple, point
from src.raycaster.geometry.shape import Shape
from src.raycaster.preview.canvas import Canvas

logger = logging.getLogger(__name__)

# =============================================================================
# Rendering Configuration
# =============================================================================


@dataclass(frozen=True)
class RenderConfig:
    """Parameters of a silhouette render.

    Attributes:
        canvas_pixels: Canvas width and height in pixels.
        wall_size: Physical side length of the square wall.
        wall_z: Z coordinate of the wall plane.
        eye: Ray origin for every pixel.
        hit_colour: Colour written where the ray hits the shape.
        background: Colour of pixels whose ray misses.
        threads: Number of worker threads for render_parallel.
    """

    canvas_pixels: int = 100
    wall_size: float = 7.0
    wall_z: float = 10.0
    eye: Tuple = field(default_factory=lambda: point(0.0, 0.0, -5.0))
    hit_colour: Colour = field(default_factory=lambda: RED)
    background: Colour = field(default_factory=lambda: BLACK)
    threads: int = 1

    @property
    def pixel_size(self) -> float:
        """World-space size of one pixel on the wall."""
        return self.wall_size / self.canvas_pixels

    @property
    def half_wall(self) -> float:
        """Half the wall size; the wall spans [-half, half] in x and y."""
        return self.wall_size / 2.0

    def validate(self) -> None:
        """Check the configuration.

        Raises:
            ValueError: If sizes or thread count are not positive.
        """
        if self.canvas_pixels <= 0:
            raise ValueError(f"canvas_pixels must be positive, got {self.canvas_pixels}")
        if self.wall_size <= 0:
            raise ValueError(f"wall_size must be positive, got {self.wall_size}")
        if self.threads <= 0:
            raise ValueError(f"threads must be positive, got {self.threads}")


class RenderWorkerError(RuntimeError):
    """Wraps an exception raised inside a render worker with its band index."""

    def __init__(self, band: int, original: BaseException) -> None:
        super().__init__(f"Render worker for band {band} failed: {original!r}")
        self.band = band
        self.original = original


# =============================================================================
# Per-pixel Algorithm
# =============================================================================


def ray_for_pixel(config: RenderConfig, x: int, y: int) -> Ray:
    """Build the ray from the eye through wall cell (x, y).

    Wall y grows upward while canvas rows grow downward, so the row index is
    subtracted from the top edge.

    Args:
        config: The render configuration.
        x: Canvas column.
        y: Canvas row (global, not band-relative).

    Returns:
        A ray with a normalized direction.
    """
    world_x = -config.half_wall + config.pixel_size * x
    world_y = config.half_wall - config.pixel_size * y
    position = point(world_x, world_y, config.wall_z)
    return Ray(origin=config.eye, direction=(position - config.eye).normalize())


def render_band(shape: Shape, config: RenderConfig, start_row: int, rows: int) -> Canvas:
    """Render a horizontal band of the image into its own canvas.

    Args:
        shape: The single scene shape.
        config: The render configuration.
        start_row: Global index of the band's first row.
        rows: Number of rows in the band.

    Returns:
        A canvas of size ``canvas_pixels x rows``.

    Raises:
        NonInvertibleTransformError: If the shape's transform is singular.
    """
    # Invert once per band instead of once per ray
    inverse = shape.inverse_transform()

    band = Canvas(config.canvas_pixels, rows)
    paint_background = config.background != BLACK
    for local_y in range(rows):
        y = start_row + local_y
        for x in range(config.canvas_pixels):
            ray = ray_for_pixel(config, x, y)
            if shape.intersect(ray, inverse=inverse).hit() is not None:
                band.write_pixel(x, local_y, config.hit_colour)
            elif paint_background:
                band.write_pixel(x, local_y, config.background)
    return band


# =============================================================================
# Render Entry Points
# =============================================================================


def render(shape: Shape, config: RenderConfig | None = None) -> Canvas:
    """Render the shape on a single thread.

    Args:
        shape: The single scene shape.
        config: The render configuration (defaults to RenderConfig()).

    Returns:
        The rendered ``canvas_pixels x canvas_pixels`` canvas.

    Raises:
        ValueError: If the configuration is invalid.
        NonInvertibleTransformError: If the shape's transform is singular.
    """
    config = config or RenderConfig()
    config.validate()

    start_time = time.perf_counter()
    canvas = render_band(shape, config, 0, config.canvas_pixels)
    logger.debug(
        "Rendered %dx%d canvas in %.3fs",
        canvas.width,
        canvas.height,
        time.perf_counter() - start_time,
    )
    return canvas


def render_parallel(
    shape: Shape,
    config: RenderConfig | None = None,
    *,
    threads: int | None = None,
    timeout: float | None = None,
) -> Canvas:
    """Render the shape with rows split across worker threads.

    Rows are divided into ``threads`` contiguous bands of
    ``canvas_pixels // threads`` rows. Remainder rows at the bottom of the
    canvas are not rendered and stay black.

    Each band is placed by its index, so the result does not depend on the
    order in which workers finish.

    Args:
        shape: The single scene shape.
        config: The render configuration (defaults to RenderConfig()).
        threads: Overrides ``config.threads`` when given.
        timeout: Seconds to wait for all workers; None waits indefinitely.

    Returns:
        The rendered ``canvas_pixels x canvas_pixels`` canvas.

    Raises:
        ValueError: If the configuration is invalid.
        RenderWorkerError: If any worker raised. The original exception is
            available as ``original`` and chained as the cause.
        TimeoutError: If the workers do not finish within ``timeout``.
    """
    config = config or RenderConfig()
    if threads is not None:
        config = replace(config, threads=threads)
    config.validate()

    rows_per_thread = config.canvas_pixels // config.threads
    dropped = config.canvas_pixels - rows_per_thread * config.threads
    if dropped:
        logger.warning(
            "%d rows do not divide evenly across %d threads; last %d rows left unrendered",
            config.canvas_pixels,
            config.threads,
            dropped,
        )

    canvas = Canvas(config.canvas_pixels, config.canvas_pixels)
    start_time = time.perf_counter()

    pool = ThreadPoolExecutor(max_workers=config.threads, thread_name_prefix="render")
    try:
        futures = {
            pool.submit(render_band, shape, config, band * rows_per_thread, rows_per_thread): band
            for band in range(config.threads)
        }
        for future in as_completed(futures, timeout=timeout):
            band = futures[future]
            try:
                result = future.result()
            except Exception as e:
                raise RenderWorkerError(band, e) from e
            canvas.paste(result, band * rows_per_thread)
            logger.debug("Band %d/%d complete", band + 1, config.threads)
    except FuturesTimeoutError as e:
        # Distinct from the builtin before Python 3.11
        raise TimeoutError(
            f"Render workers did not finish within {timeout} seconds"
        ) from e
    finally:
        # Do not wait on workers that are still running after a failure or timeout
        pool.shutdown(wait=False, cancel_futures=True)

    logger.debug(
        "Rendered %dx%d canvas on %d threads in %.3fs",
        canvas.width,
        canvas.height,
        config.threads,
        time.perf_counter() - start_time,
    )
    return canvas
