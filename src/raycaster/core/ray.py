"""Ray data structure.

A Ray is an origin point and a direction vector. Rays are values: moving a
ray into another coordinate space returns a new ray.

Example:
    >>> from src.raycaster.core.ray import Ray
    >>> from src.raycaster.core.tuples import point, vector
    >>> ray = Ray(origin=point(2, 3, 4), direction=vector(1, 0, 0))
    >>> ray.position(2.5) == point(4.5, 3, 4)
    True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from src.raycaster.core.matrix import Matrix
from src.raycaster.core.tuples import Tuple

if TYPE_CHECKING:
    from src.raycaster.geometry.shape import Shape
    from src.raycaster.scene.intersection import Intersections


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray (w=1).
        direction: The direction vector of the ray (w=0). Not required to be
            normalized; intersection times are measured in units of its length.
    """

    origin: Tuple
    direction: Tuple

    def position(self, t: float) -> Tuple:
        """Compute the point along the ray at parameter t.

        Args:
            t: The parameter value. Negative values lie behind the origin.

        Returns:
            The point origin + direction * t.
        """
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix) -> Ray:
        """Return the ray with both origin and direction multiplied by ``matrix``."""
        return Ray(origin=matrix * self.origin, direction=matrix * self.direction)

    def intersect(self, shape: Shape) -> Intersections:
        """Intersect this ray with a shape.

        Args:
            shape: The shape to test.

        Returns:
            All intersections sorted ascending by time (possibly empty).

        Raises:
            NonInvertibleTransformError: If the shape's transform is singular.
        """
        return shape.intersect(self)


def ray(origin: Tuple, direction: Tuple) -> Ray:
    """Create a ray from origin and direction."""
    return Ray(origin=origin, direction=direction)
