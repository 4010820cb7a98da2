"""Sphere primitive with ray-sphere intersection.

The sphere is defined in object space by a center point and radius (the
canonical unit sphere at the origin by default) and posed in the world by its
transformation.

The ray-sphere intersection is found by solving:
    |origin + t * direction - center|^2 = radius^2

Expanding and rearranging gives the quadratic equation:
    a*t^2 + b*t + c = 0

where:
    oc = origin - center
    a = dot(direction, direction)
    b = 2 * dot(direction, oc)
    c = dot(oc, oc) - radius^2

Example:
    >>> from src.raycaster.core.ray import Ray
    >>> from src.raycaster.core.tuples import point, vector
    >>> from src.raycaster.geometry.sphere import sphere
    >>> xs = Ray(point(0, 0, -5), vector(0, 0, 1)).intersect(sphere())
    >>> xs.times
    [4.0, 6.0]
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from src.raycaster.core.matrix import IDENTITY, Matrix
from src.raycaster.core.numeric import approx_equal
from src.raycaster.core.ray import Ray
from src.raycaster.core.tuples import ORIGIN, Tuple, dot
from src.raycaster.geometry.shape import Shape


@dataclass(frozen=True, eq=False)
class Sphere(Shape):
    """A sphere defined by center point and radius in object space.

    Attributes:
        transformation: Pose transform (inherited from Shape).
        position: The center point of the sphere in object space.
        radius: The radius of the sphere (positive float).
    """

    position: Tuple = field(default_factory=lambda: ORIGIN)
    radius: float = 1.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sphere):
            return NotImplemented
        return (
            super().__eq__(other)
            and self.position == other.position
            and approx_equal(self.radius, other.radius)
        )

    __hash__ = None  # type: ignore[assignment]

    def local_intersect(self, local_ray: Ray) -> list[float]:
        """Solve the ray-sphere quadratic in object space.

        Args:
            local_ray: The ray expressed in object space.

        Returns:
            ``[]`` if the direction has zero length or the discriminant is
            negative, otherwise ``[t1, t2]``
            with ``t1 <= t2`` (equal for a tangent ray).
        """
        oc = local_ray.origin - self.position
        direction = local_ray.direction

        a = dot(direction, direction)
        b = 2.0 * dot(direction, oc)
        c = dot(oc, oc) - self.radius * self.radius

        # A zero-length direction never reaches the surface
        if a == 0.0:
            return []

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return []

        sqrt_d = math.sqrt(discriminant)
        t1 = (-b - sqrt_d) / (2.0 * a)
        t2 = (-b + sqrt_d) / (2.0 * a)
        return [t1, t2]

    def local_normal_at(self, local_point: Tuple) -> Tuple:
        """Outward normal: from the center toward the point."""
        return local_point - self.position


def sphere(
    position: Tuple = ORIGIN,
    radius: float = 1.0,
    transformation: Matrix = IDENTITY,
) -> Sphere:
    """Create a sphere; defaults to the unit sphere at the origin.

    Args:
        position: The center point in object space.
        radius: The radius (should be positive).
        transformation: The pose transform into world space.

    Returns:
        A new Sphere instance.
    """
    return Sphere(transformation=transformation, position=position, radius=radius)
