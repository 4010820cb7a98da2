"""Base class for transformable scene shapes.

Every shape kind lives in its own canonical object space and carries a pose
transform mapping that space into the world. This base class does the world
<-> object bookkeeping once; each kind only supplies the two local
capabilities:

    local_intersect(local_ray)   -> list of ray times
    local_normal_at(local_point) -> object-space normal

Adding a new shape kind therefore means adding one subclass, with no changes
to the intersection or normal code paths.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace

from src.raycaster.core.matrix import IDENTITY, Matrix
from src.raycaster.core.ray import Ray
from src.raycaster.core.tuples import Tuple
from src.raycaster.scene.intersection import Intersection, Intersections


class NonInvertibleTransformError(ValueError):
    """Raised when a shape's pose transform has no inverse."""


@dataclass(frozen=True, eq=False)
class Shape(ABC):
    """A shape posed in world space.

    Attributes:
        transformation: Matrix mapping the canonical local shape into world
            space. Must be invertible for intersection and normals.
    """

    transformation: Matrix = field(default_factory=lambda: IDENTITY)

    @abstractmethod
    def local_intersect(self, local_ray: Ray) -> list[float]:
        """Intersect a ray already expressed in object space.

        Returns:
            Ray times of every intersection, in any order.
        """

    @abstractmethod
    def local_normal_at(self, local_point: Tuple) -> Tuple:
        """Compute the (unnormalized) normal at an object-space point."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Shape):
            return NotImplemented
        return type(self) is type(other) and self.transformation == other.transformation

    __hash__ = None  # type: ignore[assignment]

    def with_transform(self, transformation: Matrix) -> Shape:
        """Return a copy of this shape with a new pose transform."""
        return replace(self, transformation=transformation)

    def inverse_transform(self) -> Matrix:
        """Get the world -> object matrix.

        Raises:
            NonInvertibleTransformError: If the pose transform is singular.
        """
        inverse = self.transformation.invert()
        if inverse is None:
            raise NonInvertibleTransformError(
                f"{type(self).__name__} transform is not invertible: {self.transformation!r}"
            )
        return inverse

    def intersect(self, ray: Ray, *, inverse: Matrix | None = None) -> Intersections:
        """Intersect a world-space ray with this shape.

        The ray is carried into object space with the inverse pose transform
        before the shape-specific test runs.

        Args:
            ray: The ray in world space.
            inverse: Precomputed ``inverse_transform()``, for callers casting
                many rays at the same shape.

        Returns:
            Intersections sorted ascending by time, tagged with this shape.

        Raises:
            NonInvertibleTransformError: If the pose transform is singular.
        """
        if inverse is None:
            inverse = self.inverse_transform()
        local_ray = ray.transform(inverse)
        return Intersections(Intersection(t, self) for t in self.local_intersect(local_ray))

    def normal_at(self, world_point: Tuple) -> Tuple:
        """Compute the unit surface normal at a world-space point.

        The normal is transformed back with the transpose of the inverse,
        which stays perpendicular to the surface under non-uniform scaling.

        Raises:
            NonInvertibleTransformError: If the pose transform is singular.
        """
        inverse = self.inverse_transform()
        local_point = inverse * world_point
        local_normal = self.local_normal_at(local_point)
        world_normal = inverse.transpose() * local_normal
        # The translation row leaks into w; a normal is a direction
        return world_normal.with_w(0.0).normalize()
