"""Homogeneous 4-component tuples for points and vectors.

A Tuple carries x, y, z and a fourth component w that tells points (w=1)
from free vectors (w=0) under affine transforms. The distinction is a
convention only: arithmetic may produce intermediate tuples with any w.

    point - point   -> vector (w=0)
    point + vector  -> point  (w=1)
    vector + vector -> vector (w=0)

Example:
    >>> from src.raycaster.core.tuples import point, vector
    >>> p = point(1.0, 2.0, 3.0)
    >>> v = vector(0.0, 0.0, 1.0)
    >>> (p + v * 2).z
    5.0
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

from src.raycaster.core.numeric import approx_equal


@dataclass(frozen=True, eq=False)
class Tuple:
    """A homogeneous coordinate.

    Attributes:
        x: X component.
        y: Y component.
        z: Z component.
        w: 1.0 for points, 0.0 for vectors.
    """

    x: float
    y: float
    z: float
    w: float

    @classmethod
    def from_iterable(cls, values: Iterable[float]) -> Tuple:
        """Build a tuple from exactly four numbers.

        Raises:
            ValueError: If ``values`` does not hold four items.
        """
        items = [float(v) for v in values]
        if len(items) != 4:
            raise ValueError(f"Tuple needs 4 components, got {len(items)}")
        return cls(*items)

    def is_point(self) -> bool:
        """Return True if w is 1."""
        return approx_equal(self.w, 1.0)

    def is_vector(self) -> bool:
        """Return True if w is 0."""
        return approx_equal(self.w, 0.0)

    def magnitude(self) -> float:
        """Euclidean norm over all four components.

        Only meaningful for vectors; calling it on a point includes w in the sum.
        """
        return math.sqrt(self.x**2 + self.y**2 + self.z**2 + self.w**2)

    def normalize(self) -> Tuple:
        """Scale the tuple to unit magnitude.

        Returns:
            A new tuple in the same direction with magnitude 1.

        Raises:
            ZeroDivisionError: If the tuple has zero magnitude.
        """
        length = self.magnitude()
        return Tuple(self.x / length, self.y / length, self.z / length, self.w / length)

    def with_w(self, w: float) -> Tuple:
        """Return a copy with the w component replaced."""
        return Tuple(self.x, self.y, self.z, w)

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return the components as a float64 array ``[x, y, z, w]``."""
        return np.array([self.x, self.y, self.z, self.w], dtype=np.float64)

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z, self.w))

    def __add__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Tuple) -> Tuple:
        if not isinstance(other, Tuple):
            return NotImplemented
        return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> Tuple:
        return Tuple(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar: float) -> Tuple:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Tuple(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Tuple:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Tuple(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return (
            approx_equal(self.x, other.x)
            and approx_equal(self.y, other.y)
            and approx_equal(self.z, other.z)
            and approx_equal(self.w, other.w)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Tuple(x={self.x}, y={self.y}, z={self.z}, w={self.w})"


def point(x: float, y: float, z: float) -> Tuple:
    """Create a point (w=1)."""
    return Tuple(float(x), float(y), float(z), 1.0)


def vector(x: float, y: float, z: float) -> Tuple:
    """Create a vector (w=0)."""
    return Tuple(float(x), float(y), float(z), 0.0)


def dot(a: Tuple, b: Tuple) -> float:
    """Dot product over all four components, w included."""
    return a.x * b.x + a.y * b.y + a.z * b.z + a.w * b.w


def cross(a: Tuple, b: Tuple) -> Tuple:
    """Cross product of the xyz parts. Always returns a vector."""
    return vector(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


ORIGIN = point(0.0, 0.0, 0.0)
ZERO_VECTOR = vector(0.0, 0.0, 0.0)
