"""Standard 4x4 affine transform builders.

All angles are in radians and rotations are right-handed. Translations move
points but leave vectors (w=0) unchanged, since the offset column is scaled
by w.

Example:
    >>> import math
    >>> from src.raycaster.core.transforms import rotation_z, translation
    >>> from src.raycaster.core.tuples import point, vector
    >>> translation(5, -3, 2) * point(-3, 4, 5) == point(2, 1, 7)
    True
    >>> translation(5, -3, 2) * vector(-3, 4, 5) == vector(-3, 4, 5)
    True
    >>> rotation_z(math.pi / 2) * point(0, 1, 0) == point(-1, 0, 0)
    True
"""

import math

from src.raycaster.core.matrix import Matrix


def translation(x: float, y: float, z: float) -> Matrix:
    """Identity with the offset (x, y, z) in the rightmost column."""
    return Matrix(
        [
            [1.0, 0.0, 0.0, x],
            [0.0, 1.0, 0.0, y],
            [0.0, 0.0, 1.0, z],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def scaling(x: float, y: float, z: float) -> Matrix:
    """Diagonal matrix scaling each axis. Negative factors reflect."""
    return Matrix(
        [
            [x, 0.0, 0.0, 0.0],
            [0.0, y, 0.0, 0.0],
            [0.0, 0.0, z, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_x(radians: float) -> Matrix:
    """Rotation about the x axis."""
    c = math.cos(radians)
    s = math.sin(radians)
    return Matrix(
        [
            [1.0, 0.0, 0.0, 0.0],
            [0.0, c, -s, 0.0],
            [0.0, s, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_y(radians: float) -> Matrix:
    """Rotation about the y axis."""
    c = math.cos(radians)
    s = math.sin(radians)
    return Matrix(
        [
            [c, 0.0, s, 0.0],
            [0.0, 1.0, 0.0, 0.0],
            [-s, 0.0, c, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def rotation_z(radians: float) -> Matrix:
    """Rotation about the z axis."""
    c = math.cos(radians)
    s = math.sin(radians)
    return Matrix(
        [
            [c, -s, 0.0, 0.0],
            [s, c, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Shear each axis in proportion to the other two.

    Args:
        xy: Moves x in proportion to y.
        xz: Moves x in proportion to z.
        yx: Moves y in proportion to x.
        yz: Moves y in proportion to z.
        zx: Moves z in proportion to x.
        zy: Moves z in proportion to y.

    Returns:
        The 4x4 shearing matrix.
    """
    return Matrix(
        [
            [1.0, xy, xz, 0.0],
            [yx, 1.0, yz, 0.0],
            [zx, zy, 1.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
