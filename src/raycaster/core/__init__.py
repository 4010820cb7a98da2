"""Core math module.

This module contains the value types everything else is built from:

Components:
    numeric: Tolerance comparison and angle conversion
    tuples: Homogeneous points and vectors
    colour: RGB colours
    matrix: Square matrices, determinants and inversion
    transforms: Translation, scaling, rotation and shearing builders
    ray: Ray data structure
    render: Single- and multi-threaded silhouette rendering

All value types are immutable; every operation returns a new value.
"""

from .colour import BLACK, RED, WHITE, Colour, colour
from .matrix import IDENTITY, Matrix, identity
from .numeric import EPSILON, approx_equal, degrees, radians
from .ray import Ray, ray
from .transforms import rotation_x, rotation_y, rotation_z, scaling, shearing, translation
from .tuples import ORIGIN, ZERO_VECTOR, Tuple, cross, dot, point, vector

# Note: render is NOT imported here to avoid circular imports, since it depends
# on geometry and preview. Import it directly:
#   from src.raycaster.core.render import RenderConfig, render, render_parallel

__all__ = [
    # Numeric helpers
    "EPSILON",
    "approx_equal",
    "radians",
    "degrees",
    # Tuples
    "Tuple",
    "point",
    "vector",
    "dot",
    "cross",
    "ORIGIN",
    "ZERO_VECTOR",
    # Colours
    "Colour",
    "colour",
    "BLACK",
    "WHITE",
    "RED",
    # Matrices and transforms
    "Matrix",
    "IDENTITY",
    "identity",
    "translation",
    "scaling",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "shearing",
    # Rays
    "Ray",
    "ray",
]
