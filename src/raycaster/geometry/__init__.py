"""Geometry module for shape primitives.

Components:
    shape: Shape base class with pose transforms and world/object mapping
    sphere: Sphere primitive with ray-sphere intersection

Each shape kind implements only its object-space capabilities
(``local_intersect`` and ``local_normal_at``); the base class handles the
pose transform for every kind.
"""

from .shape import NonInvertibleTransformError, Shape
from .sphere import Sphere, sphere

__all__ = [
    "Shape",
    "NonInvertibleTransformError",
    "Sphere",
    "sphere",
]
