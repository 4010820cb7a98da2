"""Scene module for intersection records.

Components:
    intersection: Intersection records, sorted collections and hit selection
"""

from .intersection import NO_INTERSECTIONS, Intersection, Intersections, intersections

__all__ = [
    "Intersection",
    "Intersections",
    "intersections",
    "NO_INTERSECTIONS",
]
