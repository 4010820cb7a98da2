"""Pytest configuration for raycaster tests.

This module provides shared fixtures for all test modules: common shapes,
rays and the matrices reused across the matrix and transform tests.
"""

import math

import pytest

from src.raycaster.core.matrix import Matrix
from src.raycaster.core.ray import Ray
from src.raycaster.core.tuples import point, vector
from src.raycaster.geometry.sphere import Sphere, sphere

# Pose used by the reference inversion tests, determinant 532
REFERENCE_MATRIX_ROWS = [
    [-5.0, 2.0, 6.0, -8.0],
    [1.0, -5.0, 1.0, 8.0],
    [7.0, 7.0, -6.0, -7.0],
    [1.0, -3.0, 7.0, 4.0],
]


@pytest.fixture
def unit_sphere() -> Sphere:
    """The canonical unit sphere at the origin with identity transform."""
    return sphere()


@pytest.fixture
def forward_ray() -> Ray:
    """A ray starting at z=-5 looking down +z through the origin."""
    return Ray(origin=point(0.0, 0.0, -5.0), direction=vector(0.0, 0.0, 1.0))


@pytest.fixture
def reference_matrix() -> Matrix:
    """An invertible 4x4 matrix with known determinant and inverse."""
    return Matrix(REFERENCE_MATRIX_ROWS)


@pytest.fixture
def half_sqrt2() -> float:
    """sqrt(2) / 2, which shows up in every 45 degree rotation."""
    return math.sqrt(2.0) / 2.0
