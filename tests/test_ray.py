"""Unit tests for rays and intersection records.

Tests cover:
- Ray construction and position along the ray
- Ray transformation
- Intersection records and sorted aggregation
- Hit selection
"""

import pytest

from src.raycaster.core.ray import Ray, ray
from src.raycaster.core.transforms import scaling, translation
from src.raycaster.core.tuples import point, vector
from src.raycaster.geometry.sphere import sphere
from src.raycaster.scene.intersection import (
    NO_INTERSECTIONS,
    Intersection,
    Intersections,
    intersections,
)


class TestRayBasics:
    """Tests for Ray and position."""

    def test_creating_a_ray(self):
        """Test origin and direction are stored."""
        r = ray(point(1, 2, 3), vector(4, 5, 6))
        assert r.origin == point(1, 2, 3)
        assert r.direction == vector(4, 5, 6)

    @pytest.mark.parametrize(
        ("t", "expected"),
        [
            (0.0, point(2, 3, 4)),
            (1.0, point(3, 3, 4)),
            (-1.0, point(1, 3, 4)),
            (2.5, point(4.5, 3, 4)),
        ],
    )
    def test_position(self, t, expected):
        """Test origin + direction * t."""
        r = Ray(origin=point(2, 3, 4), direction=vector(1, 0, 0))
        assert r.position(t) == expected

    def test_rays_are_immutable(self):
        """Test rays are frozen values."""
        r = ray(point(0, 0, 0), vector(0, 0, 1))
        with pytest.raises(AttributeError):
            r.origin = point(1, 1, 1)


class TestRayTransform:
    """Tests for Ray.transform."""

    def test_translating_a_ray(self):
        """Test translation moves the origin but not the direction."""
        r = ray(point(1, 2, 3), vector(0, 1, 0))
        r2 = r.transform(translation(3, 4, 5))
        assert r2.origin == point(4, 6, 8)
        assert r2.direction == vector(0, 1, 0)

    def test_scaling_a_ray(self):
        """Test scaling affects both origin and direction."""
        r = ray(point(1, 2, 3), vector(0, 1, 0))
        r2 = r.transform(scaling(2, 3, 4))
        assert r2.origin == point(2, 6, 12)
        assert r2.direction == vector(0, 3, 0)

    def test_transform_returns_new_ray(self):
        """Test the original ray is unchanged."""
        r = ray(point(1, 2, 3), vector(0, 1, 0))
        r.transform(translation(3, 4, 5))
        assert r.origin == point(1, 2, 3)


class TestIntersections:
    """Tests for Intersection records and the sorted collection."""

    def test_intersection_encapsulates_time_and_object(self, unit_sphere):
        """Test an intersection stores its time and shape."""
        i = Intersection(3.5, unit_sphere)
        assert i.time == 3.5
        assert i.object == unit_sphere

    def test_intersection_equality_uses_tolerance(self, unit_sphere):
        """Test times differing below EPSILON compare equal."""
        assert Intersection(4.0, unit_sphere) == Intersection(4.0 + 1e-9, unit_sphere)
        assert Intersection(4.0, unit_sphere) != Intersection(4.001, unit_sphere)
        assert Intersection(4.0, unit_sphere) != Intersection(4.0, sphere(radius=2.0))

    def test_intersections_are_unhashable(self, unit_sphere):
        """Test intersection records cannot be hashed."""
        with pytest.raises(TypeError):
            hash(Intersection(1.0, unit_sphere))

    def test_collection_equality_uses_tolerance(self, unit_sphere):
        """Test collections compare element-wise within EPSILON."""
        a = intersections(Intersection(4.0, unit_sphere), Intersection(6.0, unit_sphere))
        b = intersections(Intersection(4.0 + 1e-9, unit_sphere), Intersection(6.0, unit_sphere))
        assert a == b

    def test_aggregating_intersections(self, unit_sphere):
        """Test aggregation keeps every record."""
        xs = intersections(Intersection(1.0, unit_sphere), Intersection(2.0, unit_sphere))
        assert len(xs) == 2
        assert xs[0].time == 1.0
        assert xs[1].time == 2.0

    def test_intersections_are_sorted(self, unit_sphere):
        """Test records are ordered by time regardless of input order."""
        xs = intersections(
            Intersection(5.0, unit_sphere),
            Intersection(7.0, unit_sphere),
            Intersection(-3.0, unit_sphere),
            Intersection(2.0, unit_sphere),
        )
        assert xs.times == [-3.0, 2.0, 5.0, 7.0]

    def test_concatenation_resorts(self, unit_sphere):
        """Test adding two collections merges in time order."""
        a = intersections(Intersection(1.0, unit_sphere), Intersection(4.0, unit_sphere))
        b = intersections(Intersection(2.0, unit_sphere))
        assert (a + b).times == [1.0, 2.0, 4.0]

    def test_empty_collection(self):
        """Test the empty collection is falsy with no hit."""
        assert len(NO_INTERSECTIONS) == 0
        assert not NO_INTERSECTIONS
        assert NO_INTERSECTIONS.hit() is None
        assert Intersections() == NO_INTERSECTIONS

    def test_slicing_returns_intersections(self, unit_sphere):
        """Test slices keep the collection type."""
        xs = intersections(Intersection(1.0, unit_sphere), Intersection(2.0, unit_sphere))
        assert isinstance(xs[:1], Intersections)
        assert xs[:1].times == [1.0]


class TestHit:
    """Tests for hit selection."""

    def test_all_positive(self, unit_sphere):
        """Test the hit is the smallest time when all are positive."""
        i1 = Intersection(1.0, unit_sphere)
        i2 = Intersection(2.0, unit_sphere)
        assert intersections(i2, i1).hit() == i1

    def test_some_negative(self, unit_sphere):
        """Test negative times are skipped."""
        i1 = Intersection(-1.0, unit_sphere)
        i2 = Intersection(1.0, unit_sphere)
        assert intersections(i2, i1).hit() == i2

    def test_all_negative(self, unit_sphere):
        """Test there is no hit when everything is behind the ray."""
        xs = intersections(Intersection(-2.0, unit_sphere), Intersection(-1.0, unit_sphere))
        assert xs.hit() is None

    def test_zero_time_is_a_hit(self, unit_sphere):
        """Test a time of exactly zero counts as non-negative."""
        i0 = Intersection(0.0, unit_sphere)
        xs = intersections(Intersection(-1.0, unit_sphere), i0)
        assert xs.hit() == i0

    def test_lowest_non_negative(self, unit_sphere):
        """Test the hit is the lowest non-negative time among many."""
        i4 = Intersection(2.0, unit_sphere)
        xs = intersections(
            Intersection(5.0, unit_sphere),
            Intersection(7.0, unit_sphere),
            Intersection(-3.0, unit_sphere),
            i4,
        )
        assert xs.hit() == i4
