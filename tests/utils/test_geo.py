"""Tests for geographic utilities."""

import pytest

from lakescope.utils.geo import BoundingBox, Point, haversine, points_close


class TestBoundingBox:
    """Tests for BoundingBox class."""

    def test_contains_point_inside(self):
        """Should return True for point inside bbox."""
        bbox = BoundingBox(west=-95.43, south=34.64, east=-95.33, north=34.70)
        assert bbox.contains(lat=34.66, lon=-95.39) is True

    def test_contains_point_outside(self):
        """Should return False for point outside bbox."""
        bbox = BoundingBox(west=-95.43, south=34.64, east=-95.33, north=34.70)
        assert bbox.contains(lat=35.0, lon=-95.39) is False
        assert bbox.contains(lat=34.66, lon=-96.0) is False

    def test_contains_point_on_edge(self):
        """Should return True for point on bbox edge."""
        bbox = BoundingBox(west=-95.43, south=34.64, east=-95.33, north=34.70)
        assert bbox.contains(lat=34.64, lon=-95.43) is True

    def test_from_bounds(self):
        """Should read shapely's (minx, miny, maxx, maxy) order."""
        bbox = BoundingBox.from_bounds((-95.43, 34.64, -95.33, 34.70))
        assert bbox == BoundingBox(west=-95.43, south=34.64, east=-95.33, north=34.70)

    def test_to_list(self):
        """Should return GeoJSON bbox order."""
        bbox = BoundingBox(west=-95.43, south=34.64, east=-95.33, north=34.70)
        assert bbox.to_list() == [-95.43, 34.64, -95.33, 34.70]


class TestPoint:
    """Tests for Point class."""

    def test_elevation_optional(self):
        """Should default elevation to None."""
        assert Point(lat=34.66, lon=-95.39).elevation is None

    def test_to_dict_uses_lng(self):
        """Should serialize longitude as lng."""
        assert Point(lat=34.66, lon=-95.39).to_dict() == {"lat": 34.66, "lng": -95.39}

    def test_distance_to_self(self):
        """Should be zero distance to itself."""
        p = Point(lat=34.66, lon=-95.39)
        assert p.distance_to(p) == pytest.approx(0)


class TestHaversine:
    """Tests for haversine distance."""

    def test_one_degree_latitude(self):
        """One degree of latitude is about 111 km."""
        assert haversine(34.0, -95.0, 35.0, -95.0) == pytest.approx(111.19, rel=1e-3)

    def test_symmetric(self):
        """Should give the same distance both ways."""
        assert haversine(34.66, -95.39, 35.47, -97.52) == pytest.approx(
            haversine(35.47, -97.52, 34.66, -95.39)
        )


class TestPointsClose:
    def test_within_tolerance(self):
        assert points_close((1.0, 2.0), (1.00005, 2.00005), 0.0001) is True

    def test_one_axis_outside(self):
        assert points_close((1.0, 2.0), (1.0, 2.0002), 0.0001) is False

    def test_exact_tolerance_is_not_close(self):
        assert points_close((0.0, 0.0), (0.5, 0.0), 0.5) is False
