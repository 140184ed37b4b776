"""
Unit tests for planar segment and ring primitives.
"""

import numpy as np
import pytest

from simplegeom.core.geometry import EPS
from simplegeom.core.segments import (
    ensure_ccw,
    folds_back,
    orientation,
    point_in_ring,
    point_segment_distance,
    ring_centroid,
    segment_distance,
    segments_cross,
    segments_intersect,
    signed_ring_area,
)
from simplegeom.core import spherical


class TestPointSegmentDistance:
    """Tests for point_segment_distance()."""

    def test_perpendicular_foot(self):
        assert point_segment_distance((1, 1), (0, 0), (2, 0)) == pytest.approx(1.0)

    def test_clamped_to_start(self):
        assert point_segment_distance((-3, 4), (0, 0), (2, 0)) == pytest.approx(5.0)

    def test_zero_length_segment(self):
        assert point_segment_distance((0, 0), (3, 4), (3, 4)) == 5.0


class TestIntersection:
    """Tests for orientation and segment intersection."""

    def test_orientation(self):
        assert orientation((0, 0), (1, 0), (1, 1)) == 1
        assert orientation((0, 0), (1, 0), (1, -1)) == -1
        assert orientation((0, 0), (1, 0), (2, 0)) == 0

    def test_crossing(self):
        assert segments_intersect((0, 0), (2, 2), (0, 2), (2, 0))

    def test_disjoint(self):
        assert not segments_intersect((0, 0), (1, 0), (0, 1), (1, 1))

    def test_touching_endpoint(self):
        assert segments_intersect((0, 0), (1, 0), (1, 0), (1, 1))

    def test_collinear_overlap(self):
        assert segments_intersect((0, 0), (2, 0), (1, 0), (3, 0))

    def test_collinear_disjoint(self):
        assert not segments_intersect((0, 0), (1, 0), (2, 0), (3, 0))

    def test_proper_crossing_only(self):
        assert segments_cross((0, 0), (2, 2), (0, 2), (2, 0))
        assert not segments_cross((0, 0), (1, 0), (1, 0), (1, 1))
        assert not segments_cross((0, 0), (2, 0), (1, 0), (3, 0))
        assert not segments_cross((0, 0), (2, 0), (1, 0), (1, 1))

    def test_segment_distance(self):
        assert segment_distance((0, 0), (1, 0), (3, 0), (4, 0)) == pytest.approx(2.0)
        assert segment_distance((0, 0), (2, 2), (0, 2), (2, 0)) == 0.0

    def test_folds_back(self):
        assert folds_back((0, 0), (2, 0), (1, 0))
        assert not folds_back((0, 0), (1, 0), (2, 0))
        assert not folds_back((0, 0), (1, 0), (1, 1))


class TestRings:
    """Tests for shoelace area, centroid, orientation and containment."""

    def test_signed_area(self):
        ccw = np.array([[0, 0], [1, 0], [1, 1], [0, 1]], dtype=float)
        assert abs(signed_ring_area(ccw) - 1.0) < EPS
        assert abs(signed_ring_area(ccw[::-1]) + 1.0) < EPS

    def test_closing_vertex_optional(self):
        open_ring = np.array([[0, 0], [2, 0], [0, 2]], dtype=float)
        closed_ring = np.vstack([open_ring, open_ring[:1]])
        assert signed_ring_area(open_ring) == signed_ring_area(closed_ring)

    def test_degenerate_area(self):
        assert signed_ring_area(np.array([[0, 0], [1, 1]], dtype=float)) == 0.0

    def test_centroid(self):
        square = np.array([[0, 0], [2, 0], [2, 2], [0, 2]], dtype=float)
        cx, cy, area = ring_centroid(square)
        assert (cx, cy, area) == pytest.approx((1.0, 1.0, 4.0))
        assert ring_centroid(np.array([[0, 0], [1, 1], [2, 2]], dtype=float)) is None

    def test_ensure_ccw(self):
        cw = np.array([[0, 0], [0, 1], [1, 1], [1, 0]], dtype=float)
        np.testing.assert_array_almost_equal(ensure_ccw(cw), cw[::-1])
        ccw = cw[::-1]
        np.testing.assert_array_almost_equal(ensure_ccw(ccw), ccw)

    def test_point_in_ring(self):
        triangle = np.array([[0, 0], [2, 0], [1, 2]], dtype=float)
        assert point_in_ring((1.0, 0.5), triangle)
        assert not point_in_ring((0.0, 2.0), triangle)
        assert point_in_ring((1.0, 0.0), triangle)
        assert not point_in_ring((1.0, 0.0), triangle, include_boundary=False)


class TestSpherical:
    """Tests for spherical arc lengths."""

    def test_quarter_meridian(self):
        lon = np.array([0.0, 0.0])
        lat = np.array([0.0, 90.0])
        assert spherical.great_circle_length(lon, lat, 1.0) == pytest.approx(np.pi / 2)
        assert spherical.haversine_length(lon, lat, 1.0) == pytest.approx(np.pi / 2)

    def test_antipodal(self):
        lon = np.array([0.0, 180.0])
        lat = np.array([0.0, 0.0])
        assert spherical.great_circle_length(lon, lat, 1.0) == pytest.approx(np.pi)
        assert spherical.haversine_length(lon, lat, 1.0) == pytest.approx(np.pi)

    def test_single_vertex(self):
        assert spherical.great_circle_length(np.array([1.0]), np.array([1.0]), 1.0) == 0.0
