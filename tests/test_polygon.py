"""
Unit tests for the Polygon geometry.
"""

import pytest

from simplegeom import (
    EPS,
    InvalidGeometryException,
    LineString,
    MultiLineString,
    Point,
    Polygon,
)


SQUARE = [(0, 0), (4, 0), (4, 4), (0, 4), (0, 0)]
HOLE = [(1, 1), (1, 2), (2, 2), (2, 1), (1, 1)]


def polygon(*rings):
    return Polygon.from_array(rings)


class TestConstruction:
    """Tests for Polygon construction."""

    def test_from_array(self):
        poly = polygon(SQUARE, HOLE)
        assert poly.num_geometries() == 2
        assert poly.num_interior_rings() == 1
        assert poly.num_points() == 10

    def test_non_ring_component_rejected(self):
        with pytest.raises(InvalidGeometryException):
            Polygon([Point(0, 0)])

    def test_empty(self):
        poly = Polygon()
        assert poly.is_empty()
        assert poly.area() == 0.0
        assert poly.centroid() is None
        assert poly.exterior_ring() is None
        assert poly.num_interior_rings() == 0

    def test_unclosed_ring_accepted(self):
        """Malformed rings are not rejected; is_valid reports them."""
        poly = polygon([(0, 0), (1, 0), (1, 1), (0, 1)])
        assert not poly.is_valid()


class TestRings:
    """Tests for ring accessors."""

    def test_exterior_and_interior(self):
        poly = polygon(SQUARE, HOLE)
        assert poly.exterior_ring().num_points() == 5
        assert poly.interior_ring_n(1).point_n(1).as_array() == [1.0, 1.0]
        assert poly.interior_ring_n(2) is None
        assert poly.interior_ring_n(0) is None


class TestArea:
    """Tests for area()."""

    def test_unit_square(self):
        assert abs(polygon([(0, 0), (1, 0), (1, 1), (0, 1), (0, 0)]).area() - 1.0) < EPS

    def test_hole_subtracted(self):
        assert polygon(SQUARE, HOLE).area() == pytest.approx(15.0)

    def test_orientation_invariant(self):
        ccw = polygon(SQUARE)
        cw = polygon(list(reversed(SQUARE)))
        assert abs(ccw.area() - cw.area()) < EPS

    def test_signed(self):
        assert polygon(SQUARE).area(signed=True) == pytest.approx(16.0)
        assert polygon(list(reversed(SQUARE))).area(signed=True) == pytest.approx(-16.0)

    def test_perimeter(self):
        assert polygon(SQUARE, HOLE).length() == pytest.approx(20.0)


class TestCentroid:
    """Tests for area-weighted centroid."""

    def test_square(self):
        c = polygon(SQUARE).centroid()
        assert (c.x, c.y) == pytest.approx((2.0, 2.0))

    def test_triangle(self):
        c = polygon([(0, 0), (3, 0), (0, 3), (0, 0)]).centroid()
        assert (c.x, c.y) == pytest.approx((1.0, 1.0))

    def test_hole_shifts_centroid(self):
        """Removing area near the origin moves the centroid away from it."""
        c = polygon(SQUARE, HOLE).centroid()
        # (2*16 - 1.5*1) / 15
        assert c.x == pytest.approx(30.5 / 15)
        assert c.y == pytest.approx(30.5 / 15)

    def test_zero_area_falls_back_to_line(self):
        c = polygon([(0, 0), (2, 0), (0, 0)]).centroid()
        assert (c.x, c.y) == pytest.approx((1.0, 0.0))


class TestContainsPoint:
    """Tests for contains_point()."""

    def test_inside_outside(self):
        poly = polygon(SQUARE)
        assert poly.contains_point(Point(2, 2))
        assert not poly.contains_point(Point(5, 5))

    def test_boundary_inside(self):
        poly = polygon(SQUARE)
        assert poly.contains_point(Point(4, 2))
        assert poly.contains_point(Point(0, 0))

    def test_hole_excluded(self):
        poly = polygon(SQUARE, HOLE)
        assert not poly.contains_point(Point(1.5, 1.5))
        assert poly.contains_point(Point(1, 1.5))
        assert poly.contains_point(Point(3, 3))

    def test_concave(self):
        l_shape = polygon([(0, 0), (2, 0), (2, 1), (1, 1), (1, 2), (0, 2), (0, 0)])
        assert l_shape.contains_point(Point(0.5, 0.5))
        assert l_shape.contains_point(Point(0.5, 1.5))
        assert not l_shape.contains_point(Point(1.5, 1.5))


class TestValidity:
    """Tests for is_valid() and is_simple()."""

    def test_valid_with_hole(self):
        poly = polygon(SQUARE, HOLE)
        assert poly.is_valid()
        assert poly.is_simple()
        assert poly.is_closed()

    def test_too_few_points(self):
        assert not polygon([(0, 0), (1, 0), (0, 0)]).is_valid()

    def test_self_intersecting_shell(self):
        bowtie = polygon([(0, 0), (2, 2), (2, 0), (0, 2), (0, 0)])
        assert not bowtie.is_valid()
        assert not bowtie.is_simple()

    def test_hole_outside_shell(self):
        outside = [(5, 5), (6, 5), (6, 6), (5, 6), (5, 5)]
        assert not polygon(SQUARE, outside).is_valid()

    def test_hole_crossing_concave_shell(self):
        """A hole whose vertices sit in both arms of a U still leaves the shell."""
        u_shell = [(0, 0), (10, 0), (10, 10), (6, 10), (6, 4),
                   (4, 4), (4, 10), (0, 10), (0, 0)]
        bridge = [(2, 6), (8, 6), (8, 7), (2, 7), (2, 6)]
        assert not polygon(u_shell, bridge).is_valid()

        left_arm = [(1, 6), (3, 6), (3, 7), (1, 7), (1, 6)]
        assert polygon(u_shell, left_arm).is_valid()

    def test_hole_edge_through_notch(self):
        """An edge between two vertices on the shell can still cut through a notch."""
        notched = [(0, 0), (4, 0), (4, 4), (2, 2), (0, 4), (0, 0)]
        hole = [(1, 1), (3, 1), (3, 3), (1, 3), (1, 1)]
        assert not polygon(notched, hole).is_valid()

    def test_hole_touching_shell_at_a_point(self):
        touching = [(0, 1), (1, 1), (1, 2), (0, 1)]
        assert polygon(SQUARE, touching).is_valid()

    def test_overlapping_holes(self):
        other = [(1.5, 1.5), (3, 1.5), (3, 3), (1.5, 3), (1.5, 1.5)]
        assert not polygon(SQUARE, HOLE, other).is_valid()

    def test_nested_holes(self):
        outer_hole = [(0.5, 0.5), (3, 0.5), (3, 3), (0.5, 3), (0.5, 0.5)]
        assert not polygon(SQUARE, outer_hole, HOLE).is_valid()

    def test_disjoint_holes(self):
        other = [(3, 3), (3.5, 3), (3.5, 3.5), (3, 3.5), (3, 3)]
        assert polygon(SQUARE, HOLE, other).is_valid()

    def test_empty_valid(self):
        assert Polygon().is_valid()


class TestBoundaryAndExplode:
    """Tests for boundary() and explode()."""

    def test_boundary_shell_only(self):
        boundary = polygon(SQUARE).boundary()
        assert isinstance(boundary, LineString)
        assert boundary.equals(polygon(SQUARE).exterior_ring())

    def test_boundary_with_holes(self):
        boundary = polygon(SQUARE, HOLE).boundary()
        assert isinstance(boundary, MultiLineString)
        assert boundary.num_geometries() == 2

    def test_explode_all_rings(self):
        assert len(polygon(SQUARE, HOLE).explode()) == 8

    def test_dimension(self):
        assert polygon(SQUARE).dimension() == 2


class TestDistanceToPolygon:
    """Point-to-polygon distance is measured to the rings."""

    def test_outside(self):
        assert Point(6, 2).distance(polygon(SQUARE)) == pytest.approx(2.0)

    def test_inside_measures_to_boundary(self):
        assert Point(2, 3).distance(polygon(SQUARE)) == pytest.approx(1.0)

    def test_near_hole(self):
        assert Point(1.5, 1.5).distance(polygon(SQUARE, HOLE)) == pytest.approx(0.5)
