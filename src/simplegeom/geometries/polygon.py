"""
Polygon: a planar surface bounded by an exterior ring and optional holes.
"""

import logging
from itertools import combinations
from typing import List, Optional

from ..core.geometry import GeometryKind
from ..core.segments import (
    point_in_ring,
    ring_centroid,
    segments_cross,
    signed_ring_area,
)
from .collection import Collection
from .linestring import LineString
from .point import Point

logger = logging.getLogger(__name__)


def _edges(ring):
    return list(zip(ring[:-1], ring[1:]))


def _samples(ring):
    """Vertices of a closed ring followed by its edge midpoints."""
    return list(ring[:-1]) + list((ring[:-1] + ring[1:]) / 2.0)


def _rings_cross(a, b) -> bool:
    return any(
        segments_cross(p1, p2, q1, q2)
        for p1, p2 in _edges(a)
        for q1, q2 in _edges(b)
    )


def _hole_within_shell(hole, shell) -> bool:
    if _rings_cross(hole, shell):
        return False
    return all(point_in_ring(p, shell) for p in _samples(hole))


def _holes_overlap(a, b) -> bool:
    if _rings_cross(a, b):
        return True
    return (
        any(point_in_ring(p, b, include_boundary=False) for p in _samples(a))
        or any(point_in_ring(p, a, include_boundary=False) for p in _samples(b))
    )


class Polygon(Collection):
    """
    A surface whose first ring is the shell and remaining rings are holes.

    Rings are not checked at construction; use ``is_valid`` to verify they
    are closed, simple and that holes lie within the shell.

    Parameters
    ----------
    rings : iterable of LineString, optional
        Shell followed by holes.
    """

    kind = GeometryKind.POLYGON
    component_types = (LineString,)
    allow_empty_components = False

    @classmethod
    def _leaf_factory(cls, item) -> LineString:
        return LineString.from_array(item)

    def dimension(self) -> int:
        return 2

    def exterior_ring(self) -> Optional[LineString]:
        return self.geometry_n(1)

    def interior_rings(self) -> List[LineString]:
        return list(self._components[1:])

    def num_interior_rings(self) -> int:
        return max(len(self._components) - 1, 0)

    def interior_ring_n(self, n: int) -> Optional[LineString]:
        return self.geometry_n(n + 1) if n >= 1 else None

    def area(self, signed: bool = False) -> float:
        """
        Shell area minus hole areas.

        Parameters
        ----------
        signed : bool
            If True, return the signed shoelace area of the shell alone
            (positive for counter-clockwise shells).
        """
        if self.is_empty():
            return 0.0

        shell = signed_ring_area(self.exterior_ring().coordinates())
        if signed:
            return shell

        holes = sum(abs(signed_ring_area(r.coordinates())) for r in self.interior_rings())
        return abs(shell) - holes

    def centroid(self) -> Optional[Point]:
        """
        Area-weighted centroid with holes subtracted.

        Polygons enclosing no area fall back to the centroid of the shell
        as a line.
        """
        if self.is_empty():
            return None

        shell = ring_centroid(self.exterior_ring().coordinates())
        if shell is None:
            return self.exterior_ring().centroid()

        cx, cy, shell_area = shell
        weight = abs(shell_area)
        sum_x = cx * weight
        sum_y = cy * weight
        for ring in self.interior_rings():
            hole = ring_centroid(ring.coordinates())
            if hole is None:
                continue
            hx, hy, hole_area = hole
            sum_x -= hx * abs(hole_area)
            sum_y -= hy * abs(hole_area)
            weight -= abs(hole_area)

        if weight <= 0:
            return self.exterior_ring().centroid()
        return Point(sum_x / weight, sum_y / weight)

    def contains_point(self, point: Point) -> bool:
        """
        Point-in-polygon test. Points on the shell or on a hole's edge
        count as inside; points strictly inside a hole do not.
        """
        if self.is_empty() or point.is_empty():
            return False

        xy = point.xy()
        if not point_in_ring(xy, self.exterior_ring().coordinates()):
            return False
        return not any(
            point_in_ring(xy, r.coordinates(), include_boundary=False)
            for r in self.interior_rings()
        )

    def is_valid(self) -> bool:
        """
        True if every ring is closed, simple and has at least four points,
        every hole stays inside the shell without crossing it, and no two
        holes overlap. Rings may touch at isolated points.
        """
        if self._backend is not None:
            return bool(self._backend.is_valid)
        if self.is_empty():
            return True

        for index, ring in enumerate(self._components):
            if ring.num_points() < 4:
                logger.debug("Polygon ring %d has fewer than 4 points", index)
                return False
            if not ring.is_closed():
                logger.debug("Polygon ring %d is not closed", index)
                return False
            if not ring.is_simple():
                logger.debug("Polygon ring %d self-intersects", index)
                return False

        shell = self.exterior_ring().coordinates()
        holes = [ring.coordinates() for ring in self.interior_rings()]
        for index, hole in enumerate(holes, start=1):
            if not _hole_within_shell(hole, shell):
                logger.debug("Polygon hole %d leaves the shell", index)
                return False
        for (i, a), (j, b) in combinations(enumerate(holes, start=1), 2):
            if _holes_overlap(a, b):
                logger.debug("Polygon holes %d and %d overlap", i, j)
                return False
        return True

    def boundary(self):
        """The shell as a LineString, or all rings when there are holes."""
        from .multi import MultiLineString

        if self.is_empty():
            return MultiLineString()
        if not self.interior_rings():
            return self.exterior_ring().copy()
        return MultiLineString([r.copy() for r in self._components])
