"""
LineString: an ordered sequence of points joined by straight segments.
"""

import logging
from typing import List, Optional

import numpy as np

from ..core import spherical
from ..core.exceptions import InvalidGeometryException
from ..core.geometry import EARTH_RADIUS, GeometryKind
from ..core.segments import folds_back, segments_intersect
from .collection import Collection
from .point import Point

logger = logging.getLogger(__name__)


class LineString(Collection):
    """
    A curve made of two or more vertices.

    Parameters
    ----------
    points : iterable of Point, optional
        Vertices in order. None or an empty list gives the empty line string.

    Raises
    ------
    InvalidGeometryException
        For non-Point or empty vertices, or a single vertex.
    """

    kind = GeometryKind.LINE_STRING
    component_types = (Point,)
    allow_empty_components = False

    def __init__(self, points=None):
        super().__init__(points)
        if len(self._components) == 1:
            raise InvalidGeometryException("Cannot construct a LineString with a single point")

    @classmethod
    def _leaf_factory(cls, item) -> Point:
        return Point.from_array(item)

    def dimension(self) -> int:
        return 1

    def start_point(self) -> Optional[Point]:
        return self.geometry_n(1)

    def end_point(self) -> Optional[Point]:
        return self.geometry_n(len(self._components))

    def point_n(self, n: int) -> Optional[Point]:
        return self.geometry_n(n)

    def coordinates(self, with_z: bool = False) -> np.ndarray:
        """
        Vertex coordinates as an array of shape (N, 2), or (N, 3) with
        ``with_z`` where a missing z counts as 0.
        """
        if with_z:
            rows = [[p.x, p.y, p.z or 0.0] for p in self._components]
            return np.array(rows, dtype=np.float64).reshape(-1, 3)
        rows = [[p.x, p.y] for p in self._components]
        return np.array(rows, dtype=np.float64).reshape(-1, 2)

    def _segment_lengths(self, with_z: bool = False) -> np.ndarray:
        coords = self.coordinates(with_z)
        if len(coords) < 2:
            return np.zeros(0)
        return np.linalg.norm(np.diff(coords, axis=0), axis=1)

    def length(self) -> float:
        return float(np.sum(self._segment_lengths()))

    def length_3d(self) -> float:
        return float(np.sum(self._segment_lengths(with_z=True)))

    def great_circle_length(self, radius: Optional[float] = None) -> float:
        """Length along great circles, treating x/y as lon/lat degrees."""
        coords = self.coordinates()
        return spherical.great_circle_length(
            coords[:, 0], coords[:, 1], EARTH_RADIUS if radius is None else radius
        )

    def haversine_length(self, radius: Optional[float] = None) -> float:
        """Length by the haversine formula, treating x/y as lon/lat degrees."""
        coords = self.coordinates()
        return spherical.haversine_length(
            coords[:, 0], coords[:, 1], EARTH_RADIUS if radius is None else radius
        )

    def centroid(self) -> Optional[Point]:
        """
        Length-weighted average of the segment midpoints.

        A line string of zero length returns a copy of its first vertex.
        """
        if self.is_empty():
            return None

        coords = self.coordinates()
        lengths = self._segment_lengths()
        total = float(np.sum(lengths))
        if total == 0:
            return Point(coords[0, 0], coords[0, 1])

        midpoints = (coords[:-1] + coords[1:]) / 2.0
        cx, cy = (midpoints * lengths[:, None]).sum(axis=0) / total
        return Point(float(cx), float(cy))

    def explode(self, to_array: bool = False) -> list:
        """
        Segments between consecutive vertices.

        Returns (Point, Point) pairs referencing this line's own vertices
        when ``to_array`` is True, otherwise new two-point LineStrings.
        """
        pairs = list(zip(self._components[:-1], self._components[1:]))
        if to_array:
            return pairs
        return [LineString([a.copy(), b.copy()]) for a, b in pairs]

    def is_closed(self) -> bool:
        if self.is_empty():
            return False
        return self.start_point().equals(self.end_point())

    def is_ring(self) -> bool:
        return self.is_closed() and self.is_simple()

    def is_simple(self) -> bool:
        """
        True if the line does not pass through the same point twice.

        Consecutive segments may only share their joint, and in a closed
        line the last segment may meet the first at the closing vertex.
        Zero-length segments are ignored.
        """
        if self._backend is not None:
            return bool(self._backend.is_simple)

        segments = [
            (a.xy(), b.xy())
            for a, b in self.explode(to_array=True)
            if a.xy() != b.xy()
        ]
        n = len(segments)
        closed = self.is_closed()

        for i in range(n):
            for j in range(i + 1, n):
                (a1, a2), (b1, b2) = segments[i], segments[j]
                if j == i + 1:
                    if folds_back(a1, a2, b2):
                        return False
                elif closed and i == 0 and j == n - 1:
                    # Joined at the closing vertex
                    if folds_back(b1, b2, a2):
                        return False
                elif segments_intersect(a1, a2, b1, b2):
                    return False

        return True

    def is_valid(self) -> bool:
        """Valid when empty or spanning at least two distinct vertices."""
        if self._backend is not None:
            return bool(self._backend.is_valid)
        if self.is_empty():
            return True
        distinct = {p.xy() for p in self._components}
        if len(distinct) < 2:
            logger.debug("LineString has fewer than two distinct points")
            return False
        return True

    def boundary(self):
        """Start and end point, or nothing for closed and empty lines."""
        from .multi import MultiPoint

        if self.is_empty() or self.is_closed():
            return MultiPoint()
        return MultiPoint([self.start_point().copy(), self.end_point().copy()])

    def points(self) -> List[Point]:
        return list(self._components)
