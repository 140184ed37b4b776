"""
Homogeneous collections: MultiPoint, MultiLineString, MultiPolygon.
"""

from typing import List, Tuple

from ..core.geometry import GeometryKind
from .collection import Collection
from .geometry_collection import GeometryCollection
from .linestring import LineString
from .point import Point
from .polygon import Polygon


class MultiPoint(Collection):
    """A collection of points. Empty points are allowed as members."""

    kind = GeometryKind.MULTI_POINT
    component_types = (Point,)

    @classmethod
    def _leaf_factory(cls, item) -> Point:
        return Point.from_array(item)

    def dimension(self) -> int:
        return 0

    def is_simple(self) -> bool:
        """True if no two non-empty members are equal."""
        if self._backend is not None:
            return bool(self._backend.is_simple)

        filled = [p for p in self._components if not p.is_empty()]
        for i, a in enumerate(filled):
            for b in filled[i + 1:]:
                if a.equals(b):
                    return False
        return True

    def boundary(self):
        return GeometryCollection()


class MultiLineString(Collection):
    """A collection of line strings."""

    kind = GeometryKind.MULTI_LINE_STRING
    component_types = (LineString,)

    @classmethod
    def _leaf_factory(cls, item) -> LineString:
        return LineString.from_array(item)

    def dimension(self) -> int:
        return 1

    def boundary(self) -> MultiPoint:
        """
        Endpoints shared by an odd number of member lines (mod-2 rule).
        Closed members contribute nothing.
        """
        counts: List[Tuple[Point, int]] = []
        for line in self._components:
            if line.is_empty():
                continue
            for endpoint in (line.start_point(), line.end_point()):
                for index, (seen, n) in enumerate(counts):
                    if seen.equals(endpoint):
                        counts[index] = (seen, n + 1)
                        break
                else:
                    counts.append((endpoint, 1))

        return MultiPoint([p.copy() for p, n in counts if n % 2 == 1])


class MultiPolygon(Collection):
    """A collection of polygons."""

    kind = GeometryKind.MULTI_POLYGON
    component_types = (Polygon,)

    @classmethod
    def _leaf_factory(cls, item) -> Polygon:
        return Polygon.from_array(item)

    def dimension(self) -> int:
        return 2

    def boundary(self):
        return MultiLineString([r.copy() for p in self._components for r in p.components()])
