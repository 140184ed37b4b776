"""
GeometryCollection: a heterogeneous collection of any geometries.
"""

from typing import Sequence

from ..core.exceptions import InvalidGeometryException
from ..core.geometry import Geometry, GeometryKind
from .collection import Collection
from .linestring import LineString
from .point import Point
from .polygon import Polygon


def _nesting_depth(item: Sequence) -> int:
    depth = 0
    while isinstance(item, (list, tuple)) and item:
        item = item[0]
        depth += 1
    return depth


class GeometryCollection(Collection):
    """
    Any mix of geometries, including nested collections.

    Dimension is the highest child dimension; the centroid is taken over
    the children of that dimension only.
    """

    kind = GeometryKind.GEOMETRY_COLLECTION

    @classmethod
    def _leaf_factory(cls, item) -> Geometry:
        """
        Pick the child kind from how deeply ``item`` is nested.

        ``[x, y]`` (or ``[]``) is a Point, ``[[x, y], ...]`` a LineString
        and ``[[[x, y], ...], ...]`` a Polygon.
        """
        depth = _nesting_depth(item)
        if depth <= 1:
            return Point.from_array(item)
        if depth == 2:
            return LineString.from_array(item)
        if depth == 3:
            return Polygon.from_array(item)
        raise InvalidGeometryException(
            f"Cannot construct GeometryCollection member from {depth}-level nested array"
        )

    def boundary(self) -> "GeometryCollection":
        """Not defined for heterogeneous collections; always empty."""
        return GeometryCollection()
