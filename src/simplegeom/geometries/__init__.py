"""
Concrete geometry kinds.
"""

from .point import Coordinate, Point
from .collection import Collection
from .linestring import LineString
from .polygon import Polygon
from .geometry_collection import GeometryCollection
from .multi import MultiPoint, MultiLineString, MultiPolygon

__all__ = [
    'Coordinate',
    'Point',
    'Collection',
    'LineString',
    'Polygon',
    'MultiPoint',
    'MultiLineString',
    'MultiPolygon',
    'GeometryCollection',
]
