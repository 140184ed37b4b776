"""
simplegeom - A Simple Features geometry kernel.

This package provides the OGC Simple Features geometry kinds and the
operations needed to inspect, compare and measure them:
- Points, line strings, polygons and their multi-/collection variants
- Bounding box, centroid, distance, length, area and dimension
- Validity and simplicity checks
- In-place translate, x/y inversion and flattening
- Optional delegation to shapely as a native backend

Main Classes
------------
Point, LineString, Polygon : Leaf and simple composite geometries
MultiPoint, MultiLineString, MultiPolygon : Homogeneous collections
GeometryCollection : Heterogeneous collection

Example
-------
>>> from simplegeom import Point, LineString

>>> Point(1, 2).distance(Point(4, 6))
5.0
>>> Point(0, 0).distance(LineString.from_array([[2, 0], [2, 2]]))
2.0
"""

import logging

from .core.exceptions import InvalidGeometryException
from .core.geometry import EPS, EARTH_RADIUS, BBox, Geometry, GeometryKind
from .core.summary import geometry_stats
from .geometries import (
    Coordinate,
    Point,
    Collection,
    LineString,
    Polygon,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
    GeometryCollection,
)
from .backend import to_shapely, from_shapely, attach_backend, ensure_backend, detach_backend
from .visualization.plotting import plot_geometry

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Core
    'EPS',
    'EARTH_RADIUS',
    'BBox',
    'Geometry',
    'GeometryKind',
    'InvalidGeometryException',
    'geometry_stats',
    # Geometries
    'Coordinate',
    'Point',
    'Collection',
    'LineString',
    'Polygon',
    'MultiPoint',
    'MultiLineString',
    'MultiPolygon',
    'GeometryCollection',
    # Backend
    'to_shapely',
    'from_shapely',
    'attach_backend',
    'ensure_backend',
    'detach_backend',
    # Visualization
    'plot_geometry',
]
