"""
Shapely as the native geometry backend.

A geometry can cache a shapely equivalent as its backend handle. When both
operands of ``distance`` carry a handle, or a collection carries one for
``is_valid``/``is_simple``, the kernel delegates to shapely (GEOS) instead
of its own planar code. Mutating a geometry discards its handle, so it has
to be attached again afterwards.

Measure (m) values have no shapely counterpart and are dropped in the
conversion.
"""

import logging

from shapely import geometry as shapely_geometry
from shapely.geometry.base import BaseGeometry

from ..core.exceptions import InvalidGeometryException
from ..core.geometry import Geometry, GeometryKind
from ..geometries import (
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)

logger = logging.getLogger(__name__)


def _coords(line: LineString) -> list:
    if line.has_z:
        return [(p.x, p.y, p.z) for p in line.points()]
    return [(p.x, p.y) for p in line.points()]


def to_shapely(geom: Geometry) -> BaseGeometry:
    """
    Convert a geometry tree to its shapely equivalent.

    Parameters
    ----------
    geom : Geometry
        Any geometry.

    Returns
    -------
    BaseGeometry
        Shapely geometry of the matching type.
    """
    kind = geom.geometry_type()

    if kind is GeometryKind.POINT:
        if geom.is_empty():
            return shapely_geometry.Point()
        if geom.has_z:
            return shapely_geometry.Point(geom.x, geom.y, geom.z)
        return shapely_geometry.Point(geom.x, geom.y)

    if kind is GeometryKind.LINE_STRING:
        if geom.is_empty():
            return shapely_geometry.LineString()
        return shapely_geometry.LineString(_coords(geom))

    if kind is GeometryKind.POLYGON:
        if geom.is_empty():
            return shapely_geometry.Polygon()
        return shapely_geometry.Polygon(
            _coords(geom.exterior_ring()),
            [_coords(r) for r in geom.interior_rings()],
        )

    members = [to_shapely(c) for c in geom.components() if not c.is_empty()]

    if kind is GeometryKind.MULTI_POINT:
        return shapely_geometry.MultiPoint(members)
    if kind is GeometryKind.MULTI_LINE_STRING:
        return shapely_geometry.MultiLineString(members)
    if kind is GeometryKind.MULTI_POLYGON:
        return shapely_geometry.MultiPolygon(members)
    return shapely_geometry.GeometryCollection(members)


def from_shapely(shape: BaseGeometry) -> Geometry:
    """
    Convert a shapely geometry to a geometry tree.

    Raises
    ------
    InvalidGeometryException
        For shapely types without a Simple Features counterpart.
    """
    geom_type = shape.geom_type

    if geom_type == "Point":
        if shape.is_empty:
            return Point()
        return Point.from_array(shape.coords[0])

    if geom_type in ("LineString", "LinearRing"):
        return LineString.from_array(shape.coords)

    if geom_type == "Polygon":
        if shape.is_empty:
            return Polygon()
        rings = [shape.exterior.coords] + [r.coords for r in shape.interiors]
        return Polygon.from_array(rings)

    collections = {
        "MultiPoint": MultiPoint,
        "MultiLineString": MultiLineString,
        "MultiPolygon": MultiPolygon,
        "GeometryCollection": GeometryCollection,
    }
    if geom_type in collections:
        return collections[geom_type]([from_shapely(g) for g in shape.geoms])

    raise InvalidGeometryException(f"Unsupported shapely geometry type: {geom_type}")


def attach_backend(geom: Geometry) -> BaseGeometry:
    """Build a fresh shapely handle and install it on ``geom``."""
    handle = to_shapely(geom)
    geom.set_backend(handle)
    logger.debug("Attached shapely backend to %s", geom.geometry_type().value)
    return handle


def ensure_backend(geom: Geometry) -> BaseGeometry:
    """Return the cached handle, building and installing it if absent."""
    handle = geom.get_backend()
    if handle is None:
        handle = attach_backend(geom)
    return handle


def detach_backend(geom: Geometry) -> None:
    geom.set_backend(None)
