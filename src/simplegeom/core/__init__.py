"""
Core geometry contract and planar primitives.
"""

from .exceptions import InvalidGeometryException
from .geometry import (
    EPS,
    EARTH_RADIUS,
    BBox,
    Geometry,
    GeometryKind,
    running_minimum,
)
from .segments import (
    point_segment_distance,
    segment_distance,
    segments_cross,
    segments_intersect,
    signed_ring_area,
    ring_centroid,
    ensure_ccw,
    point_in_ring,
)
from .summary import geometry_stats

__all__ = [
    'EPS',
    'EARTH_RADIUS',
    'BBox',
    'Geometry',
    'GeometryKind',
    'InvalidGeometryException',
    'running_minimum',
    'point_segment_distance',
    'segment_distance',
    'segments_cross',
    'segments_intersect',
    'signed_ring_area',
    'ring_centroid',
    'ensure_ccw',
    'point_in_ring',
    'geometry_stats',
]
