"""
Diagnostic summaries of geometries.
"""

import numpy as np

from .geometry import Geometry


def geometry_stats(geom: Geometry) -> dict:
    """
    Compute diagnostic statistics for a geometry.

    Parameters
    ----------
    geom : Geometry
        Any geometry.

    Returns
    -------
    dict
        Statistics including:
        - type: OGC geometry type name
        - dimension: Topological dimension
        - num_points: Number of leaf points
        - num_geometries: Number of direct children
        - area: Planar area
        - length: Planar length (perimeter for surfaces)
        - centroid: (x, y) array, or None when undefined
        - bbox: (minx, miny, maxx, maxy), or None when empty
        - is_empty: Whether the geometry is empty
        - is_valid: Result of the validity check
    """
    centroid = geom.centroid()
    if centroid is None or centroid.is_empty():
        centroid_xy = None
    else:
        centroid_xy = np.array([centroid.x, centroid.y])

    bbox = geom.bbox()

    return {
        'type': geom.geometry_type().value,
        'dimension': geom.dimension(),
        'num_points': geom.num_points(),
        'num_geometries': geom.num_geometries(),
        'area': float(geom.area()),
        'length': float(geom.length()),
        'centroid': centroid_xy,
        'bbox': None if bbox is None else bbox.as_tuple(),
        'is_empty': geom.is_empty(),
        'is_valid': geom.is_valid(),
    }
