"""
Arc lengths of vertex sequences on a sphere.

Vertices are given as longitude/latitude in degrees. Both functions return
the summed length of consecutive arcs in the units of ``radius``.
"""

import numpy as np


def great_circle_length(lon: np.ndarray, lat: np.ndarray, radius: float) -> float:
    """
    Summed great-circle length using the Vincenty special case of the
    great-circle formula, which stays accurate for antipodal and very
    short arcs.

    Parameters
    ----------
    lon, lat : np.ndarray
        Vertex coordinates in degrees, shape (N,).
    radius : float
        Sphere radius.
    """
    if len(lon) < 2:
        return 0.0

    lon = np.radians(np.asarray(lon, dtype=np.float64))
    lat = np.radians(np.asarray(lat, dtype=np.float64))
    lat1, lat2 = lat[:-1], lat[1:]
    dlon = np.diff(lon)

    numerator = np.sqrt(
        (np.cos(lat2) * np.sin(dlon)) ** 2
        + (np.cos(lat1) * np.sin(lat2) - np.sin(lat1) * np.cos(lat2) * np.cos(dlon)) ** 2
    )
    denominator = np.sin(lat1) * np.sin(lat2) + np.cos(lat1) * np.cos(lat2) * np.cos(dlon)
    return float(radius * np.sum(np.arctan2(numerator, denominator)))


def haversine_length(lon: np.ndarray, lat: np.ndarray, radius: float) -> float:
    """
    Summed arc length using the haversine formula.

    Parameters
    ----------
    lon, lat : np.ndarray
        Vertex coordinates in degrees, shape (N,).
    radius : float
        Sphere radius.
    """
    if len(lon) < 2:
        return 0.0

    lon = np.radians(np.asarray(lon, dtype=np.float64))
    lat = np.radians(np.asarray(lat, dtype=np.float64))
    dlat = np.diff(lat)
    dlon = np.diff(lon)

    h = np.sin(dlat / 2) ** 2 + np.cos(lat[:-1]) * np.cos(lat[1:]) * np.sin(dlon / 2) ** 2
    h = np.clip(h, 0.0, 1.0)
    return float(radius * np.sum(2 * np.arcsin(np.sqrt(h))))
