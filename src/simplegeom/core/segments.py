"""
Planar segment and ring primitives.

Contains utility functions for:
- Point-to-segment and segment-to-segment distance
- Segment intersection tests
- Signed ring area and centroid (shoelace formula)
- Ring orientation (CCW)
- Point-in-ring testing

Coordinates are plain (x, y) tuples or numpy arrays of shape (N, 2) so the
functions stay independent of the geometry classes.
"""

import math
from typing import Optional, Tuple

import numpy as np

from .geometry import EPS


XY = Tuple[float, float]


def point_segment_distance(p: XY, a: XY, b: XY) -> float:
    """
    Distance from point ``p`` to the closed segment ``a``-``b``.

    The projection parameter is clamped to [0, 1] so the closest point lies
    on the segment rather than its infinite extension. A zero-length segment
    degrades to the distance between ``p`` and ``b``.
    """
    px, py = b[0] - a[0], b[1] - a[1]
    d = px * px + py * py
    if d == 0:
        return math.hypot(p[0] - b[0], p[1] - b[1])

    u = ((p[0] - a[0]) * px + (p[1] - a[1]) * py) / d
    u = min(max(u, 0.0), 1.0)
    x = a[0] + u * px
    y = a[1] + u * py
    return math.hypot(x - p[0], y - p[1])


def orientation(a: XY, b: XY, c: XY) -> int:
    """
    Orientation of the triple (a, b, c).

    Returns
    -------
    int
        1 for counter-clockwise, -1 for clockwise, 0 for collinear.
    """
    cross = (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])
    if abs(cross) <= EPS:
        return 0
    return 1 if cross > 0 else -1


def on_segment(p: XY, a: XY, b: XY) -> bool:
    """True if ``p`` lies on segment ``a``-``b`` (within EPS)."""
    return point_segment_distance(p, a, b) <= EPS


def segments_cross(a1: XY, a2: XY, b1: XY, b2: XY) -> bool:
    """
    True if a1-a2 and b1-b2 cross at a single point interior to both.

    Touching at an endpoint and collinear overlap do not count.
    """
    o1 = orientation(a1, a2, b1)
    o2 = orientation(a1, a2, b2)
    o3 = orientation(b1, b2, a1)
    o4 = orientation(b1, b2, a2)
    return o1 != o2 and o3 != o4 and 0 not in (o1, o2, o3, o4)


def segments_intersect(a1: XY, a2: XY, b1: XY, b2: XY) -> bool:
    """True if the closed segments a1-a2 and b1-b2 share at least one point."""
    if segments_cross(a1, a2, b1, b2):
        return True

    # Touching and collinear configurations
    return (
        on_segment(b1, a1, a2)
        or on_segment(b2, a1, a2)
        or on_segment(a1, b1, b2)
        or on_segment(a2, b1, b2)
    )


def segment_distance(a1: XY, a2: XY, b1: XY, b2: XY) -> float:
    """Minimum distance between two closed segments."""
    if segments_intersect(a1, a2, b1, b2):
        return 0.0
    return min(
        point_segment_distance(a1, b1, b2),
        point_segment_distance(a2, b1, b2),
        point_segment_distance(b1, a1, a2),
        point_segment_distance(b2, a1, a2),
    )


def folds_back(a: XY, joint: XY, b: XY) -> bool:
    """
    True if segments a-joint and joint-b overlap beyond their shared vertex.

    That happens when the three points are collinear and both ``a`` and ``b``
    lie on the same side of ``joint``.
    """
    if orientation(a, joint, b) != 0:
        return False
    dot = (a[0] - joint[0]) * (b[0] - joint[0]) + (a[1] - joint[1]) * (b[1] - joint[1])
    return dot > 0


def signed_ring_area(ring: np.ndarray) -> float:
    """
    Signed area of a ring using the shoelace formula.

    Positive for counter-clockwise rings. The closing vertex may or may not be
    repeated; both give the same result.

    Parameters
    ----------
    ring : np.ndarray
        Ring vertices of shape (M, 2).
    """
    if len(ring) < 3:
        return 0.0

    x = ring[:, 0]
    y = ring[:, 1]
    return 0.5 * float(np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def ring_centroid(ring: np.ndarray) -> Optional[Tuple[float, float, float]]:
    """
    Centroid of the area enclosed by a ring.

    Returns
    -------
    tuple or None
        (cx, cy, signed_area), or None for rings enclosing no area.
    """
    if len(ring) < 3:
        return None

    x = ring[:, 0]
    y = ring[:, 1]
    x_next = np.roll(x, -1)
    y_next = np.roll(y, -1)
    cross = x * y_next - x_next * y
    area = 0.5 * float(np.sum(cross))
    if area == 0:
        return None

    cx = float(np.sum((x + x_next) * cross)) / (6.0 * area)
    cy = float(np.sum((y + y_next) * cross)) / (6.0 * area)
    return cx, cy, area


def ensure_ccw(ring: np.ndarray) -> np.ndarray:
    """
    Ensure ring vertices are in counter-clockwise order.

    Parameters
    ----------
    ring : np.ndarray
        Ring vertices of shape (M, 2).

    Returns
    -------
    np.ndarray
        Ring vertices in CCW order.
    """
    if signed_ring_area(ring) < 0:
        return ring[::-1].copy()
    return ring


def on_ring_boundary(p: XY, ring: np.ndarray) -> bool:
    """True if ``p`` lies on any edge of the ring."""
    for start, end in zip(ring, np.roll(ring, -1, axis=0)):
        if on_segment(p, (start[0], start[1]), (end[0], end[1])):
            return True
    return False


def point_in_ring(p: XY, ring: np.ndarray, include_boundary: bool = True) -> bool:
    """
    Ray-casting point-in-ring test.

    Parameters
    ----------
    p : tuple
        (x, y) point to test.
    ring : np.ndarray
        Ring vertices of shape (M, 2); closing vertex optional.
    include_boundary : bool
        Whether a point on an edge counts as inside.
    """
    if len(ring) < 3:
        return False

    if on_ring_boundary(p, ring):
        return include_boundary

    px, py = p
    inside = False
    for (x1, y1), (x2, y2) in zip(ring, np.roll(ring, -1, axis=0)):
        if (y1 > py) != (y2 > py):
            x_cross = x1 + (py - y1) * (x2 - x1) / (y2 - y1)
            if px < x_cross:
                inside = not inside
    return inside
