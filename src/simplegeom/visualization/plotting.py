"""
Visualization utilities for geometry plotting.

Contains plotting functions for:
- Points, line strings and polygons (holes left unfilled)
- Nested collections of any of the above
"""

from typing import Optional

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import PathPatch
from matplotlib.path import Path

from ..core.geometry import Geometry, GeometryKind
from ..core.segments import ensure_ccw
from ..core.summary import geometry_stats


def plot_geometry(
    geom: Geometry,
    ax: Optional[plt.Axes] = None,
    title: str = "Geometry",
    show_stats: bool = True,
    show_centroid: bool = True
) -> plt.Axes:
    """
    Visualize a geometry in 2D.

    Parameters
    ----------
    geom : Geometry
        Geometry to draw. Collections are drawn member by member.
    ax : plt.Axes, optional
        Matplotlib axes to plot on. Creates new figure if None.
    title : str
        Plot title.
    show_stats : bool
        Whether to show geometry statistics.
    show_centroid : bool
        Whether to mark the centroid.

    Returns
    -------
    plt.Axes
        The matplotlib axes object.
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(8, 8))

    _draw(geom, ax)

    stats = geometry_stats(geom)
    if show_centroid and stats['centroid'] is not None:
        cx, cy = stats['centroid']
        ax.scatter([cx], [cy], c='red', s=150, marker='*', zorder=5, label='Centroid')
        ax.legend(loc='upper right')

    if show_stats:
        stats_text = (
            f"Type: {stats['type']}\n"
            f"Valid: {stats['is_valid']}\n"
            f"Points: {stats['num_points']}\n"
            f"Length: {stats['length']:.2f}\n"
            f"Area: {stats['area']:.2f}"
        )
        ax.text(
            0.02, 0.98, stats_text,
            transform=ax.transAxes,
            verticalalignment='top',
            fontfamily='monospace',
            fontsize=9,
            bbox=dict(boxstyle='round', facecolor='white', alpha=0.8)
        )

    ax.set_xlabel('X')
    ax.set_ylabel('Y')
    ax.set_title(title)
    ax.set_aspect('equal', adjustable='datalim')
    ax.grid(True, alpha=0.3)

    return ax


def _draw(geom: Geometry, ax: plt.Axes) -> None:
    if geom.is_empty():
        return

    kind = geom.geometry_type()

    if kind is GeometryKind.POINT:
        ax.scatter([geom.x], [geom.y], c='steelblue', s=30, zorder=4)
    elif kind is GeometryKind.LINE_STRING:
        coords = geom.coordinates()
        ax.plot(coords[:, 0], coords[:, 1], 'k-', linewidth=2, zorder=3)
        ax.scatter(coords[:, 0], coords[:, 1], c='black', s=15, zorder=3)
    elif kind is GeometryKind.POLYGON:
        _draw_polygon(geom, ax)
    else:
        for component in geom.components():
            _draw(component, ax)


def _draw_polygon(polygon: Geometry, ax: plt.Axes) -> None:
    """
    Fill a polygon as a single compound path. Holes are wound clockwise
    against the counter-clockwise shell so they stay unfilled.
    """
    vertices = []
    codes = []
    for index, ring in enumerate(polygon.components()):
        coords = ensure_ccw(ring.coordinates())
        if index > 0:
            coords = coords[::-1]
        vertices.append(coords)
        codes.extend([Path.MOVETO] + [Path.LINETO] * (len(coords) - 1))

    path = Path(np.vstack(vertices), codes)
    ax.add_patch(PathPatch(path, facecolor='green', alpha=0.15, edgecolor='none', zorder=1))

    for ring in polygon.components():
        coords = ring.coordinates()
        ax.plot(coords[:, 0], coords[:, 1], 'k-', linewidth=2, zorder=3)

    ax.autoscale_view()
