"""
Visualization utilities.
"""

from .plotting import plot_geometry

__all__ = ['plot_geometry']
