"""
Tests for geometry_stats() and plot_geometry().
"""

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest

from simplegeom import (
    GeometryCollection,
    LineString,
    MultiPoint,
    Point,
    Polygon,
    geometry_stats,
    plot_geometry,
)


SQUARE = [(0, 0), (4, 0), (4, 4), (0, 4), (0, 0)]
HOLE = [(1, 1), (1, 2), (2, 2), (2, 1), (1, 1)]


class TestGeometryStats:
    """Tests for geometry_stats()."""

    def test_polygon(self):
        stats = geometry_stats(Polygon.from_array([SQUARE]))
        assert stats['type'] == "Polygon"
        assert stats['dimension'] == 2
        assert stats['area'] == pytest.approx(16.0)
        assert stats['length'] == pytest.approx(16.0)
        np.testing.assert_array_almost_equal(stats['centroid'], [2.0, 2.0])
        assert stats['bbox'] == (0.0, 0.0, 4.0, 4.0)
        assert stats['is_valid']
        assert not stats['is_empty']

    def test_empty(self):
        stats = geometry_stats(GeometryCollection())
        assert stats['centroid'] is None
        assert stats['bbox'] is None
        assert stats['is_empty']
        assert stats['num_geometries'] == 0

    def test_empty_point(self):
        stats = geometry_stats(Point())
        assert stats['centroid'] is None
        assert stats['num_points'] == 1


class TestPlotGeometry:
    """Smoke tests for plot_geometry()."""

    def teardown_method(self):
        plt.close('all')

    def test_returns_axes(self):
        ax = plot_geometry(Polygon.from_array([SQUARE, HOLE]))
        assert isinstance(ax, plt.Axes)
        assert ax.get_title() == "Geometry"

    def test_existing_axes(self):
        fig, ax = plt.subplots()
        result = plot_geometry(LineString.from_array([(0, 0), (1, 1)]), ax=ax, title="Line")
        assert result is ax
        assert ax.get_title() == "Line"

    def test_collection(self):
        gc = GeometryCollection([
            Point(5, 5),
            MultiPoint.from_array([(1, 1), (2, 2)]),
            LineString.from_array([(0, 0), (3, 0)]),
            Polygon.from_array([SQUARE]),
        ])
        ax = plot_geometry(gc, show_stats=False)
        assert len(ax.patches) == 1

    def test_empty(self):
        ax = plot_geometry(GeometryCollection(), show_centroid=True)
        assert len(ax.patches) == 0
