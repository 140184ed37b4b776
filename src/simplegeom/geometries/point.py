"""
Point: the 0-dimensional leaf geometry.

A point is either empty or holds a Coordinate with mandatory x/y and
optional z (altitude) and m (measure) channels. All distance and
projection math bottoms out here.
"""

import logging
import math
import numbers
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence

from ..core.exceptions import InvalidGeometryException
from ..core.geometry import (
    EPS,
    POINTWISE_COLLECTIONS,
    BBox,
    Geometry,
    GeometryKind,
    running_minimum,
)
from ..core.segments import point_segment_distance

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Coordinate:
    """Coordinate payload of a non-empty point."""
    x: float
    y: float
    z: Optional[float] = None
    m: Optional[float] = None


def _as_float(value, name: str) -> float:
    """Convert a number (or numeric string) to float."""
    if not isinstance(value, bool) and isinstance(value, (numbers.Number, str)):
        try:
            return float(value)
        except (TypeError, ValueError):
            pass
    raise InvalidGeometryException(
        f"Cannot construct Point. {name} should be numeric, got {value!r}"
    )


def _is_nan(value) -> bool:
    return isinstance(value, float) and math.isnan(value)


class Point(Geometry):
    """
    A single location in coordinate space.

    Parameters
    ----------
    x, y : float, optional
        Planar coordinates. Both must be given for a non-empty point;
        if either is missing the point is empty.
    z : float, optional
        Altitude. Sets ``has_z`` even on an empty point, but is only
        stored when x/y are present.
    m : float, optional
        Measure. Same storage rule as ``z``; sets ``is_measured``.

    Raises
    ------
    InvalidGeometryException
        If a given coordinate is not numeric.
    """

    kind = GeometryKind.POINT

    def __init__(self, x=None, y=None, z=None, m=None):
        super().__init__()
        self._coord: Optional[Coordinate] = None
        self._has_z = False
        self._is_measured = False

        present = x is not None and y is not None
        if present:
            fx = _as_float(x, 'x')
            fy = _as_float(y, 'y')

        fz = None
        if z is not None:
            fz = _as_float(z, 'z')
            self._has_z = True

        fm = None
        if m is not None:
            fm = _as_float(m, 'm')
            self._is_measured = True

        if present:
            self._coord = Coordinate(fx, fy, fz, fm)

    @classmethod
    def from_array(cls, coordinates: Sequence) -> "Point":
        """
        Build a point from ``[x, y, z?, m?]``.

        An empty sequence, or NaN for both x and y as written by
        ``as_array``, gives the empty point; ``[x, y, None, m]`` gives a
        measured 2D point.
        """
        coordinates = list(coordinates)
        if len(coordinates) > 4:
            raise InvalidGeometryException(
                f"Cannot construct Point from {len(coordinates)} values"
            )
        if len(coordinates) >= 2 and all(_is_nan(v) for v in coordinates[:2]):
            return cls(None, None, *coordinates[2:])
        return cls(*coordinates)

    # Accessors

    @property
    def x(self) -> Optional[float]:
        return None if self._coord is None else self._coord.x

    @property
    def y(self) -> Optional[float]:
        return None if self._coord is None else self._coord.y

    @property
    def z(self) -> Optional[float]:
        return None if self._coord is None else self._coord.z

    @property
    def m(self) -> Optional[float]:
        return None if self._coord is None else self._coord.m

    @property
    def has_z(self) -> bool:
        return self._has_z

    @property
    def is_measured(self) -> bool:
        return self._is_measured

    def xy(self):
        return (self.x, self.y)

    # Structure

    def dimension(self) -> int:
        return 0

    def is_empty(self) -> bool:
        return self._coord is None

    def components(self) -> List["Point"]:
        return [self]

    def points(self) -> List["Point"]:
        return [self]

    def num_points(self) -> int:
        return 1

    def num_geometries(self) -> int:
        return 0 if self.is_empty() else 1

    def geometry_n(self, n: int) -> Optional["Point"]:
        return self if n == 1 else None

    def as_array(self) -> list:
        if self.is_empty():
            return [math.nan, math.nan]
        if not self._has_z:
            if not self._is_measured:
                return [self.x, self.y]
            return [self.x, self.y, None, self.m]
        if not self._is_measured:
            return [self.x, self.y, self.z]
        return [self.x, self.y, self.z, self.m]

    def copy(self) -> "Point":
        clone = Point()
        clone._coord = self._coord
        clone._has_z = self._has_z
        clone._is_measured = self._is_measured
        return clone

    def explode(self, to_array: bool = False) -> list:
        return []

    def boundary(self) -> Geometry:
        """The boundary of a point is the empty set."""
        from .geometry_collection import GeometryCollection

        return GeometryCollection()

    # Measurement

    def bbox(self) -> Optional[BBox]:
        if self.is_empty():
            return None
        return BBox(minx=self.x, miny=self.y, maxx=self.x, maxy=self.y)

    def centroid(self) -> "Point":
        """A point's centroid is itself."""
        return self

    def distance(self, other: Geometry) -> Optional[float]:
        """
        Minimum 2D distance from this point to another geometry.

        Parameters
        ----------
        other : Geometry
            Any geometry.

        Returns
        -------
        float or None
            The distance, or None if either geometry is empty or no
            component of ``other`` yields a distance.

        Notes
        -----
        Curves and surfaces are measured against their boundary segments
        (``explode``), so a point inside a polygon reports the distance to
        the nearest ring rather than zero. Delegates to the backend when
        both geometries carry a cached handle.
        """
        if self.is_empty() or other.is_empty():
            return None

        other_backend = other.get_backend()
        if self._backend is not None and other_backend is not None:
            logger.debug("Delegating Point distance to backend")
            return float(self._backend.distance(other_backend))

        if isinstance(other, Point):
            return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)

        if other.geometry_type() in POINTWISE_COLLECTIONS:
            return running_minimum(self.distance(c) for c in other.components())

        return running_minimum(self._segment_distances(other))

    def _segment_distances(self, other: Geometry):
        for start, end in other.explode(to_array=True):
            px = end.x - start.x
            py = end.y - start.y
            if px * px + py * py == 0:
                # Zero-length segment is just a point
                yield self.distance(end)
            else:
                yield point_segment_distance(self.xy(), start.xy(), end.xy())

    def area(self) -> float:
        return 0.0

    def length(self) -> float:
        return 0.0

    def length_3d(self) -> float:
        return 0.0

    def great_circle_length(self, radius: Optional[float] = None) -> float:
        return 0.0

    def haversine_length(self, radius: Optional[float] = None) -> float:
        return 0.0

    def minimum_z(self) -> Optional[float]:
        return self.z

    def maximum_z(self) -> Optional[float]:
        return self.z

    def minimum_m(self) -> Optional[float]:
        return self.m

    def maximum_m(self) -> Optional[float]:
        return self.m

    # Predicates

    def equals(self, other: Geometry) -> bool:
        """
        Approximate equality within EPS on x, y and z.

        Two empty points are equal. An empty and a non-empty point are not,
        and neither are points that differ in whether they carry z.
        """
        if not isinstance(other, Point):
            return False
        if self.is_empty() or other.is_empty():
            return self.is_empty() and other.is_empty()
        if self.has_z != other.has_z:
            return False

        dz = 0.0 if not self.has_z else self.z - other.z
        return (
            abs(self.x - other.x) <= EPS
            and abs(self.y - other.y) <= EPS
            and abs(dz) <= EPS
        )

    def is_simple(self) -> bool:
        return True

    def is_valid(self) -> bool:
        return True

    def is_closed(self) -> bool:
        return True

    # In-place edits

    def translate(self, dx: float = 0, dy: float = 0, dz: float = 0) -> "Point":
        """
        Shift the point in place.

        An empty point stays empty and an absent z stays absent.
        """
        if self._coord is not None:
            z = self._coord.z
            self._coord = replace(
                self._coord,
                x=self._coord.x + dx,
                y=self._coord.y + dy,
                z=None if z is None else z + dz,
            )
        self._on_mutation()
        return self

    def invert_xy(self) -> "Point":
        """Swap x and y in place (lon/lat <-> lat/lon)."""
        if self._coord is not None:
            self._coord = replace(self._coord, x=self._coord.y, y=self._coord.x)
        self._on_mutation()
        return self

    def flatten(self) -> "Point":
        if self._coord is not None:
            self._coord = replace(self._coord, z=None, m=None)
        self._has_z = False
        self._is_measured = False
        self._on_mutation()
        return self
