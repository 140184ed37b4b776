"""
Geometry capability contract shared by every Simple Features kind.

Contains:
- Module constants (coordinate tolerance, default sphere radius)
- The closed set of geometry kinds
- Axis-aligned bounding boxes
- The abstract Geometry base with its native-backend handle
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, List, Optional, Tuple


# Absolute tolerance for coordinate equality
EPS = 1e-9

# Default sphere radius in metres (WGS84 semi-major axis)
EARTH_RADIUS = 6378137.0

logger = logging.getLogger(__name__)


class GeometryKind(Enum):
    """Tag identifying the concrete geometry kind. The value is the OGC name."""

    POINT = "Point"
    LINE_STRING = "LineString"
    POLYGON = "Polygon"
    MULTI_POINT = "MultiPoint"
    MULTI_LINE_STRING = "MultiLineString"
    MULTI_POLYGON = "MultiPolygon"
    GEOMETRY_COLLECTION = "GeometryCollection"


# Kinds whose distance is the minimum over their components rather than segments
POINTWISE_COLLECTIONS = (GeometryKind.MULTI_POINT, GeometryKind.GEOMETRY_COLLECTION)


@dataclass(frozen=True)
class BBox:
    """
    Axis-aligned bounding box.

    Attributes
    ----------
    minx, miny, maxx, maxy : float
        Box extents.
    """
    minx: float
    miny: float
    maxx: float
    maxy: float

    def merge(self, other: Optional["BBox"]) -> "BBox":
        """Return the smallest box enclosing both boxes."""
        if other is None:
            return self
        return BBox(
            minx=min(self.minx, other.minx),
            miny=min(self.miny, other.miny),
            maxx=max(self.maxx, other.maxx),
            maxy=max(self.maxy, other.maxy),
        )

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.minx, self.miny, self.maxx, self.maxy)


def running_minimum(values: Iterable[Optional[float]]) -> Optional[float]:
    """
    Minimum of the defined values, stopping at the first exact zero.

    Parameters
    ----------
    values : iterable of float or None
        Candidate distances. ``None`` entries are skipped. Pass a generator
        to avoid computing candidates after a zero is found.

    Returns
    -------
    float or None
        The smallest value, or None if no value was defined.
    """
    best = None
    for value in values:
        if value is None:
            continue
        if value == 0.0:
            return 0.0
        if best is None or value < best:
            best = value
    return best


class Geometry(ABC):
    """
    Abstract base for every geometry kind.

    Each instance may cache a handle to a native backend representation
    (see ``simplegeom.backend``). Mutators must call ``_on_mutation`` so the
    handle never outlives the coordinates it was built from. A geometry
    owned by a collection keeps a link to it in ``_parent``, and the
    invalidation walks that chain up to the root.
    """

    kind: GeometryKind

    def __init__(self):
        self._backend: Any = None
        self._parent: Optional["Geometry"] = None

    def geometry_type(self) -> GeometryKind:
        return self.kind

    def get_backend(self) -> Any:
        """Return the cached backend handle, or None."""
        return self._backend

    def set_backend(self, handle: Any) -> None:
        """Install a backend handle, or clear it when ``handle`` is None."""
        self._backend = handle

    def _on_mutation(self) -> None:
        node = self
        while node is not None:
            if node._backend is not None:
                logger.debug("Discarding backend handle of mutated %s", node.kind.value)
            node._backend = None
            node = node._parent

    def __repr__(self) -> str:
        return f"{self.kind.value}({self.as_array()!r})"

    # Flags

    @property
    @abstractmethod
    def has_z(self) -> bool:
        """True if the geometry carries a z channel."""

    @property
    @abstractmethod
    def is_measured(self) -> bool:
        """True if the geometry carries a measure channel."""

    # Structure

    @abstractmethod
    def dimension(self) -> int:
        """Topological dimension: 0 points, 1 curves, 2 surfaces."""

    @abstractmethod
    def is_empty(self) -> bool:
        ...

    @abstractmethod
    def components(self) -> List["Geometry"]:
        ...

    @abstractmethod
    def points(self) -> List["Geometry"]:
        """All leaf points in order."""

    @abstractmethod
    def num_points(self) -> int:
        ...

    @abstractmethod
    def num_geometries(self) -> int:
        ...

    @abstractmethod
    def geometry_n(self, n: int) -> Optional["Geometry"]:
        """Return the n-th direct child (1-based), or None when out of range."""

    @abstractmethod
    def as_array(self) -> list:
        ...

    @abstractmethod
    def copy(self) -> "Geometry":
        """Deep copy without any cached backend handle."""

    @abstractmethod
    def explode(self, to_array: bool = False) -> list:
        """Decompose into consecutive vertex-pair segments."""

    @abstractmethod
    def boundary(self) -> "Geometry":
        ...

    # Measurement

    @abstractmethod
    def bbox(self) -> Optional[BBox]:
        ...

    @abstractmethod
    def centroid(self) -> Optional["Geometry"]:
        ...

    @abstractmethod
    def distance(self, other: "Geometry") -> Optional[float]:
        """Minimum 2D distance to another geometry, None if either is empty."""

    @abstractmethod
    def area(self) -> float:
        ...

    @abstractmethod
    def length(self) -> float:
        ...

    @abstractmethod
    def length_3d(self) -> float:
        ...

    @abstractmethod
    def great_circle_length(self, radius: Optional[float] = None) -> float:
        ...

    @abstractmethod
    def haversine_length(self, radius: Optional[float] = None) -> float:
        ...

    @abstractmethod
    def minimum_z(self) -> Optional[float]:
        ...

    @abstractmethod
    def maximum_z(self) -> Optional[float]:
        ...

    @abstractmethod
    def minimum_m(self) -> Optional[float]:
        ...

    @abstractmethod
    def maximum_m(self) -> Optional[float]:
        ...

    # Predicates

    @abstractmethod
    def equals(self, other: "Geometry") -> bool:
        ...

    @abstractmethod
    def is_simple(self) -> bool:
        ...

    @abstractmethod
    def is_valid(self) -> bool:
        ...

    @abstractmethod
    def is_closed(self) -> bool:
        ...

    # In-place edits

    @abstractmethod
    def translate(self, dx: float = 0, dy: float = 0, dz: float = 0) -> "Geometry":
        ...

    @abstractmethod
    def invert_xy(self) -> "Geometry":
        ...

    @abstractmethod
    def flatten(self) -> "Geometry":
        """Drop z and m channels."""
