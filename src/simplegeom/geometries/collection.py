"""
Collection: shared base for every composite geometry.

A collection owns an ordered list of child geometries and implements the
aggregate operations by recursing into them.
"""

import logging
from abc import abstractmethod
from typing import Iterable, List, Optional, Tuple

from ..core.exceptions import InvalidGeometryException
from ..core.geometry import (
    POINTWISE_COLLECTIONS,
    BBox,
    Geometry,
    running_minimum,
)
from ..core.segments import segment_distance
from .point import Point

logger = logging.getLogger(__name__)


def _subtree(geometry: Geometry):
    """Yield a geometry and every geometry nested below it."""
    yield geometry
    if isinstance(geometry, Collection):
        for child in geometry._components:
            yield from _subtree(child)


class Collection(Geometry):
    """
    Base class for geometries made of child geometries.

    Subclasses restrict the child kinds through ``component_types`` and
    whether empty children are accepted through ``allow_empty_components``.

    Parameters
    ----------
    components : iterable of Geometry, optional
        Children in order. The collection takes exclusive ownership: a
        child that already belongs to another collection, or that repeats
        an object given earlier, is stored as a copy.

    Raises
    ------
    InvalidGeometryException
        If a child has the wrong kind, or is empty where that is not allowed.
    """

    component_types: Tuple[type, ...] = (Geometry,)
    allow_empty_components = True

    def __init__(self, components: Optional[Iterable[Geometry]] = None):
        super().__init__()
        owned: List[Geometry] = []
        seen = set()

        for component in components or []:
            if not isinstance(component, self.component_types):
                expected = ", ".join(t.__name__ for t in self.component_types)
                raise InvalidGeometryException(
                    f"Cannot construct {self.kind.value}. Components should be "
                    f"{expected}, got {type(component).__name__}"
                )
            if not self.allow_empty_components and component.is_empty():
                raise InvalidGeometryException(
                    f"Cannot construct {self.kind.value} with empty components"
                )

            nodes = {id(node) for node in _subtree(component)}
            if component._parent is not None or not seen.isdisjoint(nodes):
                component = component.copy()
                nodes = {id(node) for node in _subtree(component)}
            seen |= nodes
            component._parent = self
            owned.append(component)

        self._components: List[Geometry] = owned

    @classmethod
    @abstractmethod
    def _leaf_factory(cls, item) -> Geometry:
        """Build one child from its nested coordinate array."""

    @classmethod
    def from_array(cls, items: Iterable) -> "Collection":
        """Build the collection from nested coordinate arrays."""
        return cls([cls._leaf_factory(item) for item in items])

    # Flags

    def _filled_points(self) -> List[Point]:
        return [p for p in self.points() if not p.is_empty()]

    @property
    def has_z(self) -> bool:
        filled = self._filled_points()
        return bool(filled) and all(p.has_z for p in filled)

    @property
    def is_measured(self) -> bool:
        filled = self._filled_points()
        return bool(filled) and all(p.is_measured for p in filled)

    # Structure

    def dimension(self) -> int:
        return max((c.dimension() for c in self._components), default=0)

    def is_empty(self) -> bool:
        return all(c.is_empty() for c in self._components)

    def components(self) -> List[Geometry]:
        return list(self._components)

    def points(self) -> List[Point]:
        return [p for c in self._components for p in c.points()]

    def num_points(self) -> int:
        return sum(c.num_points() for c in self._components)

    def num_geometries(self) -> int:
        return len(self._components)

    def geometry_n(self, n: int) -> Optional[Geometry]:
        if 1 <= n <= len(self._components):
            return self._components[n - 1]
        return None

    def as_array(self) -> list:
        return [c.as_array() for c in self._components]

    def copy(self) -> "Collection":
        return type(self)([c.copy() for c in self._components])

    def explode(self, to_array: bool = False) -> list:
        return [seg for c in self._components for seg in c.explode(to_array)]

    # Measurement

    def bbox(self) -> Optional[BBox]:
        box = None
        for component in self._components:
            child = component.bbox()
            if child is not None:
                box = child.merge(box)
        return box

    def centroid(self) -> Optional[Point]:
        """
        Dimension-weighted centroid of the children.

        Only the non-empty children of the highest dimension contribute:
        surfaces weighted by area, curves by length, points by count.
        Falls back to a plain average when every weight is zero.
        """
        parts = [c for c in self._components if not c.is_empty()]
        if not parts:
            return None

        top = max(c.dimension() for c in parts)
        parts = [c for c in parts if c.dimension() == top]

        if top == 2:
            weights = [c.area() for c in parts]
        elif top == 1:
            weights = [c.length() for c in parts]
        else:
            weights = [float(sum(not p.is_empty() for p in c.points())) for c in parts]

        total = sum(weights)
        if total == 0:
            weights = [1.0] * len(parts)
            total = float(len(parts))

        centroids = [c.centroid() for c in parts]
        x = sum(w * p.x for w, p in zip(weights, centroids)) / total
        y = sum(w * p.y for w, p in zip(weights, centroids)) / total
        return Point(x, y)

    def distance(self, other: Geometry) -> Optional[float]:
        """
        Minimum 2D distance to another geometry.

        Points and point-like collections are handled component-wise;
        everything else is reduced to segment-to-segment distances, with
        zero returned as soon as two segments touch.
        """
        if self.is_empty() or other.is_empty():
            return None

        other_backend = other.get_backend()
        if self._backend is not None and other_backend is not None:
            logger.debug("Delegating %s distance to backend", self.kind.value)
            return float(self._backend.distance(other_backend))

        if isinstance(other, Point):
            return other.distance(self)

        if other.geometry_type() in POINTWISE_COLLECTIONS:
            return running_minimum(self.distance(c) for c in other.components())

        if self.geometry_type() in POINTWISE_COLLECTIONS:
            return running_minimum(c.distance(other) for c in self._components)

        return running_minimum(
            segment_distance(a.xy(), b.xy(), c.xy(), d.xy())
            for a, b in self.explode(to_array=True)
            for c, d in other.explode(to_array=True)
        )

    def area(self) -> float:
        return sum(c.area() for c in self._components)

    def length(self) -> float:
        return sum(c.length() for c in self._components)

    def length_3d(self) -> float:
        return sum(c.length_3d() for c in self._components)

    def great_circle_length(self, radius: Optional[float] = None) -> float:
        return sum(c.great_circle_length(radius) for c in self._components)

    def haversine_length(self, radius: Optional[float] = None) -> float:
        return sum(c.haversine_length(radius) for c in self._components)

    def _aggregate(self, name: str, func) -> Optional[float]:
        values = [getattr(c, name)() for c in self._components]
        values = [v for v in values if v is not None]
        return func(values) if values else None

    def minimum_z(self) -> Optional[float]:
        return self._aggregate('minimum_z', min)

    def maximum_z(self) -> Optional[float]:
        return self._aggregate('maximum_z', max)

    def minimum_m(self) -> Optional[float]:
        return self._aggregate('minimum_m', min)

    def maximum_m(self) -> Optional[float]:
        return self._aggregate('maximum_m', max)

    # Predicates

    def equals(self, other: Geometry) -> bool:
        if other.geometry_type() is not self.kind:
            return False
        theirs = other.components()
        if len(theirs) != len(self._components):
            return False
        return all(a.equals(b) for a, b in zip(self._components, theirs))

    def is_simple(self) -> bool:
        if self._backend is not None:
            return bool(self._backend.is_simple)
        return all(c.is_simple() for c in self._components)

    def is_valid(self) -> bool:
        if self._backend is not None:
            return bool(self._backend.is_valid)
        return all(c.is_valid() for c in self._components)

    def is_closed(self) -> bool:
        return all(c.is_closed() for c in self._components)

    # In-place edits

    def translate(self, dx: float = 0, dy: float = 0, dz: float = 0) -> "Collection":
        for component in self._components:
            component.translate(dx, dy, dz)
        self._on_mutation()
        return self

    def invert_xy(self) -> "Collection":
        for component in self._components:
            component.invert_xy()
        self._on_mutation()
        return self

    def flatten(self) -> "Collection":
        for component in self._components:
            component.flatten()
        self._on_mutation()
        return self
