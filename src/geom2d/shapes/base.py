# MIT License (see LICENSE)
"""
The capability shared by every shape variant.

Callers hold a concrete variant (Line, Circle, Rectangle, Polygon) or refer
to it through :class:`Shape`. Shapes are immutable value objects; every
query is a pure computation on the stored parameters.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..intersection import intersects as _intersects
from ..util import require_non_negative
from ..vector import Vector

if TYPE_CHECKING:
    from .rectangle import Rectangle


@dataclass(frozen=True)
class Dimension:
    """Width and height of an axis-aligned extent, both >= 0."""
    width: float
    height: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", float(self.width))
        object.__setattr__(self, "height", float(self.height))
        require_non_negative("width", self.width)
        require_non_negative("height", self.height)


class Shape(ABC):
    """
    Closed planar shape supporting hit-testing and overlap queries.

    Subclasses implement containment and metrics; ``intersects`` is routed
    through :mod:`geom2d.intersection`, which holds one implementation per
    unordered pair of variants.
    """

    @abstractmethod
    def contains(self, point: Vector) -> bool:
        """True if the point lies inside the shape or on its boundary."""

    def intersects(self, other: Any) -> bool:
        """
        True if this shape and ``other`` share at least one point.

        Returns False for None or for objects that are not supported shapes.
        """
        return _intersects(self, other)

    @abstractmethod
    def get_area(self) -> float:
        ...

    @abstractmethod
    def get_perimeter(self) -> float:
        ...

    @abstractmethod
    def get_position(self) -> Vector:
        """Anchor point of the shape (its meaning depends on the variant)."""

    @abstractmethod
    def get_center(self) -> Vector:
        ...

    @abstractmethod
    def get_bounds(self) -> "Rectangle":
        """Smallest axis-aligned rectangle enclosing the shape."""
