# MIT License (see LICENSE)
"""
Axis-aligned rectangle given by its top-left corner and its dimension.

Owned intersection tests: Rectangle x Line, Rectangle x Circle,
Rectangle x Rectangle. Polygon owns Rectangle x Polygon.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import NamedTuple, Optional

from .. import config
from ..errors import InvalidGeometry
from ..intersection import register
from ..util import clamp
from ..vector import Vector
from .base import Dimension, Shape
from .circle import Circle
from .line import Line

logger = logging.getLogger(__name__)


class RectangleCorners(NamedTuple):
    top_left: Vector
    top_right: Vector
    bottom_left: Vector
    bottom_right: Vector


class RectangleSides(NamedTuple):
    """
    Boundary segments. A side is None when it collapses to a single point,
    which happens for rectangles of zero width or height.
    """
    top: Optional[Line]
    right: Optional[Line]
    bottom: Optional[Line]
    left: Optional[Line]


def _side(a: Vector, b: Vector) -> Optional[Line]:
    return None if a == b else Line(a, b)


@dataclass(frozen=True, init=False)
class Rectangle(Shape):
    """
    Rectangle spanning ``[x, x + width] x [y, y + height]``.

    Attributes:
        position: Top-left corner (smallest x and y).
        dimension: Width and height, both >= 0.
    """
    position: Vector
    dimension: Dimension

    def __init__(self, x: float, y: float, width: float, height: float) -> None:
        try:
            dimension = Dimension(width, height)
        except InvalidGeometry:
            logger.debug("Rejected rectangle at (%s, %s) sized %s x %s", x, y, width, height)
            raise
        object.__setattr__(self, "position", Vector(x, y))
        object.__setattr__(self, "dimension", dimension)

    @staticmethod
    def of(position: Vector, dimension: Dimension) -> "Rectangle":
        return Rectangle(position.x, position.y, dimension.width, dimension.height)

    @property
    def left(self) -> float:
        return self.position.x

    @property
    def top(self) -> float:
        return self.position.y

    @property
    def right(self) -> float:
        return self.position.x + self.dimension.width

    @property
    def bottom(self) -> float:
        return self.position.y + self.dimension.height

    def contains(self, point: Vector) -> bool:
        eps = config.eps()
        return (
            self.left - eps <= point.x <= self.right + eps
            and self.top - eps <= point.y <= self.bottom + eps
        )

    def get_corners(self) -> RectangleCorners:
        width, height = self.dimension.width, self.dimension.height
        return RectangleCorners(
            top_left=self.position,
            top_right=self.position + Vector(width, 0),
            bottom_left=self.position + Vector(0, height),
            bottom_right=self.position + Vector(width, height),
        )

    def get_sides(self) -> RectangleSides:
        top_left, top_right, bottom_left, bottom_right = self.get_corners()
        return RectangleSides(
            top=_side(top_left, top_right),
            right=_side(top_right, bottom_right),
            bottom=_side(bottom_left, bottom_right),
            left=_side(top_left, bottom_left),
        )

    def intersects_line(self, line: Line) -> bool:
        """
        True if the segment crosses a side or lies inside the rectangle.
        """
        if self.contains(line.start) or self.contains(line.end):
            return True
        sides = [side for side in self.get_sides() if side is not None]
        if not sides:
            # Zero-sized rectangle: a single point
            return line.contains(self.position)
        return any(side.intersects_line(line) for side in sides)

    def intersects_circle(self, circle: Circle) -> bool:
        """
        Clamp the circle's center into the rectangle to get the nearest
        point, then compare its distance with the radius (inclusive).
        """
        center = circle.get_center()
        nearest = Vector(
            clamp(center.x, self.left, self.right),
            clamp(center.y, self.top, self.bottom),
        )
        return center.distance_between(nearest) <= circle.get_radius() + config.eps()

    def intersects_rectangle(self, other: "Rectangle") -> bool:
        eps = config.eps()
        return (
            self.left <= other.right + eps
            and other.left <= self.right + eps
            and self.top <= other.bottom + eps
            and other.top <= self.bottom + eps
        )

    def get_area(self) -> float:
        return self.dimension.width * self.dimension.height

    def get_perimeter(self) -> float:
        return 2 * self.dimension.width + 2 * self.dimension.height

    def get_center(self) -> Vector:
        offset = Vector(self.dimension.width / 2, self.dimension.height / 2)
        return self.position + offset

    def get_position(self) -> Vector:
        return self.position

    def get_dimension(self) -> Dimension:
        return self.dimension

    def get_width(self) -> float:
        return self.dimension.width

    def get_height(self) -> float:
        return self.dimension.height

    def get_bounds(self) -> "Rectangle":
        return self


register(Rectangle, Line)(Rectangle.intersects_line)
register(Rectangle, Circle)(Rectangle.intersects_circle)
register(Rectangle, Rectangle)(Rectangle.intersects_rectangle)
