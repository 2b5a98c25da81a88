# MIT License (see LICENSE)
"""
Circle shape: a center point and a radius.

Besides the direct constructor, :meth:`Circle.of_points` builds the
circumcircle of three points by intersecting two perpendicular bisectors.

Owned intersection tests: Circle x Line, Circle x Circle.
Rectangle and Polygon own their pairings with Circle.
"""
from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .. import config
from ..errors import InvalidGeometry
from ..intersection import register
from ..util import require_non_negative
from ..vector import Vector
from .base import Shape
from .line import Line

if TYPE_CHECKING:
    from .rectangle import Rectangle

logger = logging.getLogger(__name__)


@dataclass(frozen=True, init=False)
class Circle(Shape):
    """
    Circle centered at ``position``.

    A radius of 0 is a valid point-circle.

    Attributes:
        position: Center of the circle.
        radius: Distance from center to boundary, >= 0.
    """
    position: Vector
    radius: float

    def __init__(self, x: float, y: float, radius: float) -> None:
        radius = float(radius)
        try:
            require_non_negative("radius", radius)
        except InvalidGeometry:
            logger.debug("Rejected circle at (%s, %s) with radius %s", x, y, radius)
            raise
        object.__setattr__(self, "position", Vector(x, y))
        object.__setattr__(self, "radius", radius)

    @staticmethod
    def of_center(center: Vector, radius: float) -> "Circle":
        return Circle(center.x, center.y, radius)

    @staticmethod
    def of_points(start: Vector, center: Vector, end: Vector) -> "Circle":
        """
        Circle passing through three points.

        ``center`` is the middle of the three boundary points, not the
        circle's center. The center is where the perpendicular bisectors of
        start-center and center-end meet.

        Raises:
            InvalidGeometry: if two points coincide or all three are collinear.
        """
        first = Line.of_points(start, center).get_vertical_bisector()
        second = Line.of_points(center, end).get_vertical_bisector()
        try:
            circumcenter = first.intersection(second)
        except InvalidGeometry as exc:
            logger.debug("No circumcircle for collinear points %s, %s, %s", start, center, end)
            raise InvalidGeometry(
                f"Cannot build a circle through collinear points {start}, {center}, {end}"
            ) from exc
        return Circle.of_center(circumcenter, start.distance_between(circumcenter))

    def contains(self, point: Vector) -> bool:
        return point.distance_between(self.position) <= self.radius + config.eps()

    def intersects_line(self, line: Line) -> bool:
        """
        True if the segment touches or crosses the circle.

        Either endpoint inside is enough. Otherwise the center is projected
        onto the supporting line; the projection must fall on the segment
        and be within the radius.
        """
        if self.contains(line.start) or self.contains(line.end):
            return True

        direction = line.get_direction()
        t = (self.position - line.start).dot(direction) / direction.dot(direction)
        closest = line.start + direction * t

        if not line.contains(closest):
            return False

        return self.position.distance_between(closest) <= self.radius + config.eps()

    def intersects_circle(self, other: "Circle") -> bool:
        distance = self.position.distance_between(other.position)
        return distance <= self.radius + other.radius + config.eps()

    def get_border_point(self, angle_degrees: float) -> Vector:
        """Point on the boundary at the given angle (degrees from +x)."""
        return self.position + Vector.of_angle(angle_degrees) * self.radius

    def get_area(self) -> float:
        return math.pi * self.radius * self.radius

    def get_perimeter(self) -> float:
        return 2 * math.pi * self.radius

    def get_diameter(self) -> float:
        return 2 * self.radius

    def get_radius(self) -> float:
        return self.radius

    def get_position(self) -> Vector:
        return self.position

    def get_center(self) -> Vector:
        return self.position

    def get_bounds(self) -> "Rectangle":
        from .rectangle import Rectangle

        r = self.radius
        return Rectangle(self.position.x - r, self.position.y - r, 2 * r, 2 * r)


register(Circle, Line)(Circle.intersects_line)
register(Circle, Circle)(Circle.intersects_circle)
