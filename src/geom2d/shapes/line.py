# MIT License (see LICENSE)
"""
Finite line segments and implicit line equations.

A :class:`Line` joins two distinct points. Its supporting line can be
written in implicit form ``A·x + B·y = C`` (:class:`ImplicitLine`), which is
also how perpendicular bisectors are expressed for circumcircle
construction.

Segment-segment intersection uses orientation signs (2D cross products):
two segments properly cross when each one's endpoints lie on opposite sides
of the other. Touching and collinear overlap are resolved with the
tolerance-based :meth:`Line.contains`.
"""
from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, NamedTuple

from .. import config
from ..errors import InvalidGeometry
from ..intersection import register
from ..util import clamp, orientation
from ..vector import Vector
from .base import Shape

if TYPE_CHECKING:
    from .rectangle import Rectangle

logger = logging.getLogger(__name__)


class ImplicitLine(NamedTuple):
    """
    Infinite line ``a·x + b·y = c``.

    The triple is not normalised; (a, b) is a normal vector of the line.
    """
    a: float
    b: float
    c: float

    def contains(self, point: Vector) -> bool:
        """True if the point is within tolerance of the line."""
        norm = math.hypot(self.a, self.b)
        return abs(self.a * point.x + self.b * point.y - self.c) <= config.eps() * norm

    def intersection(self, other: "ImplicitLine") -> Vector:
        """
        Solve the 2x2 system formed by both equations (Cramer's rule).

        Raises:
            InvalidGeometry: if the lines are parallel or coincident.
        """
        det = self.a * other.b - other.a * self.b
        scale = math.hypot(self.a, self.b) * math.hypot(other.a, other.b)
        if abs(det) <= config.eps() * scale:
            raise InvalidGeometry(f"Lines {self} and {other} are parallel")
        x = (self.c * other.b - other.c * self.b) / det
        y = (self.a * other.c - other.a * self.c) / det
        return Vector(x, y)


@dataclass(frozen=True)
class Line(Shape):
    """
    Segment between two distinct points.

    Attributes:
        start: First endpoint.
        end: Second endpoint, must differ from ``start``.
    """
    start: Vector
    end: Vector

    def __post_init__(self) -> None:
        start, end = Vector.of(self.start), Vector.of(self.end)
        if start == end:
            logger.debug("Rejected zero-length line at %s", start)
            raise InvalidGeometry(f"Line endpoints must differ, got {start} twice")
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)

    @staticmethod
    def of_points(start: Vector, end: Vector) -> "Line":
        return Line(start, end)

    def get_start(self) -> Vector:
        return self.start

    def get_end(self) -> Vector:
        return self.end

    def get_direction(self) -> Vector:
        """Vector from start to end (not normalised)."""
        return self.end - self.start

    def get_length(self) -> float:
        return self.start.distance_between(self.end)

    def get_midpoint(self) -> Vector:
        return (self.start + self.end) * 0.5

    def get_coefficients(self) -> ImplicitLine:
        """Implicit form (A, B, C) of the line through start and end."""
        a = self.end.y - self.start.y
        b = self.start.x - self.end.x
        c = a * self.start.x + b * self.start.y
        return ImplicitLine(a, b, c)

    def get_vertical_bisector(self) -> ImplicitLine:
        """
        Perpendicular bisector of the segment.

        Every point P on it is equidistant from start and end, which gives
        ``d·P = d·M`` with d the direction and M the midpoint.
        """
        d = self.get_direction()
        m = self.get_midpoint()
        return ImplicitLine(d.x, d.y, d.x * m.x + d.y * m.y)

    def closest_point(self, point: Vector) -> Vector:
        """Point of the segment nearest to ``point``."""
        d = self.get_direction()
        t = (point - self.start).dot(d) / d.dot(d)
        return self.start + d * clamp(t, 0.0, 1.0)

    def contains(self, point: Vector) -> bool:
        """
        True if the point lies on the segment.

        The point must fall inside the segment's bounding extent and satisfy
        the implicit equation; both checks are tolerance based.
        """
        eps = config.eps()
        s, e = self.start, self.end
        if not (min(s.x, e.x) - eps <= point.x <= max(s.x, e.x) + eps):
            return False
        if not (min(s.y, e.y) - eps <= point.y <= max(s.y, e.y) + eps):
            return False
        a, b, c = self.get_coefficients()
        # |Ax + By - C| / |(A, B)| is the distance to the line, and |(A, B)| is the length
        return abs(a * point.x + b * point.y - c) <= eps * self.get_length()

    def intersects_line(self, other: "Line") -> bool:
        """Segment-segment test, inclusive of touching endpoints and overlaps."""
        p1, p2 = self.start, self.end
        q1, q2 = other.start, other.end

        d1 = orientation(p1, p2, q1)
        d2 = orientation(p1, p2, q2)
        d3 = orientation(q1, q2, p1)
        d4 = orientation(q1, q2, p2)

        if ((d1 > 0 > d2) or (d1 < 0 < d2)) and ((d3 > 0 > d4) or (d3 < 0 < d4)):
            return True

        # Parallel, collinear or touching: only a shared point counts
        return (
            self.contains(q1)
            or self.contains(q2)
            or other.contains(p1)
            or other.contains(p2)
        )

    def get_area(self) -> float:
        return 0.0

    def get_perimeter(self) -> float:
        return self.get_length()

    def get_position(self) -> Vector:
        return self.start

    def get_center(self) -> Vector:
        return self.get_midpoint()

    def get_bounds(self) -> "Rectangle":
        from .rectangle import Rectangle

        s, e = self.start, self.end
        return Rectangle(min(s.x, e.x), min(s.y, e.y), abs(e.x - s.x), abs(e.y - s.y))


register(Line, Line)(Line.intersects_line)
