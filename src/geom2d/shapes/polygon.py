# MIT License (see LICENSE)
"""
Simple polygon defined by an ordered list of vertices.

The boundary closes implicitly from the last vertex back to the first.
Vertices are stored as a read-only float64 array of shape [N, 2] so metrics
can be computed vectorised (shoelace area, edge lengths, ray casting).

Containment:
    Points on an edge (within tolerance) count as inside. Otherwise the
    even-odd rule is applied by casting a ray towards +x and counting the
    edges it crosses.

Owned intersection tests: Polygon x Line, Polygon x Circle,
Polygon x Rectangle, Polygon x Polygon. Each one is true when a polygon edge
meets the other shape's boundary, or when one shape lies entirely inside
the other.
"""
from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Iterable

import numpy as np

from .. import config
from ..errors import InvalidGeometry
from ..intersection import register
from ..util import cross2, f64
from ..vector import Vector
from .base import Shape
from .circle import Circle
from .line import Line
from .rectangle import Rectangle

logger = logging.getLogger(__name__)


def _as_vertex_array(vertices: Iterable) -> np.ndarray:
    rows = [Vector.of(v) for v in vertices]
    if len(rows) < 3:
        raise InvalidGeometry(f"Polygon needs at least 3 vertices, got {len(rows)}")
    return f64([(v.x, v.y) for v in rows])


@dataclass(frozen=True, init=False, eq=False)
class Polygon(Shape):
    """
    Closed polygon.

    Attributes:
        vertices: Array [N, 2] with N >= 3; consecutive vertices (including
                  last and first) must differ.
    """
    vertices: np.ndarray

    def __init__(self, vertices: Iterable) -> None:
        try:
            verts = _as_vertex_array(vertices)
        except InvalidGeometry as exc:
            logger.debug("Rejected polygon: %s", exc)
            raise
        repeated = np.all(verts == np.roll(verts, -1, axis=0), axis=1)
        if np.any(repeated):
            index = int(np.argmax(repeated))
            logger.debug("Rejected polygon with repeated vertex at index %d", index)
            raise InvalidGeometry(f"Consecutive polygon vertices must differ (index {index})")
        verts.setflags(write=False)
        object.__setattr__(self, "vertices", verts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polygon):
            return NotImplemented
        return np.array_equal(self.vertices, other.vertices)

    def __hash__(self) -> int:
        return hash(self.vertices.tobytes())

    def get_vertices(self) -> tuple[Vector, ...]:
        return tuple(Vector(x, y) for x, y in self.vertices.tolist())

    def get_edges(self) -> tuple[Line, ...]:
        """Edges in vertex order, ending with the closing edge last -> first."""
        verts = self.get_vertices()
        return tuple(Line(verts[i], verts[(i + 1) % len(verts)]) for i in range(len(verts)))

    def _signed_area(self) -> float:
        x, y = self.vertices[:, 0], self.vertices[:, 1]
        return 0.5 * float(np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))

    def contains(self, point: Vector) -> bool:
        if any(edge.contains(point) for edge in self.get_edges()):
            return True

        xi, yi = self.vertices[:, 0], self.vertices[:, 1]
        xj, yj = np.roll(xi, 1), np.roll(yi, 1)

        straddles = (yi > point.y) != (yj > point.y)
        # Horizontal edges never straddle, their division result is discarded
        with np.errstate(divide="ignore", invalid="ignore"):
            x_cross = (xj - xi) * (point.y - yi) / (yj - yi) + xi
        crossings = np.count_nonzero(straddles & (point.x < x_cross))
        return bool(crossings % 2)

    def intersects_line(self, line: Line) -> bool:
        if any(edge.intersects_line(line) for edge in self.get_edges()):
            return True
        return self.contains(line.start)

    def intersects_circle(self, circle: Circle) -> bool:
        # An edge touching the circle also covers the polygon-inside-circle case
        if any(circle.intersects_line(edge) for edge in self.get_edges()):
            return True
        return self.contains(circle.get_center())

    def intersects_rectangle(self, rect: Rectangle) -> bool:
        # Rectangle.intersects_line is true for edges inside the rectangle too
        if any(rect.intersects_line(edge) for edge in self.get_edges()):
            return True
        return self.contains(rect.get_position())

    def intersects_polygon(self, other: "Polygon") -> bool:
        other_edges = other.get_edges()
        for edge in self.get_edges():
            if any(edge.intersects_line(o) for o in other_edges):
                return True
        first, other_first = self.get_vertices()[0], other.get_vertices()[0]
        return self.contains(other_first) or other.contains(first)

    def is_convex(self) -> bool:
        """
        True if every turn goes the same way and the boundary winds once.

        Collinear vertices are allowed.
        """
        eps = config.eps()
        edges = np.roll(self.vertices, -1, axis=0) - self.vertices
        turning = 0.0
        sign = 0
        for i in range(len(edges)):
            a, b = edges[i], edges[(i + 1) % len(edges)]
            cross = cross2(a, b)
            turning += math.atan2(cross, float(np.dot(a, b)))
            if abs(cross) <= eps:
                continue
            current = 1 if cross > 0 else -1
            if sign == 0:
                sign = current
            elif current != sign:
                return False
        # Self-intersecting loops (pentagram) turn more than once
        return abs(abs(turning) - 2 * math.pi) <= 1e-6

    def get_area(self) -> float:
        """Shoelace formula."""
        return abs(self._signed_area())

    def get_perimeter(self) -> float:
        edges = np.roll(self.vertices, -1, axis=0) - self.vertices
        return float(np.sum(np.hypot(edges[:, 0], edges[:, 1])))

    def get_center(self) -> Vector:
        """
        Area centroid of the polygon.

        Falls back to the mean of the vertices when the area is zero.
        """
        area = self._signed_area()
        if abs(area) <= config.eps():
            x, y = self.vertices.mean(axis=0).tolist()
            return Vector(x, y)
        x, y = self.vertices[:, 0], self.vertices[:, 1]
        xn, yn = np.roll(x, -1), np.roll(y, -1)
        cross = x * yn - xn * y
        cx = float(np.sum((x + xn) * cross)) / (6.0 * area)
        cy = float(np.sum((y + yn) * cross)) / (6.0 * area)
        return Vector(cx, cy)

    def get_position(self) -> Vector:
        """Top-left corner of the bounding rectangle."""
        x, y = self.vertices.min(axis=0).tolist()
        return Vector(x, y)

    def get_bounds(self) -> Rectangle:
        lo = self.vertices.min(axis=0)
        hi = self.vertices.max(axis=0)
        width, height = (hi - lo).tolist()
        return Rectangle(float(lo[0]), float(lo[1]), width, height)


register(Polygon, Line)(Polygon.intersects_line)
register(Polygon, Circle)(Polygon.intersects_circle)
register(Polygon, Rectangle)(Polygon.intersects_rectangle)
register(Polygon, Polygon)(Polygon.intersects_polygon)
