# MIT License (see LICENSE)
"""
geom2d - Narrow-phase 2D geometry: vectors, segments and closed shapes.

This package provides exact containment and intersection predicates and
derived metrics for a small closed family of shapes. Higher layers
(hit-testing, collision handling, layout) compose these queries; rendering,
physics response and broad-phase culling are not part of it.

Main entry points:
    - Vector: Immutable point/direction with algebraic operations.
    - Line: Segment between two points, implicit form, perpendicular bisector.
    - Circle, Rectangle, Polygon: Closed shapes.
    - Shape: The capability every variant implements
      (contains, intersects, get_area, get_perimeter, get_position).
    - InvalidGeometry: Raised for degenerate construction input.

Submodules:
    - intersection: Pairwise dispatch table for Shape.intersects.
    - io: JSON serialization of shapes.
    - config: Environment-driven tolerance (GEOM2D_EPS).

Example:
    from geom2d import Circle, Rectangle, Vector

    area = Rectangle(0, 0, 10, 5)
    area.contains(Vector(5, 3))               # True
    Circle(0, 0, 4).intersects(area)          # True
"""
from .errors import InvalidGeometry
from .vector import Vector
from .shapes import (
    Shape,
    Dimension,
    Line,
    ImplicitLine,
    Circle,
    Rectangle,
    Polygon,
)
from .intersection import intersects

__all__ = [
    # Errors
    "InvalidGeometry",
    # Algebra
    "Vector",
    # Shapes
    "Shape",
    "Dimension",
    "Line",
    "ImplicitLine",
    "Circle",
    "Rectangle",
    "Polygon",
    # Queries
    "intersects",
]
