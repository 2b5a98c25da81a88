# MIT License (see LICENSE)
"""
Shape variants and the capability they share.

Importing this subpackage registers every pairwise intersection test, so
``Shape.intersects`` is complete for all combinations of the variants.

    - Line: finite segment, plus ImplicitLine for A·x + B·y = C triples.
    - Circle: center and radius, circumcircle factory.
    - Rectangle: axis-aligned, top-left position and dimension.
    - Polygon: ordered vertex loop.
"""
from .base import Shape, Dimension
from .line import Line, ImplicitLine
from .circle import Circle
from .rectangle import Rectangle, RectangleCorners, RectangleSides
from .polygon import Polygon

__all__ = [
    "Shape",
    "Dimension",
    "Line",
    "ImplicitLine",
    "Circle",
    "Rectangle",
    "RectangleCorners",
    "RectangleSides",
    "Polygon",
]
