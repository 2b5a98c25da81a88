# MIT License (see LICENSE)
"""
Exceptions raised by the geometry core.
"""
from __future__ import annotations


class InvalidGeometry(ValueError):
    """
    Raised when a shape or factory receives degenerate input.

    Examples: a zero-length line, three collinear points for a circumcircle,
    a polygon with fewer than 3 vertices, a negative radius or extent.
    Once an instance exists, its methods never raise this.
    """
