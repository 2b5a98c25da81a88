# MIT License (see LICENSE)
"""
Utility functions for vector math and numeric operations.

Low-level helpers shared by the shape implementations. Vectors passed here
are numpy arrays of shape (2,) or anything array-like with two components.
"""
from __future__ import annotations
import math

import numpy as np

from .errors import InvalidGeometry


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Allows tuple/list inputs for points and vertex lists.
    """
    return np.array(x, dtype=np.float64)


def cross2(a, b) -> float:
    """
    2D cross product (scalar result): a × b = ax*by - ay*bx.

    Positive result means b is counterclockwise from a.
    """
    return float(a[0] * b[1] - a[1] * b[0])


def orientation(p, q, r) -> float:
    """Signed doubled area of triangle (p, q, r): (q - p) × (r - p)."""
    return float((q[0] - p[0]) * (r[1] - p[1]) - (q[1] - p[1]) * (r[0] - p[0]))


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(value, high))


def require_finite(name: str, *values: float) -> None:
    """Raise InvalidGeometry if any value is NaN or infinite."""
    for v in values:
        if not math.isfinite(v):
            raise InvalidGeometry(f"{name} must be finite, got {v!r}")


def require_non_negative(name: str, value: float) -> None:
    """Raise InvalidGeometry if value is negative (or not finite)."""
    require_finite(name, value)
    if value < 0:
        raise InvalidGeometry(f"{name} must be >= 0, got {value}")
