# MIT License (see LICENSE)
"""
Immutable 2D vector used for points and directions.

A third component ``z`` is carried so call sites that work with 3D-shaped
data can pass vectors through unchanged; every 2D operation leaves it at 0.
All operations return new instances.
"""
from __future__ import annotations
import math
from dataclasses import dataclass

import numpy as np

from .util import f64, require_finite


@dataclass(frozen=True)
class Vector:
    """
    Point or direction in the plane.

    Attributes:
        x: Horizontal component.
        y: Vertical component.
        z: Depth component, 0 for planar geometry.
    """
    x: float
    y: float
    z: float = 0.0

    def __post_init__(self) -> None:
        """Store components as plain floats and reject NaN/Infinity."""
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))
        require_finite("Vector component", self.x, self.y, self.z)

    @staticmethod
    def of(value) -> "Vector":
        """Build a Vector from a Vector, an (x, y) pair or an (x, y, z) triple."""
        if isinstance(value, Vector):
            return value
        arr = f64(value).ravel()
        if arr.shape[0] not in (2, 3):
            raise ValueError(f"Expected 2 or 3 components, got {arr.shape[0]}")
        return Vector(*arr.tolist())

    @staticmethod
    def of_angle(angle_degrees: float) -> "Vector":
        """Unit vector (cos θ, sin θ) for an angle given in degrees."""
        theta = math.radians(angle_degrees)
        return Vector(math.cos(theta), math.sin(theta))

    def add(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def multiply(self, scalar: float) -> "Vector":
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    def dot(self, other: "Vector") -> float:
        """Scalar product. The z term only contributes when non-zero."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def distance_between(self, other: "Vector") -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y, self.z - other.z)

    def length(self) -> float:
        return math.hypot(self.x, self.y, self.z)

    def normalize(self) -> "Vector":
        """Unit vector in the same direction. The zero vector is returned as is."""
        n = self.length()
        if n == 0.0:
            return self
        return self.multiply(1.0 / n)

    def as_array(self) -> np.ndarray:
        """The (x, y) components as a float64 numpy array."""
        return f64((self.x, self.y))

    def __add__(self, other: "Vector") -> "Vector":
        return self.add(other)

    def __sub__(self, other: "Vector") -> "Vector":
        return self.subtract(other)

    def __mul__(self, scalar: float) -> "Vector":
        return self.multiply(scalar)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector":
        return self.multiply(-1.0)

    def __iter__(self):
        # Unpacks as a 2D point: x, y = v
        yield self.x
        yield self.y

    def __getitem__(self, index: int) -> float:
        # Indexes as a 2D point: v[0], v[1]
        return (self.x, self.y)[index]
