import dataclasses
import math

import numpy as np
import pytest

from geom2d import InvalidGeometry, Vector
from geom2d.util import orientation


def test_vector_arithmetic():
    """add/subtract/multiply are componentwise and return new vectors."""
    a = Vector(1, 2)
    b = Vector(3, 4)

    assert a.add(b) == Vector(4, 6)
    assert b.subtract(a) == Vector(2, 2)
    assert a.multiply(3) == Vector(3, 6)
    assert a + b == Vector(4, 6)
    assert b - a == Vector(2, 2)
    assert 2 * a == Vector(2, 4)
    assert -a == Vector(-1, -2)

    # Operands untouched
    assert a == Vector(1, 2)
    assert b == Vector(3, 4)


def test_vector_dot_and_distance():
    assert Vector(1, 2).dot(Vector(3, 4)) == 11
    assert Vector(1, 2, 3).dot(Vector(1, 1, 1)) == 6
    assert Vector(0, 0).distance_between(Vector(3, 4)) == pytest.approx(5.0)
    assert Vector(3, 4).length() == pytest.approx(5.0)


def test_vector_of_angle():
    """Angles are in degrees; result is a unit vector with z == 0."""
    right = Vector.of_angle(0)
    assert right.x == 1.0
    assert right.y == 0.0
    assert right.z == 0.0

    up = Vector.of_angle(90)
    assert up.x == pytest.approx(0.0, abs=1e-12)
    assert up.y == pytest.approx(1.0)

    diag = Vector.of_angle(45)
    assert diag.length() == pytest.approx(1.0)
    assert diag.x == pytest.approx(math.sqrt(2) / 2)


def test_vector_normalize():
    assert Vector(0, 5).normalize() == Vector(0, 1)
    assert Vector(0, 0).normalize() == Vector(0, 0)


def test_vector_is_immutable():
    v = Vector(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.x = 5


def test_vector_rejects_non_finite():
    with pytest.raises(InvalidGeometry):
        Vector(float("nan"), 0)
    with pytest.raises(InvalidGeometry):
        Vector(0, float("inf"))


def test_vector_conversions():
    v = Vector.of((1, 2))
    assert v == Vector(1.0, 2.0)
    assert v.z == 0.0
    assert Vector.of(np.array([1.5, -2.0, 0.0])) == Vector(1.5, -2.0)
    assert Vector.of(v) is v
    assert np.allclose(v.as_array(), [1.0, 2.0])

    x, y = v
    assert (x, y) == (1.0, 2.0)

    with pytest.raises(ValueError):
        Vector.of([1, 2, 3, 4])


def test_vector_indexes_as_point():
    """Vectors index like (x, y) pairs, so array helpers accept them."""
    v = Vector(3, -4)
    assert v[0] == 3.0
    assert v[1] == -4.0
    with pytest.raises(IndexError):
        v[2]

    # Counterclockwise turn is positive
    assert orientation(Vector(0, 0), Vector(1, 0), Vector(1, 1)) == pytest.approx(1.0)
    assert orientation(Vector(0, 0), Vector(1, 0), Vector(1, -1)) == pytest.approx(-1.0)
    assert orientation(Vector(0, 0), Vector(1, 0), Vector(5, 0)) == 0.0
