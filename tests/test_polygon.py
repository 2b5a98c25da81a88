import math

import numpy as np
import pytest

from geom2d import Circle, InvalidGeometry, Line, Polygon, Rectangle, Vector


def square(x: float, y: float, size: float) -> Polygon:
    return Polygon([(x, y), (x + size, y), (x + size, y + size), (x, y + size)])


L_SHAPE = Polygon([(0, 0), (4, 0), (4, 1), (1, 1), (1, 4), (0, 4)])


def test_polygon_needs_three_vertices():
    with pytest.raises(InvalidGeometry):
        Polygon([Vector(0, 0), Vector(1, 1)])
    with pytest.raises(InvalidGeometry):
        Polygon([])


def test_polygon_rejects_repeated_consecutive_vertices():
    with pytest.raises(InvalidGeometry):
        Polygon([(0, 0), (1, 0), (1, 0), (0, 1)])
    # Closing edge collapses: last vertex equals first
    with pytest.raises(InvalidGeometry):
        Polygon([(0, 0), (1, 0), (0, 1), (0, 0)])


def test_polygon_accepts_vectors_pairs_and_arrays():
    a = Polygon([Vector(0, 0), Vector(2, 0), Vector(0, 2)])
    b = Polygon([(0, 0), (2, 0), (0, 2)])
    c = Polygon(np.array([[0, 0], [2, 0], [0, 2]], dtype=np.float64))
    assert a == b == c
    assert hash(a) == hash(c)
    assert a != square(0, 0, 2)


def test_polygon_vertices_are_read_only():
    poly = square(0, 0, 1)
    with pytest.raises(ValueError):
        poly.vertices[0, 0] = 5.0


def test_polygon_edges_close_the_loop():
    poly = Polygon([(0, 0), (3, 0), (0, 4)])
    edges = poly.get_edges()
    assert len(edges) == 3
    assert edges[0] == Line(Vector(0, 0), Vector(3, 0))
    assert edges[-1] == Line(Vector(0, 4), Vector(0, 0))
    assert poly.get_vertices()[1] == Vector(3, 0)


def test_polygon_area_and_perimeter():
    poly = square(0, 0, 4)
    assert poly.get_area() == pytest.approx(16)
    assert poly.get_perimeter() == pytest.approx(16)

    triangle = Polygon([(0, 0), (3, 0), (0, 4)])
    assert triangle.get_area() == pytest.approx(6)
    assert triangle.get_perimeter() == pytest.approx(12)

    # Winding direction does not change the area
    clockwise = Polygon([(0, 4), (3, 0), (0, 0)])
    assert clockwise.get_area() == pytest.approx(6)

    assert L_SHAPE.get_area() == pytest.approx(7)


def test_polygon_center_and_position():
    triangle = Polygon([(0, 0), (6, 0), (0, 3)])
    center = triangle.get_center()
    assert center.x == pytest.approx(2)
    assert center.y == pytest.approx(1)

    poly = Polygon([(1, -2), (1, 2), (0, 8)])
    assert poly.get_position() == Vector(0, -2)

    bounds = poly.get_bounds()
    assert bounds.get_position() == Vector(0, -2)
    assert bounds.get_width() == 1
    assert bounds.get_height() == 10


def test_polygon_contains():
    poly = square(0, 0, 4)
    assert poly.contains(Vector(2, 2))
    assert not poly.contains(Vector(5, 5))
    assert not poly.contains(Vector(-0.1, 2))


def test_polygon_contains_boundary_points():
    """Points on an edge or a vertex count as inside."""
    poly = square(0, 0, 4)
    assert poly.contains(Vector(4, 2))
    assert poly.contains(Vector(0, 0))
    assert poly.contains(Vector(2, 4))


def test_concave_polygon_contains():
    assert L_SHAPE.contains(Vector(0.5, 3))
    assert L_SHAPE.contains(Vector(3, 0.5))
    # Same height as the reflex vertex
    assert L_SHAPE.contains(Vector(0.5, 1))
    assert not L_SHAPE.contains(Vector(3, 3))
    assert not L_SHAPE.contains(Vector(2, 1.5))


def test_polygon_is_convex():
    assert square(0, 0, 1).is_convex()
    assert Polygon([(0, 4), (3, 0), (0, 0)]).is_convex()
    assert not L_SHAPE.is_convex()

    star = Polygon([
        (math.cos(math.radians(90 + 144 * k)), math.sin(math.radians(90 + 144 * k)))
        for k in range(5)
    ])
    assert not star.is_convex()


def test_polygon_intersects_with_polygon():
    base = square(0, 0, 4)
    assert base.intersects(square(2, 2, 4))
    assert not base.intersects(square(20, 20, 4))
    # Shared corner
    assert base.intersects(square(4, 4, 1))


def test_polygon_containment_counts_as_intersection():
    big = square(0, 0, 10)
    small = square(4, 4, 2)
    assert big.intersects(small)
    assert small.intersects(big)

    assert big.intersects(Circle(5, 5, 1))
    assert big.intersects(Rectangle(4, 4, 1, 1))
    assert big.intersects(Line.of_points(Vector(4, 4), Vector(5, 5)))

    triangle = Polygon([(1, -2), (1, 2), (0, 8)])
    assert triangle.intersects(Circle(0, 0, 100))
    assert triangle.intersects(Rectangle(-100, -100, 200, 200))


def test_polygon_intersects_with_line():
    poly = square(0, 0, 4)
    assert poly.intersects(Line.of_points(Vector(-1, 2), Vector(5, 2)))
    assert poly.intersects(Line.of_points(Vector(4, 4), Vector(6, 6)))
    assert not poly.intersects(Line.of_points(Vector(5, 0), Vector(5, 4)))


def test_concave_polygon_intersections():
    # Sits in the notch of the L without touching it
    assert not L_SHAPE.intersects(Circle(3, 3, 1))
    assert not L_SHAPE.intersects(Rectangle(2, 2, 1.5, 1.5))
    assert L_SHAPE.intersects(Rectangle(0.5, 0.5, 3, 3))


def test_polygon_intersects_with_null():
    assert not square(0, 0, 1).intersects(None)
    assert not square(0, 0, 1).intersects([(0, 0), (1, 1)])
