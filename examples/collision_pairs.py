from itertools import combinations

from geom2d import Circle, Line, Polygon, Rectangle, Vector
from geom2d.io import shapes_to_json

shapes = [
    Circle(0, 0, 4),
    Rectangle(-2, -2, 10, 5),
    Polygon([(1, -2), (1, 2), (0, 8)]),
    Line(Vector(20, 20), Vector(30, 25)),
    Circle.of_points(Vector(0, 6), Vector(6, 0), Vector(2, 2)),
]

for a, b in combinations(shapes, 2):
    print(f"{type(a).__name__:9s} x {type(b).__name__:9s}: {a.intersects(b)}")

for s in shapes:
    print(type(s).__name__, "area", round(s.get_area(), 3), "perimeter", round(s.get_perimeter(), 3))

print(shapes_to_json(shapes))
