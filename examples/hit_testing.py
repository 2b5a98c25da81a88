from geom2d import Circle, Polygon, Rectangle, Vector

targets = {
    "button": Rectangle(10, 10, 120, 40),
    "knob": Circle(200, 30, 15),
    "arrow": Polygon([(300, 10), (340, 30), (300, 50)]),
}

for cursor in [Vector(50, 20), Vector(205, 25), Vector(310, 30), Vector(0, 0)]:
    hits = [name for name, shape in targets.items() if shape.contains(cursor)]
    print(f"cursor ({cursor.x:5.1f}, {cursor.y:5.1f}) ->", hits or "nothing")
