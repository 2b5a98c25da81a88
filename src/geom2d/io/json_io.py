# MIT License (see LICENSE)
"""
JSON serialization and deserialization for shapes.

Lets hit areas and collision bounds be kept in human-readable files and
loaded back as validated shape instances.

JSON Schema Overview:
---------------------
{
  "shapes": [
    {"type": "line",      "start": [x, y], "end": [x, y]},
    {"type": "circle",    "center": [x, y], "radius": float},
    {"type": "rectangle", "position": [x, y],          # top-left corner
                          "width": float, "height": float},
    {"type": "polygon",   "vertices": [[x, y], ...]}   # >= 3, ordered
  ]
}

Geometry that violates a shape invariant raises InvalidGeometry (a
ValueError); an unknown "type" or a missing field raises ValueError.
"""
from __future__ import annotations
import json
import logging
from typing import Any

from ..errors import InvalidGeometry
from ..shapes import Circle, Line, Polygon, Rectangle, Shape
from ..vector import Vector

logger = logging.getLogger(__name__)


def _point(data: Any, field: str) -> Vector:
    try:
        return Vector.of(data)
    except InvalidGeometry:
        raise
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Field '{field}' must be an [x, y] pair, got {data!r}") from exc


def _require(d: dict[str, Any], field: str) -> Any:
    if field not in d:
        raise ValueError(f"Shape definition of type '{d.get('type')}' missing required '{field}' field.")
    return d[field]


def shape_from_json(d: dict[str, Any]) -> Shape:
    """
    Parse a single shape definition from a dictionary.

    Args:
        d: Dictionary with a "type" tag and the fields of that shape.

    Returns:
        The constructed shape.
    """
    shape_type = d.get("type")

    if shape_type == "line":
        return Line.of_points(
            _point(_require(d, "start"), "start"),
            _point(_require(d, "end"), "end"),
        )
    if shape_type == "circle":
        return Circle.of_center(
            _point(_require(d, "center"), "center"),
            float(_require(d, "radius")),
        )
    if shape_type == "rectangle":
        position = _point(_require(d, "position"), "position")
        return Rectangle(
            position.x,
            position.y,
            float(_require(d, "width")),
            float(_require(d, "height")),
        )
    if shape_type == "polygon":
        verts = _require(d, "vertices")
        return Polygon([_point(v, "vertices") for v in verts])

    raise ValueError(f"Unknown shape type: '{shape_type}'")


def shape_to_json(shape: Shape) -> dict[str, Any]:
    """Serialize a shape to a dictionary (round-trip compatible)."""
    if isinstance(shape, Line):
        return {"type": "line", "start": _to_list(shape.start), "end": _to_list(shape.end)}
    if isinstance(shape, Circle):
        return {"type": "circle", "center": _to_list(shape.position), "radius": shape.radius}
    if isinstance(shape, Rectangle):
        return {
            "type": "rectangle",
            "position": _to_list(shape.position),
            "width": shape.get_width(),
            "height": shape.get_height(),
        }
    if isinstance(shape, Polygon):
        return {"type": "polygon", "vertices": shape.vertices.tolist()}
    raise TypeError(f"Cannot serialize unknown shape type: {type(shape)}")


def shapes_to_json(shapes: list[Shape]) -> dict[str, Any]:
    """Serialize a list of shapes to the file-level document."""
    return {"shapes": [shape_to_json(s) for s in shapes]}


def shapes_from_json(data: dict[str, Any]) -> list[Shape]:
    """Parse the file-level document produced by :func:`shapes_to_json`."""
    return [shape_from_json(d) for d in data.get("shapes", [])]


def save_shapes(shapes: list[Shape], path: str, indent: int = 2) -> None:
    """Save shapes to a JSON file on disk."""
    data = shapes_to_json(shapes)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent)
    logger.debug("Saved %d shapes to %s", len(shapes), path)


def load_shapes(path: str) -> list[Shape]:
    """Load and validate shapes from a JSON file on disk."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    shapes = shapes_from_json(data)
    logger.debug("Loaded %d shapes from %s", len(shapes), path)
    return shapes


def _to_list(v: Vector) -> list[float]:
    """Helper: Convert a Vector to a clean [x, y] list."""
    return [v.x, v.y]
