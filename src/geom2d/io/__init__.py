# MIT License (see LICENSE)
"""
Input/Output utilities for shapes.

This subpackage provides:
    - JSON serialization: Save and load shape lists to/from JSON files.
    - Round-trip support: Serialized shapes load back as equal instances.

Typical usage:
    from geom2d.io import load_shapes, save_shapes

    save_shapes([Rectangle(0, 0, 10, 5)], "hit_areas.json")
    areas = load_shapes("hit_areas.json")
"""
from .json_io import (
    load_shapes,
    save_shapes,
    shape_from_json,
    shape_to_json,
    shapes_from_json,
    shapes_to_json,
)

__all__ = [
    # Loading
    "load_shapes",
    "shapes_from_json",
    "shape_from_json",
    # Saving
    "save_shapes",
    "shapes_to_json",
    "shape_to_json",
]
