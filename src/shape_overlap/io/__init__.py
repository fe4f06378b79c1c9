# MIT License (see LICENSE)
"""
Input/Output utilities for shapes.

This subpackage provides:
    - JSON serialization: Save and load shape lists to/from JSON files.
    - Dict codec: Convert single shapes to/from plain dictionaries.

Typical usage:
    from shape_overlap.io import load_shapes, shape_to_json
    
    shapes = load_shapes("detections.json")
    data = shape_to_json(shapes[0])
"""
from .json_io import (
    load_shapes,
    save_shapes,
    shape_from_json,
    shape_to_json,
    shapes_from_json,
    shapes_to_json,
    point_from_json,
    point_to_json,
)

__all__ = [
    # Files
    "load_shapes",
    "save_shapes",
    # Shapes
    "shape_from_json",
    "shape_to_json",
    "shapes_from_json",
    "shapes_to_json",
    # Points
    "point_from_json",
    "point_to_json",
]
