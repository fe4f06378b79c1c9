# MIT License (see LICENSE)
"""
JSON serialization and deserialization for shapes.

Lets a detection pipeline pass shapes around as plain data and load test
scenes from disk.

JSON Schema Overview:
---------------------
{
  "shapes": [
    {"type": "segment",   "a": [x, y], "b": [x, y]},
    {"type": "triangle",  "a": [x, y], "b": [x, y], "c": [x, y]},
    {"type": "rectangle", "top_left": [x, y], "width": float, "height": float},
    {"type": "circle",    "center": [x, y], "radius": float}
  ]
}

Points are always [x, y] pairs of finite numbers. Widths, heights and radii
must be finite and non-negative; zero-size shapes are accepted.
"""
from __future__ import annotations
import json
from typing import Any

import numpy as np

from ..types import Point, LineSegment, Triangle, Rectangle, Circle, Shape2D
from ..util import f64


def point_from_json(value: Any, field_name: str = "point") -> Point:
    """
    Parse an [x, y] pair into a Point.
    
    Raises:
        ValueError: If the value is not a pair of finite numbers.
    """
    try:
        arr = f64(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Field '{field_name}' must be an [x, y] pair, got {value!r}") from exc

    if arr.shape != (2,) or not np.all(np.isfinite(arr)):
        raise ValueError(f"Field '{field_name}' must be an [x, y] pair, got {value!r}")
    return Point(float(arr[0]), float(arr[1]))


def point_to_json(p: Point) -> list[float]:
    return [p.x, p.y]


def _non_negative(d: dict[str, Any], key: str) -> float:
    try:
        value = float(d[key])
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Field '{key}' must be a number, got {d[key]!r}") from exc
    if not np.isfinite(value) or value < 0:
        raise ValueError(f"Field '{key}' must be finite and non-negative, got {value}")
    return value


def shape_from_json(d: dict[str, Any]) -> Shape2D:
    """
    Parse a single shape definition from a dictionary.
    
    Args:
        d: Dictionary with a "type" key and the fields for that type.
        
    Returns:
        The constructed shape.
        
    Raises:
        ValueError: If the type is missing or unknown, or a field is invalid.
    """
    if "type" not in d:
        raise ValueError("Shape definition missing required 'type' field.")

    shape_type = d["type"]
    try:
        if shape_type == "segment":
            return LineSegment(point_from_json(d["a"], "a"), point_from_json(d["b"], "b"))
        if shape_type == "triangle":
            return Triangle(
                point_from_json(d["a"], "a"),
                point_from_json(d["b"], "b"),
                point_from_json(d["c"], "c"),
            )
        if shape_type == "rectangle":
            return Rectangle(
                top_left=point_from_json(d["top_left"], "top_left"),
                width=_non_negative(d, "width"),
                height=_non_negative(d, "height"),
            )
        if shape_type == "circle":
            return Circle(
                center=point_from_json(d["center"], "center"),
                radius=_non_negative(d, "radius"),
            )
    except KeyError as exc:
        raise ValueError(f"Shape '{shape_type}' missing required field {exc}") from exc

    raise ValueError(f"Unknown shape type: '{shape_type}'")


def shape_to_json(shape: Shape2D) -> dict[str, Any]:
    """
    Serialize a shape to a JSON-compatible dictionary.
    
    Raises:
        TypeError: If the object is not a supported shape.
    """
    if isinstance(shape, LineSegment):
        return {"type": "segment", "a": point_to_json(shape.a), "b": point_to_json(shape.b)}
    if isinstance(shape, Triangle):
        return {
            "type": "triangle",
            "a": point_to_json(shape.a),
            "b": point_to_json(shape.b),
            "c": point_to_json(shape.c),
        }
    if isinstance(shape, Rectangle):
        return {
            "type": "rectangle",
            "top_left": point_to_json(shape.top_left),
            "width": shape.width,
            "height": shape.height,
        }
    if isinstance(shape, Circle):
        return {"type": "circle", "center": point_to_json(shape.center), "radius": shape.radius}

    raise TypeError(f"Cannot serialize unknown shape type: {type(shape)}")


def shapes_from_json(items: list[dict[str, Any]]) -> list[Shape2D]:
    """Parse a list of shape definitions, keeping their order."""
    return [shape_from_json(item) for item in items]


def shapes_to_json(shapes: list[Shape2D]) -> dict[str, Any]:
    """Wrap serialized shapes in the top-level {"shapes": [...]} document."""
    return {"shapes": [shape_to_json(s) for s in shapes]}


def load_shapes(path: str) -> list[Shape2D]:
    """
    Load shapes from a JSON file.
    
    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the document is not an object or a shape definition
                    is invalid.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Shape file must hold a JSON object, got {type(data).__name__}")
    return shapes_from_json(data.get("shapes", []))


def save_shapes(shapes: list[Shape2D], path: str) -> None:
    """Write shapes to a JSON file."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(shapes_to_json(shapes), f, indent=2)
