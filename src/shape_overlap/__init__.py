# MIT License (see LICENSE)
"""
shape_overlap - Overlap predicates for 2D shapes.

Decides whether two shapes (line segments, triangles, axis-aligned
rectangles, circles) intersect or contain one another. All predicates
are pure functions over immutable shape values.

Main entry points:
    - shapes_overlap: Overlap test for any supported pair, in any order.
    - Point, LineSegment, Triangle, Rectangle, Circle: Shape definitions.

Submodules:
    - geometry: Orientation, segment intersection, containment, distances.
    - overlap: Per-pair predicates and the type dispatcher.
    - io: JSON serialization/deserialization.

Example:
    from shape_overlap import Point, Rectangle, shapes_overlap
    
    a = Rectangle(Point(0, 0), 4, 4)
    b = Rectangle(Point(2, 2), 4, 4)
    shapes_overlap(a, b)  # True
"""
import logging

from .types import Point, LineSegment, Triangle, Rectangle, Circle, HasSides
from .overlap import (
    shapes_overlap,
    segment_with_segment,
    segment_with_triangle,
    segment_with_rectangle,
    triangle_with_triangle,
    triangle_with_rectangle,
    rectangle_with_rectangle,
    circle_with_segment,
    circle_with_triangle,
    circle_with_rectangle,
    circle_with_circle,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Shapes
    "Point",
    "LineSegment",
    "Triangle",
    "Rectangle",
    "Circle",
    "HasSides",
    # Dispatch
    "shapes_overlap",
    # Pair predicates
    "segment_with_segment",
    "segment_with_triangle",
    "segment_with_rectangle",
    "triangle_with_triangle",
    "triangle_with_rectangle",
    "rectangle_with_rectangle",
    "circle_with_segment",
    "circle_with_triangle",
    "circle_with_rectangle",
    "circle_with_circle",
]
