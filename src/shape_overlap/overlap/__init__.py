# MIT License (see LICENSE)
"""
Pairwise overlap predicates.

This subpackage provides:
    - Polygon: segment, triangle and rectangle pairs via boundary
      decomposition and containment.
    - Circle: circle pairs via center/radius distance algebra.
    - Dispatch: `shapes_overlap`, picking the predicate by shape type.

Typical usage:
    from shape_overlap.overlap import shapes_overlap
    
    if shapes_overlap(region_a, region_b):
        # regions collide
"""
from .polygon import (
    sides_of,
    any_sides_intersect,
    segment_with_segment,
    segment_with_triangle,
    segment_with_rectangle,
    triangle_with_triangle,
    triangle_with_rectangle,
    rectangle_with_rectangle,
)
from .circle import (
    circle_with_segment,
    circle_with_triangle,
    circle_with_rectangle,
    circle_with_circle,
)
from .dispatch import predicate_for, shapes_overlap

__all__ = [
    # Decomposition
    "sides_of",
    "any_sides_intersect",
    # Polygon pairs
    "segment_with_segment",
    "segment_with_triangle",
    "segment_with_rectangle",
    "triangle_with_triangle",
    "triangle_with_rectangle",
    "rectangle_with_rectangle",
    # Circle pairs
    "circle_with_segment",
    "circle_with_triangle",
    "circle_with_rectangle",
    "circle_with_circle",
    # Dispatch
    "predicate_for",
    "shapes_overlap",
]
