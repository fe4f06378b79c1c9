# MIT License (see LICENSE)
"""
Geometric primitives shared by the overlap predicates.

This subpackage provides:
    - Orientation: turn classification and finite segment intersection.
    - Containment: point-in-rectangle and point-in-triangle tests.
    - Distance: line equation and point-to-line distance algebra.
"""
from .orientation import Orientation, orientation, on_segment_bounds, segments_intersect
from .containment import (
    point_in_rectangle,
    point_in_triangle,
    point_in_triangle_canonical,
    point_in_triangle_legacy,
)
from .distance import line_coefficients, point_line_distance, projection_length

__all__ = [
    # Orientation
    "Orientation",
    "orientation",
    "on_segment_bounds",
    "segments_intersect",
    # Containment
    "point_in_rectangle",
    "point_in_triangle",
    "point_in_triangle_canonical",
    "point_in_triangle_legacy",
    # Distance
    "line_coefficients",
    "point_line_distance",
    "projection_length",
]
