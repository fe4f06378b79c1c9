# MIT License (see LICENSE)
"""
Overlap predicates for segments, triangles and rectangles.

Every predicate here decomposes the shapes into boundary sides and tests
the sides pairwise with `segments_intersect`. Pairs of shapes that have
an interior add a containment check on one reference point per shape, so
a shape lying entirely inside the other is still reported.

Segments have no interior: a segment fully inside a triangle or
rectangle, touching no edge, is not reported as overlapping.
"""
from __future__ import annotations

from ..types import LineSegment, Triangle, Rectangle, HasSides
from ..geometry.orientation import segments_intersect
from ..geometry.containment import point_in_rectangle, point_in_triangle


def sides_of(shape: HasSides | LineSegment) -> tuple[LineSegment, ...]:
    """Boundary sides of a shape. A segment is its own single side."""
    if isinstance(shape, LineSegment):
        return (shape,)
    return tuple(shape.sides())


def any_sides_intersect(shape_a: HasSides | LineSegment, shape_b: HasSides | LineSegment) -> bool:
    """
    Test every side of shape_a against every side of shape_b.
    
    Returns:
        True on the first intersecting pair, False if none intersect.
    """
    sides_b = sides_of(shape_b)
    for side_a in sides_of(shape_a):
        for side_b in sides_b:
            if segments_intersect(side_a, side_b):
                return True
    return False


def segment_with_segment(s1: LineSegment, s2: LineSegment) -> bool:
    """Segments cross or touch."""
    return segments_intersect(s1, s2)


def segment_with_triangle(segment: LineSegment, triangle: Triangle) -> bool:
    """Segment crosses or touches a triangle edge."""
    return any_sides_intersect(segment, triangle)


def segment_with_rectangle(segment: LineSegment, rectangle: Rectangle) -> bool:
    """Segment crosses or touches a rectangle edge."""
    return any_sides_intersect(segment, rectangle)


def triangle_with_triangle(t1: Triangle, t2: Triangle, variant: str = "canonical") -> bool:
    """
    Triangles overlap: edges cross, or either one holds the other's first vertex.
    
    Args:
        t1: First triangle.
        t2: Second triangle.
        variant: Point-in-triangle variant, see `point_in_triangle`.
    """
    if any_sides_intersect(t1, t2):
        return True

    if point_in_triangle(t2.a, t1, variant):
        return True

    return point_in_triangle(t1.a, t2, variant)


def triangle_with_rectangle(triangle: Triangle, rectangle: Rectangle, variant: str = "canonical") -> bool:
    """
    Triangle and rectangle overlap.
    
    Edges cross, or the triangle's first vertex is strictly inside the
    rectangle, or the rectangle's top-left corner is inside the triangle.
    """
    if any_sides_intersect(triangle, rectangle):
        return True

    if point_in_rectangle(triangle.a, rectangle):
        return True

    return point_in_triangle(rectangle.top_left, triangle, variant)


def rectangle_with_rectangle(r1: Rectangle, r2: Rectangle) -> bool:
    """Rectangles overlap: edges cross, or either top-left corner is strictly inside the other."""
    if any_sides_intersect(r1, r2):
        return True

    if point_in_rectangle(r1.top_left, r2):
        return True

    return point_in_rectangle(r2.top_left, r1)
