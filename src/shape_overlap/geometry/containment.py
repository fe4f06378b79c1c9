# MIT License (see LICENSE)
"""
Point containment tests for rectangles and triangles.

The two tests treat the boundary differently on purpose:
- point_in_rectangle is strict, a point on an edge is outside.
- point_in_triangle is inclusive, a point on an edge is inside.

Polygon pair predicates use these to catch full containment, where one
shape sits inside the other and no boundaries cross.
"""
from __future__ import annotations

from ..types import Point, Rectangle, Triangle


def point_in_rectangle(p: Point, r: Rectangle) -> bool:
    """True iff p lies strictly inside the open rectangle."""
    return r.left < p.x < r.right and r.top < p.y < r.bottom


def _sign(p1: Point, p2: Point, p3: Point) -> float:
    """Signed double area of triangle (p1, p2, p3), relative to p3."""
    return (p1.x - p3.x) * (p2.y - p3.y) - (p2.x - p3.x) * (p1.y - p3.y)


def _mixed_signs(d1: float, d2: float, d3: float) -> bool:
    """True if the values include both a strictly negative and a strictly positive one."""
    has_negative = d1 < 0 or d2 < 0 or d3 < 0
    has_positive = d1 > 0 or d2 > 0 or d3 > 0
    return has_negative and has_positive


def point_in_triangle_canonical(p: Point, t: Triangle) -> bool:
    """
    Barycentric sign test over edges AB, BC, CA.
    
    Points on an edge or vertex count as inside.
    """
    d1 = _sign(p, t.a, t.b)
    d2 = _sign(p, t.b, t.c)
    d3 = _sign(p, t.c, t.a)
    return not _mixed_signs(d1, d2, d3)


def point_in_triangle_legacy(p: Point, t: Triangle) -> bool:
    """
    Sign test using the (p,A,B), (p,A,C), (p,C,A) orderings.
    
    Matches the detector this package replaces, result for result. The last
    two terms are negatives of each other, so only points on the line
    through A and C can be reported inside.
    """
    d1 = _sign(p, t.a, t.b)
    d2 = _sign(p, t.a, t.c)
    d3 = _sign(p, t.c, t.a)
    return not _mixed_signs(d1, d2, d3)


def point_in_triangle(p: Point, t: Triangle, variant: str = "canonical") -> bool:
    """
    True iff p lies inside the triangle or on its boundary.
    
    Args:
        p: Point to test.
        t: Triangle to test against.
        variant: "canonical" (edges AB, BC, CA) or "legacy".
                 
    Raises:
        ValueError: If the variant name is unknown.
    """
    if variant == "canonical":
        return point_in_triangle_canonical(p, t)
    if variant == "legacy":
        return point_in_triangle_legacy(p, t)
    raise ValueError(f"Unknown point-in-triangle variant: '{variant}'")
