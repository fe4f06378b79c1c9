# MIT License (see LICENSE)
"""
Orientation test and finite segment intersection.

Every polygon overlap decision in this package ends up here: boundaries
are split into segments and the segments are tested pairwise with
`segments_intersect`.

Key concepts:
- Orientation: the sign of the 2D cross product of (b - a) and (c - b).
  Only equality between two orientations is ever used, so the names of
  the two turning classes carry no meaning beyond being distinct.
- Collinear fallback: when an endpoint is collinear with the other
  segment, a bounding-box check decides whether it actually lies on it.
"""
from __future__ import annotations
from enum import Enum

from ..types import Point, LineSegment


class Orientation(Enum):
    """Turn classification of three ordered points."""
    COLLINEAR = 0
    CLOCKWISE = 1
    COUNTERCLOCKWISE = 2


def orientation(a: Point, b: Point, c: Point) -> Orientation:
    """
    Classify the turn from a→b to b→c.
    
    Value = (b.y - a.y)(c.x - b.x) - (b.x - a.x)(c.y - b.y). Exactly zero is
    COLLINEAR; positive is CLOCKWISE and negative COUNTERCLOCKWISE when y
    points up (the labels swap in image coordinates, which does not matter).
    """
    value = (b.y - a.y) * (c.x - b.x) - (b.x - a.x) * (c.y - b.y)

    if value == 0:
        return Orientation.COLLINEAR
    return Orientation.CLOCKWISE if value > 0 else Orientation.COUNTERCLOCKWISE


def on_segment_bounds(p: Point, q: Point, r: Point) -> bool:
    """
    Check whether q lies in the closed bounding box spanned by p and r.
    
    Equivalent to "q lies on segment pr" only when p, q, r are collinear.
    """
    return (
        min(p.x, r.x) <= q.x <= max(p.x, r.x)
        and min(p.y, r.y) <= q.y <= max(p.y, r.y)
    )


def segments_intersect(s1: LineSegment, s2: LineSegment) -> bool:
    """
    Test whether two finite segments cross or touch.
    
    Args:
        s1: First segment.
        s2: Second segment.
        
    Returns:
        True if the segments share at least one point. Touching endpoints
        and collinear overlap count as intersecting.
    """
    d1 = orientation(s1.a, s1.b, s2.a)
    d2 = orientation(s1.a, s1.b, s2.b)
    d3 = orientation(s2.a, s2.b, s1.a)
    d4 = orientation(s2.a, s2.b, s1.b)

    # General case: each segment straddles the other's line
    if d1 != d2 and d3 != d4:
        return True

    # Collinear endpoint lying within the other segment
    collinear = Orientation.COLLINEAR
    return (
        (d1 == collinear and on_segment_bounds(s1.a, s2.a, s1.b))
        or (d2 == collinear and on_segment_bounds(s1.a, s2.b, s1.b))
        or (d3 == collinear and on_segment_bounds(s2.a, s1.a, s2.b))
        or (d4 == collinear and on_segment_bounds(s2.a, s1.b, s2.b))
    )
