# MIT License (see LICENSE)
"""
Overlap predicates involving circles.

Circles are never decomposed into segments. Their tests use the center
and radius directly:
- Circle-segment: endpoint distance, then perpendicular distance to the
  segment's line plus a projection check that keeps the closest point on
  the segment rather than on the infinite line.
- Circle-triangle / circle-rectangle: circle-segment on every side.
- Circle-circle: center distance against the radius sum.

Touching counts as overlap throughout.
"""
from __future__ import annotations
import logging

from ..types import Circle, LineSegment, Triangle, Rectangle
from ..geometry.distance import point_line_distance, projection_length
from ..util import distance

logger = logging.getLogger(__name__)


def circle_with_segment(circle: Circle, segment: LineSegment) -> bool:
    """
    Detect overlap between a circle and a finite segment.
    
    Args:
        circle: The circle.
        segment: The segment.
        
    Returns:
        True if some point of the segment is within the radius of the center.
        
    Note:
        The projection of the farthest endpoint onto the line is compared to
        the segment length. If it fits, the foot of the perpendicular lies on
        the segment. The projection radicand is clamped at zero, see
        `projection_length`.
    """
    center = circle.center
    dist_a = distance(segment.a, center)
    dist_b = distance(segment.b, center)

    if dist_a <= circle.radius or dist_b <= circle.radius:
        return True

    perpendicular = point_line_distance(center, segment)
    if perpendicular is None:
        # Zero-length segment: a single point already outside the radius
        logger.debug("Zero-length segment at (%r, %r) outside circle", segment.a.x, segment.a.y)
        return False

    farthest = max(dist_a, dist_b)
    projection = projection_length(farthest, perpendicular)

    return perpendicular <= circle.radius and projection <= segment.length


def _circle_with_sides(circle: Circle, shape: Triangle | Rectangle) -> bool:
    for side in shape.sides():
        if circle_with_segment(circle, side):
            return True
    return False


def circle_with_triangle(circle: Circle, triangle: Triangle) -> bool:
    """
    Circle reaches at least one triangle edge.
    
    A circle strictly inside the triangle that touches no edge is not reported.
    """
    return _circle_with_sides(circle, triangle)


def circle_with_rectangle(circle: Circle, rectangle: Rectangle) -> bool:
    """
    Circle reaches at least one rectangle edge.
    
    A circle strictly inside the rectangle that touches no edge is not reported.
    """
    return _circle_with_sides(circle, rectangle)


def circle_with_circle(c1: Circle, c2: Circle) -> bool:
    """Center distance is at most the sum of the radii."""
    return distance(c1.center, c2.center) <= c1.radius + c2.radius
