# MIT License (see LICENSE)
"""
Closed-form distance algebra used by the circle predicates.

Distances are computed directly from the line equation a·x + b·y + c = 0
through two points and from the Pythagorean relation between a point's
distance to an endpoint and its distance to the line.
"""
from __future__ import annotations
import logging

import numpy as np

from ..types import Point, LineSegment

logger = logging.getLogger(__name__)


def line_coefficients(segment: LineSegment) -> tuple[float, float, float]:
    """
    Coefficients (a, b, c) of the line a·x + b·y + c = 0 through the segment.
    
    a = A.y - B.y, b = B.x - A.x, c = A.x·B.y - B.x·A.y. All three are zero
    for a zero-length segment.
    """
    pa, pb = segment.a, segment.b
    a = pa.y - pb.y
    b = pb.x - pa.x
    c = pa.x * pb.y - pb.x * pa.y
    return a, b, c


def point_line_distance(p: Point, segment: LineSegment) -> float | None:
    """
    Perpendicular distance from p to the infinite line through the segment.
    
    Returns:
        The distance, or None when the segment has zero length and so does
        not define a line.
    """
    a, b, c = line_coefficients(segment)
    denom = float(np.hypot(a, b))
    if denom == 0.0:
        return None
    return abs(a * p.x + b * p.y + c) / denom


def projection_length(hypotenuse: float, leg: float) -> float:
    """
    Length of the remaining leg of a right triangle: sqrt(hypotenuse² - leg²).
    
    Rounding can make leg slightly larger than hypotenuse. The radicand is
    clamped to zero in that case, so the result is never NaN.
    """
    radicand = hypotenuse * hypotenuse - leg * leg
    if radicand < 0.0:
        logger.debug(
            "Clamping negative radicand %.3e (hypotenuse=%r, leg=%r)",
            radicand, hypotenuse, leg,
        )
        radicand = 0.0
    return float(np.sqrt(radicand))
