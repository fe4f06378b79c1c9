# MIT License (see LICENSE)
"""
Type-based dispatch over the pairwise overlap predicates.

`shapes_overlap` accepts any two supported shapes in either order and
forwards them to the matching predicate, swapping the arguments when the
table only holds the other order.
"""
from __future__ import annotations
import logging
from typing import Callable

from ..types import LineSegment, Triangle, Rectangle, Circle, Shape2D
from .polygon import (
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

logger = logging.getLogger(__name__)

_PREDICATES: dict[tuple[type, type], Callable[[Shape2D, Shape2D], bool]] = {
    (LineSegment, LineSegment): segment_with_segment,
    (LineSegment, Triangle): segment_with_triangle,
    (LineSegment, Rectangle): segment_with_rectangle,
    (Triangle, Triangle): triangle_with_triangle,
    (Triangle, Rectangle): triangle_with_rectangle,
    (Rectangle, Rectangle): rectangle_with_rectangle,
    (Circle, LineSegment): circle_with_segment,
    (Circle, Triangle): circle_with_triangle,
    (Circle, Rectangle): circle_with_rectangle,
    (Circle, Circle): circle_with_circle,
}


def predicate_for(a: Shape2D, b: Shape2D) -> tuple[Callable[[Shape2D, Shape2D], bool], bool]:
    """
    Look up the predicate for a shape pair.
    
    Returns:
        (predicate, swapped) where swapped tells whether the predicate
        expects the arguments as (b, a).
        
    Raises:
        TypeError: If either object is not a supported shape.
    """
    key = (type(a), type(b))
    if key in _PREDICATES:
        return _PREDICATES[key], False
    if key[::-1] in _PREDICATES:
        return _PREDICATES[key[::-1]], True
    raise TypeError(f"Unsupported shape pair: {type(a).__name__}, {type(b).__name__}")


def shapes_overlap(a: Shape2D, b: Shape2D) -> bool:
    """
    Unified overlap dispatcher.
    
    Args:
        a: First shape.
        b: Second shape.
        
    Returns:
        True if the shapes overlap. The result does not depend on
        argument order.
    """
    predicate, swapped = predicate_for(a, b)
    if swapped:
        logger.debug("Swapping %s/%s for %s", type(a).__name__, type(b).__name__, predicate.__name__)
        return predicate(b, a)
    return predicate(a, b)
