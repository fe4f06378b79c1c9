# MIT License (see LICENSE)
"""
Core type definitions for 2D overlap testing.

Defines the immutable shape values the predicates read:
- Point, LineSegment
- Triangle, Rectangle (both expose their boundary through `sides()`)
- Circle

Coordinates follow image conventions: x grows to the right and y grows
downward, so a rectangle's top edge has the smallest y.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol

import numpy as np


# =============================================================================
# Primitives
# =============================================================================

@dataclass(frozen=True)
class Point:
    """
    A point in the plane.
    
    Attributes:
        x: Horizontal coordinate.
        y: Vertical coordinate (grows downward).
    """
    x: float
    y: float

    def __post_init__(self) -> None:
        """Store coordinates as plain floats."""
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))


@dataclass(frozen=True)
class LineSegment:
    """
    Finite segment between two endpoints.
    
    `a == b` is allowed and gives a zero-length segment.
    """
    a: Point
    b: Point

    @property
    def length(self) -> float:
        """Euclidean length of the segment."""
        return float(np.hypot(self.a.x - self.b.x, self.a.y - self.b.y))


class HasSides(Protocol):
    """Protocol for shapes whose boundary is a closed chain of segments."""

    def sides(self) -> tuple[LineSegment, ...]:
        ...


# =============================================================================
# Shapes with sides
# =============================================================================

@dataclass(frozen=True)
class Triangle:
    """
    Triangle given by its three vertices.
    
    Vertices are expected to be non-collinear; nothing checks it.
    """
    a: Point
    b: Point
    c: Point

    def sides(self) -> tuple[LineSegment, ...]:
        """Edges AB, BC, CA."""
        return (
            LineSegment(self.a, self.b),
            LineSegment(self.b, self.c),
            LineSegment(self.c, self.a),
        )


@dataclass(frozen=True)
class Rectangle:
    """
    Axis-aligned rectangle anchored at its top-left corner.
    
    Attributes:
        top_left: Corner with the smallest x and y.
        width: Extent along +x. Assumed non-negative.
        height: Extent along +y (downward). Assumed non-negative.
    """
    top_left: Point
    width: float
    height: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", float(self.width))
        object.__setattr__(self, "height", float(self.height))

    @property
    def left(self) -> float:
        return self.top_left.x

    @property
    def top(self) -> float:
        return self.top_left.y

    @property
    def right(self) -> float:
        return self.top_left.x + self.width

    @property
    def bottom(self) -> float:
        return self.top_left.y + self.height

    @property
    def top_right(self) -> Point:
        return Point(self.right, self.top)

    @property
    def bottom_right(self) -> Point:
        return Point(self.right, self.bottom)

    @property
    def bottom_left(self) -> Point:
        return Point(self.left, self.bottom)

    def sides(self) -> tuple[LineSegment, ...]:
        """Top, right, bottom and left edges, in that order."""
        tl, tr = self.top_left, self.top_right
        br, bl = self.bottom_right, self.bottom_left
        return (
            LineSegment(tl, tr),
            LineSegment(tr, br),
            LineSegment(br, bl),
            LineSegment(bl, tl),
        )


# =============================================================================
# Circle
# =============================================================================

@dataclass(frozen=True)
class Circle:
    """
    Circle defined by center and radius.
    
    Attributes:
        center: Center point.
        radius: Distance from center to edge. Assumed non-negative.
    """
    center: Point
    radius: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "radius", float(self.radius))


# Union type for shape dispatch
Shape2D = LineSegment | Triangle | Rectangle | Circle
