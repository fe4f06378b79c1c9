import pytest
from shape_overlap.types import Point, LineSegment, Triangle, Rectangle
from shape_overlap.overlap.polygon import (
    sides_of,
    any_sides_intersect,
    segment_with_segment,
    segment_with_triangle,
    segment_with_rectangle,
    triangle_with_triangle,
    triangle_with_rectangle,
    rectangle_with_rectangle,
)


def tri(*coords):
    pts = [Point(coords[i], coords[i + 1]) for i in range(0, 6, 2)]
    return Triangle(*pts)


def rect(x, y, w, h):
    return Rectangle(Point(x, y), w, h)


def seg(ax, ay, bx, by):
    return LineSegment(Point(ax, ay), Point(bx, by))


OUTER = tri(0, 0, 10, 0, 0, 10)
INNER = tri(1, 1, 2, 1, 1, 2)
BOX = rect(0, 0, 4, 4)


def test_sides_of_segment_is_single_side():
    s = seg(0, 0, 1, 1)
    assert sides_of(s) == (s,)
    assert len(sides_of(BOX)) == 4
    assert len(sides_of(OUTER)) == 3


def test_any_sides_intersect():
    assert any_sides_intersect(seg(-1, 2, 5, 2), BOX)
    assert any_sides_intersect(BOX, seg(-1, 2, 5, 2))
    assert not any_sides_intersect(OUTER, INNER)


def test_segment_with_segment():
    assert segment_with_segment(seg(0, 0, 2, 2), seg(0, 2, 2, 0))
    assert not segment_with_segment(seg(0, 0, 1, 0), seg(0, 1, 1, 1))


def test_segment_with_triangle():
    # crosses edge BC at (9, 1)
    assert segment_with_triangle(seg(1, 1, 20, 1), OUTER)
    # touches vertex B
    assert segment_with_triangle(seg(10, 0, 15, -5), OUTER)
    assert not segment_with_triangle(seg(20, 20, 30, 30), OUTER)


def test_segment_inside_triangle_is_not_reported():
    """Only boundary crossings count for segments."""
    assert not segment_with_triangle(seg(1, 1, 2, 1), OUTER)


def test_segment_with_rectangle():
    assert segment_with_rectangle(seg(-1, 2, 5, 2), BOX)
    # lies along the top edge
    assert segment_with_rectangle(seg(1, 0, 3, 0), BOX)
    # on the diagonal's line but past the corner
    assert not segment_with_rectangle(seg(5, 5, 6, 6), BOX)
    # fully inside
    assert not segment_with_rectangle(seg(1, 1, 2, 2), BOX)


def test_nested_triangle_found_by_containment():
    """No edges cross, so only the containment branch can find the overlap."""
    assert not any_sides_intersect(OUTER, INNER)
    assert triangle_with_triangle(OUTER, INNER, "canonical")
    assert triangle_with_triangle(INNER, OUTER, "canonical")


def test_nested_triangle_with_legacy_test():
    assert not triangle_with_triangle(OUTER, INNER, "legacy")
    assert not triangle_with_triangle(INNER, OUTER, "legacy")


@pytest.mark.parametrize("t1, t2, expected", [
    (tri(0, 0, 4, 0, 0, 4), tri(1, 1, 5, 1, 1, 5), True),
    (tri(0, 0, 1, 0, 0, 1), tri(5, 5, 6, 5, 5, 6), False),
    # shared vertex only
    (tri(0, 0, 1, 0, 0, 1), tri(1, 0, 2, 0, 2, 1), True),
    # identical
    (OUTER, OUTER, True),
])
def test_triangle_with_triangle_symmetric(t1, t2, expected):
    assert triangle_with_triangle(t1, t2, "canonical") is expected
    assert triangle_with_triangle(t2, t1, "canonical") is expected


def test_triangle_with_rectangle():
    # edges cross
    assert triangle_with_rectangle(tri(2, 2, 8, 2, 2, 8), BOX, "canonical")
    # triangle inside rectangle
    assert triangle_with_rectangle(INNER, rect(0, 0, 10, 10), "canonical")
    # rectangle inside triangle
    assert triangle_with_rectangle(OUTER, rect(1, 1, 1, 1), "canonical")
    assert not triangle_with_rectangle(tri(20, 20, 21, 20, 20, 21), BOX, "canonical")


def test_rectangle_with_rectangle_end_to_end():
    assert rectangle_with_rectangle(rect(0, 0, 4, 4), rect(2, 2, 4, 4))
    assert not rectangle_with_rectangle(rect(0, 0, 4, 4), rect(10, 10, 4, 4))


@pytest.mark.parametrize("r1, r2, expected", [
    (BOX, BOX, True),
    # nested
    (BOX, rect(1, 1, 1, 1), True),
    # shared edge
    (BOX, rect(4, 0, 4, 4), True),
    # shared corner
    (BOX, rect(4, 4, 1, 1), True),
    # cross shape, no corner inside the other
    (rect(0, 2, 10, 2), rect(4, 0, 2, 10), True),
    (BOX, rect(5, 0, 1, 1), False),
])
def test_rectangle_with_rectangle_symmetric(r1, r2, expected):
    assert rectangle_with_rectangle(r1, r2) is expected
    assert rectangle_with_rectangle(r2, r1) is expected


def test_zero_size_rectangle():
    """A collapsed rectangle still exposes its (degenerate) sides."""
    dot = rect(2, 2, 0, 0)
    line = rect(-1, 2, 6, 0)
    assert rectangle_with_rectangle(BOX, dot)
    assert not rectangle_with_rectangle(BOX, rect(10, 10, 0, 0))
    assert rectangle_with_rectangle(BOX, line)
    assert segment_with_rectangle(seg(2, 0, 2, 5), dot)


def test_triangle_predicates_default_to_canonical_containment():
    assert triangle_with_triangle(OUTER, INNER)
    assert triangle_with_triangle(INNER, OUTER)
    assert triangle_with_rectangle(OUTER, rect(1, 1, 1, 1))
    assert not triangle_with_rectangle(OUTER, rect(1, 1, 1, 1), "legacy")
