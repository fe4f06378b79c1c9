import json

import pytest
from shape_overlap.types import Point, LineSegment, Triangle, Rectangle, Circle
from shape_overlap.io.json_io import (
    load_shapes,
    save_shapes,
    shape_from_json,
    shape_to_json,
    point_from_json,
)


def test_shape_from_json_each_type():
    assert shape_from_json({"type": "segment", "a": [0, 0], "b": [1, 2]}) == \
        LineSegment(Point(0, 0), Point(1, 2))
    assert shape_from_json({"type": "triangle", "a": [0, 0], "b": [1, 0], "c": [0, 1]}) == \
        Triangle(Point(0, 0), Point(1, 0), Point(0, 1))
    assert shape_from_json({"type": "rectangle", "top_left": [1, 1], "width": 2, "height": 3}) == \
        Rectangle(Point(1, 1), 2, 3)
    assert shape_from_json({"type": "circle", "center": [0, 0], "radius": 0}) == \
        Circle(Point(0, 0), 0)


def test_shape_to_json():
    data = shape_to_json(Rectangle(Point(1, 1), 2, 3))
    assert data == {"type": "rectangle", "top_left": [1.0, 1.0], "width": 2.0, "height": 3.0}

    c = Circle(Point(1, 2), 0.5)
    assert shape_from_json(shape_to_json(c)) == c


@pytest.mark.parametrize("data", [
    {"a": [0, 0], "b": [1, 1]},
    {"type": "polygon", "vertices": [[0, 0], [1, 0], [0, 1]]},
    {"type": "segment", "a": [0, 0]},
    {"type": "segment", "a": [0, 0, 0], "b": [1, 1]},
    {"type": "segment", "a": ["x", 0], "b": [1, 1]},
    {"type": "circle", "center": [0, 0], "radius": -1},
    {"type": "circle", "center": [0, 0], "radius": None},
    {"type": "rectangle", "top_left": [0, 0], "width": 1, "height": -2},
    {"type": "rectangle", "top_left": [0, 0], "width": float("inf"), "height": 2},
    {"type": "circle", "center": [0, 0], "radius": float("inf")},
    {"type": "circle", "center": [0, 0], "radius": float("nan")},
    {"type": "triangle", "a": [0, float("nan")], "b": [1, 0], "c": [0, 1]},
])
def test_invalid_shape_definitions(data):
    with pytest.raises(ValueError):
        shape_from_json(data)


def test_point_from_json_error_names_field():
    with pytest.raises(ValueError, match="center"):
        point_from_json([1], "center")


def test_shape_to_json_unknown_type():
    with pytest.raises(TypeError):
        shape_to_json(Point(0, 0))


def test_save_and_load(tmp_path):
    shapes = [
        LineSegment(Point(0, 0), Point(1, 1)),
        Triangle(Point(0, 0), Point(10, 0), Point(0, 10)),
        Rectangle(Point(2, 2), 4, 4),
        Circle(Point(5, 5), 1.5),
    ]
    path = tmp_path / "shapes.json"
    save_shapes(shapes, str(path))

    raw = json.loads(path.read_text(encoding="utf-8"))
    assert [s["type"] for s in raw["shapes"]] == ["segment", "triangle", "rectangle", "circle"]

    assert load_shapes(str(path)) == shapes


def test_load_empty_document(tmp_path):
    path = tmp_path / "empty.json"
    path.write_text("{}", encoding="utf-8")
    assert load_shapes(str(path)) == []


def test_load_rejects_non_object_document(tmp_path):
    path = tmp_path / "list.json"
    path.write_text('[{"type": "circle", "center": [0, 0], "radius": 1}]', encoding="utf-8")
    with pytest.raises(ValueError, match="JSON object"):
        load_shapes(str(path))
