# examples/detection_pairs.py
import logging

from shape_overlap import Point, LineSegment, Triangle, Rectangle, Circle, shapes_overlap

logging.basicConfig(level=logging.DEBUG)

regions = [
    Rectangle(Point(0, 0), 4, 4),
    Rectangle(Point(2, 2), 4, 4),
    Triangle(Point(10, 0), Point(20, 0), Point(10, 10)),
    Circle(Point(12, 2), 1.0),
    LineSegment(Point(-5, 1), Point(1, 1)),
]

for i in range(len(regions)):
    for j in range(i + 1, len(regions)):
        a, b = regions[i], regions[j]
        print(f"{type(a).__name__}[{i}] x {type(b).__name__}[{j}]:", shapes_overlap(a, b))
