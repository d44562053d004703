"""Geometry value objects."""

from patternplayground.domain.base.entity import ValueObject


class Point(ValueObject):
    x: float = 0.0
    y: float = 0.0


class Size(ValueObject):
    width: float = 0.0
    height: float = 0.0


class BoundingBox(ValueObject):
    """Axis-aligned box given by its bottom-left and top-right corners."""

    bottom_left: Point = Point()
    top_right: Point = Point()
