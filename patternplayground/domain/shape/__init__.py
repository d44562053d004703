"""Shapes - an object adapter example."""

from .text_shape import Manipulator, Shape, TextShape, TextView
from .value_objects import BoundingBox, Point, Size

__all__ = [
    "Point",
    "Size",
    "BoundingBox",
    "Manipulator",
    "Shape",
    "TextView",
    "TextShape",
]
