"""Text shape - adapts a TextView to the Shape interface.

TextView has an incompatible interface (origin + extent). TextShape is an
object adapter: it holds a TextView and translates Shape requests into
TextView calls.
"""

from abc import ABC

from pydantic import Field

from patternplayground.domain.base.entity import DomainModel, ValueObject
from patternplayground.domain.shape.value_objects import BoundingBox, Point, Size


class Manipulator(ValueObject):
    """Handle used to drag or resize a shape."""

    shape_name: str


class Shape(ABC):
    """Graphical shape interface. Defaults describe an empty shape at the origin."""

    def bounding_box(self) -> BoundingBox:
        return BoundingBox()

    def create_manipulator(self) -> Manipulator:
        return Manipulator(shape_name=type(self).__name__)


class TextView(DomainModel):
    """Text widget with its own notion of geometry."""

    origin: Point = Field(default_factory=lambda: Point(x=10, y=10))
    extent: Size = Field(default_factory=lambda: Size(width=10, height=10))
    text: str = ""

    def get_origin(self) -> Point:
        return self.origin

    def get_extent(self) -> Size:
        return self.extent

    def is_empty(self) -> bool:
        return not self.text


class TextShape(Shape):
    """Shape backed by a TextView."""

    def __init__(self, text_view: TextView):
        self.text_view = text_view

    def bounding_box(self) -> BoundingBox:
        origin = self.text_view.get_origin()
        extent = self.text_view.get_extent()
        return BoundingBox(
            bottom_left=Point(x=origin.x, y=origin.y),
            top_right=Point(x=origin.x + extent.width, y=origin.y + extent.height),
        )

    def create_manipulator(self) -> Manipulator:
        return Manipulator(shape_name="TextShape")

    def is_empty(self) -> bool:
        return self.text_view.is_empty()
