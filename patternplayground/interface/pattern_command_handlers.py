"""Command handlers for the alert view and text shape examples."""
from typing import Any, Dict

from patternplayground.domain.alert import AlertView
from patternplayground.domain.shape import Point, Size, TextShape, TextView
from patternplayground.interface.base_handler import CLICommandHandler


class ShowAlertCLIHandler(CLICommandHandler):
    """Handler for ``alerts show``."""

    def handle(self, command) -> Dict[str, Any]:
        view = AlertView.create_alert_view(command.alert_type)
        return {
            "alert_type": command.alert_type,
            "view": type(view).__name__,
            "rendered": view.show(),
        }


class ShapeBoundingBoxCLIHandler(CLICommandHandler):
    """Handler for ``shapes bbox``: adapts a text view and reports its bounding box."""

    def handle(self, command) -> Dict[str, Any]:
        text_view = TextView(
            origin=Point(x=self._arg(command, "x", 0.0), y=self._arg(command, "y", 0.0)),
            extent=Size(
                width=self._arg(command, "width", 0.0),
                height=self._arg(command, "height", 0.0),
            ),
            text=self._arg(command, "text", ""),
        )
        shape = TextShape(text_view)
        box = shape.bounding_box()
        return {
            "shape": "TextShape",
            "bounding_box": box.model_dump(),
            "is_empty": shape.is_empty(),
            "manipulator": shape.create_manipulator().shape_name,
        }
