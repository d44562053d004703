"""Alert views created through a parameterized factory method.

``AlertView`` is both the product interface and the creator: callers ask it
for a view of a given type and only ever talk to the base interface.
"""

from enum import Enum
from typing import Dict, Type, Union

from patternplayground.domain.base.exceptions import ValidationError


class AlertViewType(str, Enum):
    """Supported alert styles."""
    DONE = "done"
    CONFIRM = "confirm"
    SHARE = "share"


class AlertView:
    """Base alert view and factory for its concrete styles."""

    @staticmethod
    def create_alert_view(alert_type: Union[AlertViewType, str]) -> "AlertView":
        """Create the alert view for the given type.

        Args:
            alert_type: Alert style, as an AlertViewType or its string value

        Returns:
            Concrete alert view instance

        Raises:
            ValidationError: If alert_type is not a known style
        """
        try:
            view_type = AlertViewType(alert_type)
        except ValueError as e:
            valid = [t.value for t in AlertViewType]
            raise ValidationError(
                f"Unknown alert type '{alert_type}'", {"valid_types": valid}
            ) from e
        return _ALERT_VIEWS[view_type]()

    def show(self) -> str:
        """Return the description of what this alert looks like."""
        return ""


class DoneAlertView(AlertView):
    """Alert with a single confirmation button."""

    def show(self) -> str:
        return "Completion alert with a single OK button."


class ConfirmAlertView(AlertView):
    """Alert asking the user to confirm or cancel."""

    def show(self) -> str:
        return "Confirmation alert with two buttons (OK and Cancel)."


class ShareAlertView(AlertView):
    """Alert offering share targets."""

    def show(self) -> str:
        return "Share sheet alert listing the available share targets."


_ALERT_VIEWS: Dict[AlertViewType, Type[AlertView]] = {
    AlertViewType.DONE: DoneAlertView,
    AlertViewType.CONFIRM: ConfirmAlertView,
    AlertViewType.SHARE: ShareAlertView,
}
