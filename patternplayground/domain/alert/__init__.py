"""Alert views - a parameterized factory method example."""

from .alert_views import (
    AlertView,
    AlertViewType,
    ConfirmAlertView,
    DoneAlertView,
    ShareAlertView,
)

__all__ = [
    "AlertView",
    "AlertViewType",
    "DoneAlertView",
    "ConfirmAlertView",
    "ShareAlertView",
]
