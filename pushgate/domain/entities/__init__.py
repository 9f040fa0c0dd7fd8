"""Domain entities exposed by the application."""

from .device import Device, normalize_device_token
from .notification import (
    ALERT_MAX_LENGTH,
    ALERT_OMISSION,
    Notification,
    truncate_alert,
)

__all__ = [
    "ALERT_MAX_LENGTH",
    "ALERT_OMISSION",
    "Device",
    "Notification",
    "normalize_device_token",
    "truncate_alert",
]
