"""Aggregate application use cases."""

from .devices import register_device
from .notifications import create_notification, deliver, send_notifications

__all__ = [
    "create_notification",
    "deliver",
    "register_device",
    "send_notifications",
]
