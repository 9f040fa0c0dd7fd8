"""ORM models used by the application infrastructure."""

from .device import DeviceModel
from .notification import NotificationModel

__all__ = [
    "DeviceModel",
    "NotificationModel",
]
