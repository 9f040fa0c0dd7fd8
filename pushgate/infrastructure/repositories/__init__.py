"""Repository implementations for infrastructure layer."""

from .device_repository import DeviceRepository
from .notification_repository import NotificationRepository

__all__ = [
    "DeviceRepository",
    "NotificationRepository",
]
