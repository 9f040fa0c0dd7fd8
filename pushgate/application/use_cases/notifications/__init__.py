"""Use cases for queueing and delivering push notifications."""

from .create_notification import DeviceNotFoundError, create_notification
from .deliver import ConnectionFactory, DeliveryReport, deliver, send_notifications

__all__ = [
    "ConnectionFactory",
    "DeliveryReport",
    "DeviceNotFoundError",
    "create_notification",
    "deliver",
    "send_notifications",
]
