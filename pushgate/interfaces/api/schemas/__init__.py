from .device import DeviceCreate, DeviceRead
from .notification import (
    DeliveryFailureRead,
    DeliveryReportRead,
    NotificationCreate,
    NotificationRead,
)

__all__ = [
    "DeliveryFailureRead",
    "DeliveryReportRead",
    "DeviceCreate",
    "DeviceRead",
    "NotificationCreate",
    "NotificationRead",
]
