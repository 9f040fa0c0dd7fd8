"""Domain entity representing a push notification."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from .device import Device

ALERT_MAX_LENGTH = 150
ALERT_OMISSION = "..."


def truncate_alert(message: str | None) -> str | None:
    """Cut ``message`` down to :data:`ALERT_MAX_LENGTH` characters.

    The result of truncating ends with :data:`ALERT_OMISSION` and is exactly
    ``ALERT_MAX_LENGTH`` characters long. Shorter messages are returned as is.
    """

    if not message or len(message) <= ALERT_MAX_LENGTH:
        return message
    return message[: ALERT_MAX_LENGTH - len(ALERT_OMISSION)] + ALERT_OMISSION


@dataclass
class Notification:
    """Message queued for delivery to a single device.

    ``alert`` is truncated whenever it is assigned, including at construction.
    ``sent_at`` stays ``None`` until the frame has been written to the gateway.
    """

    id: int | None
    device: Device
    alert: str | None = None
    badge: int | None = None
    sound: str | bool | None = None
    custom_properties: dict[str, Any] | None = None
    sent_at: datetime | None = None
    error_code: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    device_id: int | None = field(default=None)

    def __post_init__(self) -> None:
        if self.device_id is None:
            self.device_id = self.device.id

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "alert":
            value = truncate_alert(value)
        super().__setattr__(name, value)

    @property
    def is_sent(self) -> bool:
        return self.sent_at is not None


__all__ = ["ALERT_MAX_LENGTH", "ALERT_OMISSION", "Notification", "truncate_alert"]
