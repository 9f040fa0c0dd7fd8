"""Use case for queueing a notification for a registered device."""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from pushgate.domain.entities import Notification
from pushgate.infrastructure.gateway import EnhancedFrame, build_frame
from pushgate.infrastructure.repositories import DeviceRepository, NotificationRepository


class DeviceNotFoundError(LookupError):
    """Raised when a notification targets a device that is not registered."""


def create_notification(
    session: Session,
    *,
    device_id: int,
    alert: str | None = None,
    badge: int | None = None,
    sound: str | bool | None = None,
    custom_properties: dict[str, Any] | None = None,
) -> Notification:
    """Persist a pending notification addressed to ``device_id``.

    The notification is framed once before it is stored so that a record the
    gateway could never accept raises :class:`ExceededMessageSizeError` here
    instead of stalling later delivery passes.
    """

    if badge is not None and badge < 0:
        raise ValueError("Badge must be a non-negative integer")

    device = DeviceRepository(session).get(device_id)
    if device is None:
        raise DeviceNotFoundError(f"Device with id {device_id} not found")

    notification = Notification(
        id=None,
        device=device,
        alert=alert,
        badge=badge,
        sound=sound,
        custom_properties=custom_properties,
    )
    build_frame(notification, EnhancedFrame(identifier=0, expiry=0))
    return NotificationRepository(session).create(notification)


__all__ = ["DeviceNotFoundError", "create_notification"]
