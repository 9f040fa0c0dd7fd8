"""Pydantic models describing push notifications and delivery results."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NotificationCreate(BaseModel):
    """Payload used to queue a notification for a device."""

    device_id: int = Field(..., ge=1)
    alert: str | None = Field(default=None, description="Alert text; truncated to 150 characters")
    badge: int | None = Field(default=None, ge=0)
    sound: str | bool | None = Field(
        default=None, description="Sound file name, or true for the default sound"
    )
    custom_properties: dict[str, Any] | None = None

    model_config = ConfigDict(extra="forbid")


class NotificationRead(BaseModel):
    """Representation of a stored notification."""

    id: int
    device_id: int
    alert: str | None = None
    badge: int | None = None
    sound: str | bool | None = None
    custom_properties: dict[str, Any] | None = None
    sent_at: datetime | None = None
    error_code: int | None = None
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class DeliveryFailureRead(BaseModel):
    id: int | None
    error_code: int | None = None


class DeliveryReportRead(BaseModel):
    """Summary of one delivery pass."""

    sent: list[int | None] = Field(default_factory=list)
    failed: list[DeliveryFailureRead] = Field(default_factory=list)
    oversized: list[int | None] = Field(default_factory=list)
    total: int = 0


__all__ = [
    "DeliveryFailureRead",
    "DeliveryReportRead",
    "NotificationCreate",
    "NotificationRead",
]
