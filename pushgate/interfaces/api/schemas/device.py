"""Device schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class DeviceCreate(BaseModel):
    token: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Hex token reported by the device; spaces and angle brackets are ignored",
    )


class DeviceRead(BaseModel):
    id: int
    token: str
    created_at: datetime | None
    last_registered_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


__all__ = ["DeviceCreate", "DeviceRead"]
