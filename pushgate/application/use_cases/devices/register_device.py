"""Use case for registering the token reported by a device."""

from sqlalchemy.orm import Session

from pushgate.domain.entities import Device
from pushgate.infrastructure.repositories import DeviceRepository


def register_device(session: Session, token: str) -> Device:
    """Return the device owning ``token``, creating it when it is new."""

    return DeviceRepository(session).register(token)


def get_device(session: Session, device_id: int) -> Device | None:
    return DeviceRepository(session).get(device_id)
