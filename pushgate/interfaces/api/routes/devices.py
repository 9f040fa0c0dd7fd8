"""Routes for registering devices that receive push notifications."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from pushgate.application.use_cases.devices import get_device, register_device
from pushgate.domain.entities import Device
from pushgate.infrastructure.database import get_db
from pushgate.interfaces.api.schemas import DeviceCreate, DeviceRead

router = APIRouter(prefix="/devices", tags=["devices"])
logger = logging.getLogger(__name__)


def _to_read_model(device: Device) -> DeviceRead:
    return DeviceRead.model_validate(device)


@router.post("/", response_model=DeviceRead, status_code=status.HTTP_201_CREATED)
def create_device(device_in: DeviceCreate, db: Session = Depends(get_db)):
    """Register a device token; registering a known token refreshes it."""

    try:
        device = register_device(db, device_in.token)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    logger.info("Registered device %s", device.id)
    return _to_read_model(device)


@router.get("/{device_id}", response_model=DeviceRead)
def read_device(device_id: int, db: Session = Depends(get_db)):
    device = get_device(db, device_id)
    if device is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Device not found")
    return _to_read_model(device)
