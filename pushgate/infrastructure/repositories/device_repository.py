"""Persistence layer for device data."""

from __future__ import annotations

from sqlalchemy.orm import Session

from pushgate.domain.entities import Device, normalize_device_token
from pushgate.infrastructure.models import DeviceModel
from pushgate.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class DeviceRepository:
    """Provide lookup and registration for device entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, device_id: int) -> Device | None:
        model = self.session.get(DeviceModel, device_id)
        return self._to_entity(model) if model else None

    def get_by_token(self, token: str) -> Device | None:
        model = (
            self.session.query(DeviceModel)
            .filter(DeviceModel.token == normalize_device_token(token))
            .first()
        )
        return self._to_entity(model) if model else None

    def register(self, token: str) -> Device:
        """Return the device for ``token``, creating it on first registration.

        Raises ``ValueError`` when ``token`` is not a hex string.
        """

        normalized = normalize_device_token(token)
        model = (
            self.session.query(DeviceModel)
            .filter(DeviceModel.token == normalized)
            .first()
        )
        if model is None:
            model = DeviceModel(token=normalized)
        model.last_registered_at = ensure_app_naive_datetime(now_in_app_timezone())
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: DeviceModel) -> Device:
        return Device(
            id=model.id,
            token=model.token,
            created_at=ensure_app_timezone(model.created_at),
            last_registered_at=ensure_app_timezone(model.last_registered_at),
        )


__all__ = ["DeviceRepository"]
