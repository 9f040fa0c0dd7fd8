"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from pushgate.domain.entities import Notification
from pushgate.infrastructure.models import NotificationModel
from pushgate.utils import ensure_app_naive_datetime, ensure_app_timezone

from .device_repository import DeviceRepository


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, notification_id: int) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        return self._to_entity(model) if model else None

    def list(
        self,
        *,
        pending: bool | None = None,
        limit: int | None = 100,
    ) -> Sequence[Notification]:
        query = self.session.query(NotificationModel)
        if pending is True:
            query = query.filter(NotificationModel.sent_at.is_(None))
        elif pending is False:
            query = query.filter(NotificationModel.sent_at.is_not(None))
        query = query.order_by(NotificationModel.id.asc())
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def list_unsent(self) -> Sequence[Notification]:
        """Return every notification that has not been written to the gateway."""

        return self.list(pending=True, limit=None)

    def create(self, notification: Notification) -> Notification:
        if notification.device_id is None:
            raise ValueError("Notification requires a persisted device")
        model = NotificationModel(device_id=notification.device_id)
        self._apply_entity_to_model(model, notification)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, notification: Notification) -> Notification:
        if notification.id is None:
            raise ValueError("Notification id is required for updates")
        model = self.session.get(NotificationModel, notification.id)
        if model is None:
            msg = f"Notification with id {notification.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, notification)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _apply_entity_to_model(
        model: NotificationModel, notification: Notification
    ) -> None:
        model.alert = notification.alert
        model.badge = notification.badge
        model.sound = notification.sound
        model.custom_properties = (
            dict(notification.custom_properties)
            if notification.custom_properties is not None
            else None
        )
        model.sent_at = ensure_app_naive_datetime(notification.sent_at)
        model.error_code = notification.error_code

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            device=DeviceRepository._to_entity(model.device),
            alert=model.alert,
            badge=model.badge,
            sound=model.sound,
            custom_properties=model.custom_properties,
            sent_at=ensure_app_timezone(model.sent_at),
            error_code=model.error_code,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
            device_id=model.device_id,
        )


__all__ = ["NotificationRepository"]
