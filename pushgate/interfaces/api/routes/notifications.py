"""Endpoints for queueing notifications and triggering a delivery pass."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from pushgate.application.use_cases.notifications import (
    ConnectionFactory,
    DeliveryReport,
    DeviceNotFoundError,
    create_notification,
    send_notifications,
)
from pushgate.domain.entities import Notification
from pushgate.domain.exceptions import ExceededMessageSizeError, GatewayConfigurationError
from pushgate.infrastructure.database import get_db
from pushgate.infrastructure.gateway import build_payload
from pushgate.infrastructure.repositories import NotificationRepository
from pushgate.interfaces.api.dependencies import get_connection_factory
from pushgate.interfaces.api.schemas import (
    DeliveryFailureRead,
    DeliveryReportRead,
    NotificationCreate,
    NotificationRead,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead.model_validate(notification)


def _report_to_schema(report: DeliveryReport) -> DeliveryReportRead:
    return DeliveryReportRead(
        sent=list(report.sent),
        failed=[
            DeliveryFailureRead(id=notification_id, error_code=error_code)
            for notification_id, error_code in report.failed.items()
        ],
        oversized=list(report.oversized),
        total=report.total,
    )


@router.post("/", response_model=NotificationRead, status_code=status.HTTP_201_CREATED)
def queue_notification(
    notification_in: NotificationCreate, db: Session = Depends(get_db)
) -> NotificationRead:
    """Store a notification so the next delivery pass sends it."""

    try:
        notification = create_notification(
            db,
            device_id=notification_in.device_id,
            alert=notification_in.alert,
            badge=notification_in.badge,
            sound=notification_in.sound,
            custom_properties=notification_in.custom_properties,
        )
    except DeviceNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ExceededMessageSizeError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return _notification_to_schema(notification)


@router.get("/", response_model=list[NotificationRead])
def list_notifications(
    pending: bool | None = Query(
        None, description="true for unsent notifications, false for sent ones"
    ),
    limit: int = Query(100, ge=1, le=1000),
    db: Session = Depends(get_db),
) -> list[NotificationRead]:
    notifications = NotificationRepository(db).list(pending=pending, limit=limit)
    return [_notification_to_schema(notification) for notification in notifications]


@router.get("/{notification_id}/payload")
def read_notification_payload(
    notification_id: int, db: Session = Depends(get_db)
) -> dict[str, Any]:
    """Return the JSON document the gateway would receive for the notification."""

    notification = NotificationRepository(db).get(notification_id)
    if notification is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Notification not found")
    return build_payload(notification)


@router.post("/deliver", response_model=DeliveryReportRead)
def deliver_pending_notifications(
    skip_oversized: bool = Query(
        False, description="Leave oversized notifications unsent instead of aborting"
    ),
    db: Session = Depends(get_db),
    connection_factory: ConnectionFactory = Depends(get_connection_factory),
) -> DeliveryReportRead:
    """Send every pending notification over one gateway connection."""

    try:
        report = send_notifications(
            db, connection_factory=connection_factory, skip_oversized=skip_oversized
        )
    except ExceededMessageSizeError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": str(exc), "notification_id": exc.notification_id},
        ) from exc
    except (GatewayConfigurationError, OSError) as exc:
        logger.exception("Push gateway unavailable: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail="Push gateway unavailable"
        ) from exc
    return _report_to_schema(report)
