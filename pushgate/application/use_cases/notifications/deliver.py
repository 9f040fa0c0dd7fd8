"""Batch delivery of pending notifications over a single gateway connection."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from functools import partial
from typing import Any

from sqlalchemy.orm import Session

from pushgate.config import Settings, get_settings
from pushgate.domain.entities import Notification
from pushgate.domain.exceptions import (
    ExceededMessageSizeError,
    ShortReadError,
    TransportBrokenError,
)
from pushgate.infrastructure.gateway import (
    build_enhanced_frame,
    open_for_delivery,
    read_error,
)
from pushgate.infrastructure.repositories import NotificationRepository
from pushgate.utils import now_in_app_timezone

logger = logging.getLogger(__name__)

ConnectionFactory = Callable[[], Any]


@dataclass
class DeliveryReport:
    """Outcome of one delivery pass.

    ``failed`` maps a notification id to the error code reported by the
    gateway, or ``None`` when the gateway did not answer. ``oversized`` lists
    notifications left unsent because their frame exceeds the size limit.
    """

    sent: list[int | None] = field(default_factory=list)
    failed: dict[int | None, int | None] = field(default_factory=dict)
    oversized: list[int | None] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.sent) + len(self.failed)


@contextmanager
def _acquire(connection_factory: ConnectionFactory) -> Iterator[Any]:
    resource = connection_factory()
    if hasattr(resource, "__enter__"):
        with resource as connection:
            yield connection
        return
    try:
        yield resource
    finally:
        resource.close()


def _capture_error(connection: Any, notification: Notification, timeout: float) -> int | None:
    try:
        response = read_error(connection, timeout)
    except ShortReadError as exc:
        logger.warning(
            "Discarding truncated gateway response for notification %s: %s",
            notification.id,
            exc,
        )
        return None
    if response is None:
        return None

    logger.warning(
        "Gateway rejected notification %s with status %s (%s)",
        response.identifier,
        response.error_code,
        response.description,
    )
    return response.error_code


def deliver(
    notifications: Iterable[Notification],
    connection_factory: ConnectionFactory,
    *,
    save: Callable[[Notification], Any] | None = None,
    expiry_seconds: int | None = None,
    response_timeout: float | None = None,
    skip_oversized: bool = False,
    clock: Callable[[], datetime] = now_in_app_timezone,
) -> DeliveryReport:
    """Write every unsent notification in ``notifications`` to one connection.

    ``connection_factory`` is called once, and only when there is something to
    send. A write that fails with :class:`TransportBrokenError` triggers a read
    of the gateway's error response; the notification is marked sent either
    way and the batch moves on. A frame over the size limit aborts the batch
    unless ``skip_oversized`` is set, in which case the notification stays
    unsent and is listed in ``DeliveryReport.oversized``. Any other error
    aborts the batch. The connection is released in every case.
    """

    pending = [notification for notification in notifications if notification.sent_at is None]
    report = DeliveryReport()
    if not pending:
        logger.debug("No pending notifications to deliver")
        return report

    settings = get_settings()
    if expiry_seconds is None:
        expiry_seconds = settings.apns_notification_expiration_seconds
    if response_timeout is None:
        response_timeout = settings.apns_response_timeout_seconds

    logger.info("Delivering %s notifications", len(pending))
    with _acquire(connection_factory) as connection:
        for notification in pending:
            try:
                frame = build_enhanced_frame(notification, expiry_seconds)
            except ExceededMessageSizeError as exc:
                if not skip_oversized:
                    logger.error("Aborting delivery: %s", exc)
                    raise
                logger.warning("Skipping notification: %s", exc)
                report.oversized.append(notification.id)
                continue

            try:
                connection.write(frame)
            except TransportBrokenError as exc:
                logger.warning(
                    "Connection broken while sending notification %s: %s",
                    notification.id,
                    exc,
                )
                error_code = _capture_error(connection, notification, response_timeout)
                if error_code is not None:
                    notification.error_code = error_code
                notification.sent_at = clock()
                report.failed[notification.id] = error_code
            else:
                notification.sent_at = clock()
                notification.error_code = 0
                report.sent.append(notification.id)

            if save is not None:
                save(notification)

    logger.info(
        "Delivery finished: %s sent, %s failed, %s oversized",
        len(report.sent),
        len(report.failed),
        len(report.oversized),
    )
    return report


def send_notifications(
    session: Session,
    *,
    notifications: Iterable[Notification] | None = None,
    connection_factory: ConnectionFactory | None = None,
    settings: Settings | None = None,
    skip_oversized: bool = False,
) -> DeliveryReport:
    """Deliver ``notifications`` (every unsent one by default) and persist the outcome."""

    settings = settings or get_settings()
    repository = NotificationRepository(session)
    if notifications is None:
        notifications = repository.list_unsent()
    if connection_factory is None:
        connection_factory = partial(open_for_delivery, settings)

    return deliver(
        notifications,
        connection_factory,
        save=repository.update,
        expiry_seconds=settings.apns_notification_expiration_seconds,
        response_timeout=settings.apns_response_timeout_seconds,
        skip_oversized=skip_oversized,
    )


__all__ = ["ConnectionFactory", "DeliveryReport", "deliver", "send_notifications"]
