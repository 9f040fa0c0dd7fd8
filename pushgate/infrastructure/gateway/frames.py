"""Binary frame layouts understood by the push gateway.

Both variants share the same tail::

    <token length: 2 bytes BE> <token> <payload length: 2 bytes BE> <payload>

The payload length is written as a zero byte followed by a single length
byte, so payloads longer than 255 bytes cannot be framed. The legacy frame
starts with command ``0``. The enhanced frame starts with command ``1``, the
notification identifier and an absolute expiry, which lets the gateway report
errors against a specific message.
"""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from datetime import datetime
from typing import Union

from pushgate.config import DEFAULT_NOTIFICATION_EXPIRATION_SECONDS
from pushgate.domain.entities import Notification
from pushgate.domain.exceptions import ExceededMessageSizeError
from pushgate.utils import epoch_seconds

from .payload import encode_payload

logger = logging.getLogger(__name__)

LEGACY_COMMAND = 0
ENHANCED_COMMAND = 1
MAX_FRAME_SIZE = 256
MAX_PAYLOAD_SIZE = 255
MAX_IDENTIFIER = 0xFFFFFFFF


@dataclass(frozen=True)
class LegacyFrame:
    """Frame without identifier or expiry; the gateway cannot report errors for it."""


@dataclass(frozen=True)
class EnhancedFrame:
    """Frame carrying ``identifier`` and the absolute ``expiry`` in epoch seconds."""

    identifier: int
    expiry: int


FrameKind = Union[LegacyFrame, EnhancedFrame]


def _pack_frame(
    header: bytes, token: bytes, payload: bytes, notification_id: int | None
) -> bytes:
    token_part = struct.pack("!H", len(token)) + token
    if len(payload) > MAX_PAYLOAD_SIZE:
        raise ExceededMessageSizeError(
            header + token_part + struct.pack("!H", len(payload)) + payload,
            MAX_FRAME_SIZE,
            notification_id=notification_id,
        )

    frame = header + token_part + b"\x00" + struct.pack("!B", len(payload)) + payload
    if len(frame) > MAX_FRAME_SIZE:
        raise ExceededMessageSizeError(
            frame, MAX_FRAME_SIZE, notification_id=notification_id
        )
    logger.debug("Built %s byte frame with %s byte payload", len(frame), len(payload))
    return frame


def build_frame(notification: Notification, kind: FrameKind) -> bytes:
    """Encode ``notification`` using the frame variant described by ``kind``."""

    token = notification.device.to_binary()
    payload = encode_payload(notification)

    if isinstance(kind, EnhancedFrame):
        header = struct.pack("!BII", ENHANCED_COMMAND, kind.identifier, kind.expiry)
    elif isinstance(kind, LegacyFrame):
        header = struct.pack("!B", LEGACY_COMMAND)
    else:
        raise TypeError(f"Unsupported frame kind: {kind!r}")
    return _pack_frame(header, token, payload, notification.id)


def build_legacy_frame(notification: Notification) -> bytes:
    """Return the command ``0`` frame for ``notification``."""

    return build_frame(notification, LegacyFrame())


def build_enhanced_frame(
    notification: Notification,
    expiry_seconds: int = DEFAULT_NOTIFICATION_EXPIRATION_SECONDS,
    *,
    now: datetime | float | None = None,
) -> bytes:
    """Return the command ``1`` frame expiring ``expiry_seconds`` after ``now``."""

    if notification.id is None:
        raise ValueError("Notification must have an identifier to build an enhanced frame")
    if not 0 <= notification.id <= MAX_IDENTIFIER:
        raise ValueError(
            f"Notification identifier {notification.id} does not fit in 4 unsigned bytes"
        )
    kind = EnhancedFrame(
        identifier=notification.id, expiry=epoch_seconds(now) + expiry_seconds
    )
    return build_frame(notification, kind)


__all__ = [
    "ENHANCED_COMMAND",
    "EnhancedFrame",
    "FrameKind",
    "LEGACY_COMMAND",
    "LegacyFrame",
    "MAX_FRAME_SIZE",
    "MAX_IDENTIFIER",
    "MAX_PAYLOAD_SIZE",
    "build_enhanced_frame",
    "build_frame",
    "build_legacy_frame",
]
