"""Build the JSON payload carried inside every gateway frame."""

from __future__ import annotations

import json
from typing import Any

from pushgate.domain.entities import Notification

DEFAULT_SOUND = "1.aiff"


class PayloadEncoder:
    """Turn a :class:`Notification` into the ``aps`` dictionary and its JSON bytes."""

    def build(self, notification: Notification) -> dict[str, Any]:
        """Return the payload structure for ``notification``.

        ``aps`` keys are emitted in the order alert, badge, sound. Custom
        properties are added as top-level siblings of ``aps`` with their values
        converted with ``str()``, so ``True`` is sent as ``"True"`` and ``None``
        as ``"None"``.
        """

        aps: dict[str, Any] = {}
        if notification.alert:
            aps["alert"] = notification.alert
        if notification.badge is not None:
            aps["badge"] = int(notification.badge)
        sound = notification.sound
        if sound is True:
            aps["sound"] = DEFAULT_SOUND
        elif isinstance(sound, str):
            aps["sound"] = sound

        payload: dict[str, Any] = {"aps": aps}
        for key, value in (notification.custom_properties or {}).items():
            payload[str(key)] = str(value)
        return payload

    def encode(self, notification: Notification) -> bytes:
        """Return the compact UTF-8 JSON document for ``notification``."""

        return json.dumps(
            self.build(notification), separators=(",", ":"), ensure_ascii=False
        ).encode("utf-8")


payload_encoder = PayloadEncoder()


def build_payload(notification: Notification) -> dict[str, Any]:
    """Public helper that delegates to the shared encoder instance."""

    return payload_encoder.build(notification)


def encode_payload(notification: Notification) -> bytes:
    """Public helper returning the JSON bytes sent to the gateway."""

    return payload_encoder.encode(notification)


__all__ = [
    "DEFAULT_SOUND",
    "PayloadEncoder",
    "build_payload",
    "encode_payload",
    "payload_encoder",
]
