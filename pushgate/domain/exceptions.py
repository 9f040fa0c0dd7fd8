"""Errors raised while encoding frames and talking to the push gateway."""

from __future__ import annotations


class PushGatewayError(Exception):
    """Base class for every push delivery error."""


class ExceededMessageSizeError(PushGatewayError):
    """Raised when a frame does not fit in the gateway's size limit.

    The oversized frame is kept on the exception so callers can log or inspect
    it; it must never be written to the connection.
    """

    def __init__(
        self, frame: bytes, limit: int = 256, *, notification_id: int | None = None
    ) -> None:
        self.frame = frame
        self.size = len(frame)
        self.limit = limit
        self.notification_id = notification_id
        subject = "Frame" if notification_id is None else f"Frame for notification {notification_id}"
        super().__init__(
            f"{subject} is {self.size} bytes, exceeding the {limit} byte limit"
        )


class TransportBrokenError(PushGatewayError):
    """Raised by the transport when the gateway dropped the connection."""


class ShortReadError(PushGatewayError):
    """Raised when an error response ends before its six bytes were received."""

    def __init__(self, data: bytes, expected: int = 6) -> None:
        self.data = data
        self.expected = expected
        super().__init__(
            f"Expected {expected} bytes of error response, received {len(data)}"
        )


class GatewayConfigurationError(PushGatewayError):
    """Raised when the settings do not allow opening a gateway connection."""


__all__ = [
    "ExceededMessageSizeError",
    "GatewayConfigurationError",
    "PushGatewayError",
    "ShortReadError",
    "TransportBrokenError",
]
