"""Domain entity representing a device registered for push notifications."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

_TOKEN_STRIP_CHARS = "<> \t\r\n"


def normalize_device_token(token: str) -> str:
    """Return ``token`` as a lowercase hex string without separators.

    Devices report their token in several shapes (``<abcd 1234 ...>``, upper
    case hex, plain hex). Raises ``ValueError`` when the result is not valid hex.
    """

    normalized = "".join(
        char for char in str(token).strip() if char not in _TOKEN_STRIP_CHARS
    ).lower()
    if not normalized:
        raise ValueError("Device token must not be empty")
    try:
        bytes.fromhex(normalized)
    except ValueError as exc:
        raise ValueError(f"Device token is not valid hex: {token!r}") from exc
    return normalized


@dataclass
class Device:
    """Destination device identified by the token issued by the gateway."""

    id: int | None
    token: str
    created_at: datetime | None = None
    last_registered_at: datetime | None = None

    def to_binary(self) -> bytes:
        """Return the raw token bytes placed inside every frame."""

        return bytes.fromhex(normalize_device_token(self.token))


__all__ = ["Device", "normalize_device_token"]
