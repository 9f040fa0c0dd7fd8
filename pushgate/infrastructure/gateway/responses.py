"""Read the error response the gateway sends before closing a connection."""

from __future__ import annotations

import logging
import select
import struct
from dataclasses import dataclass
from typing import Any, Iterator

from pushgate.domain.exceptions import ShortReadError

logger = logging.getLogger(__name__)

ERROR_RESPONSE_COMMAND = 8
ERROR_RESPONSE_SIZE = 6
DEFAULT_RESPONSE_TIMEOUT = 5

ERROR_DESCRIPTIONS: dict[int, str] = {
    0: "No errors encountered",
    1: "Processing error",
    2: "Missing device token",
    3: "Missing topic",
    4: "Missing payload",
    5: "Invalid token size",
    6: "Invalid topic size",
    7: "Invalid payload size",
    8: "Invalid token",
    10: "Shutdown",
    255: "None (unknown)",
}


@dataclass(frozen=True)
class ErrorResponse:
    """Decoded ``[command][status][identifier]`` response frame.

    Unpacks as ``(error_code, identifier)``.
    """

    command: int
    error_code: int
    identifier: int

    @property
    def description(self) -> str:
        return ERROR_DESCRIPTIONS.get(self.error_code, "Unrecognised status code")

    def __iter__(self) -> Iterator[int]:
        yield self.error_code
        yield self.identifier


def decode_error_response(data: bytes) -> ErrorResponse:
    """Decode a six byte response, raising :class:`ShortReadError` on fewer bytes."""

    if len(data) < ERROR_RESPONSE_SIZE:
        raise ShortReadError(data, ERROR_RESPONSE_SIZE)
    command, error_code, identifier = struct.unpack("!BBI", data[:ERROR_RESPONSE_SIZE])
    return ErrorResponse(command=command, error_code=error_code, identifier=identifier)


def _read_exactly(connection: Any, size: int) -> bytes:
    reader = getattr(connection, "read", None) or connection.recv
    buffer = b""
    while len(buffer) < size:
        chunk = reader(size - len(buffer))
        if not chunk:
            break
        buffer += chunk
    return buffer


def read_error(
    connection: Any, timeout: float = DEFAULT_RESPONSE_TIMEOUT
) -> ErrorResponse | None:
    """Wait up to ``timeout`` seconds for an error response on ``connection``.

    Returns ``None`` when nothing arrives, which is the usual outcome. The
    connection must be selectable (expose ``fileno``) and provide ``read`` or
    ``recv``.
    """

    readable, _, _ = select.select([connection], [], [], timeout)
    if not readable:
        logger.debug("No error response from the gateway within %s seconds", timeout)
        return None

    response = decode_error_response(_read_exactly(connection, ERROR_RESPONSE_SIZE))
    if response.command != ERROR_RESPONSE_COMMAND:
        logger.debug("Unexpected response command %s", response.command)
    return response


__all__ = [
    "DEFAULT_RESPONSE_TIMEOUT",
    "ERROR_DESCRIPTIONS",
    "ERROR_RESPONSE_COMMAND",
    "ERROR_RESPONSE_SIZE",
    "ErrorResponse",
    "decode_error_response",
    "read_error",
]
