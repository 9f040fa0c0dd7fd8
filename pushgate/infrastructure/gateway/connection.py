"""TLS connection to the binary push gateway."""

from __future__ import annotations

import logging
import socket
import ssl
from collections.abc import Iterator
from contextlib import contextmanager
from types import TracebackType

from pushgate.config import Settings, get_settings
from pushgate.domain.exceptions import GatewayConfigurationError, TransportBrokenError

logger = logging.getLogger(__name__)

_DISCONNECT_ERRORS = (
    BrokenPipeError,
    ConnectionResetError,
    ConnectionAbortedError,
    ssl.SSLEOFError,
    ssl.SSLZeroReturnError,
)


class GatewayConnection:
    """Thin wrapper around a connected socket speaking the gateway protocol.

    Writes that fail because the peer went away raise
    :class:`TransportBrokenError`; every other ``OSError`` propagates unchanged.
    """

    def __init__(self, sock: socket.socket) -> None:
        self._sock = sock
        self._closed = False

    @classmethod
    def open(cls, settings: Settings | None = None) -> "GatewayConnection":
        """Connect to the configured gateway and complete the TLS handshake."""

        settings = settings or get_settings()
        if not settings.apns_cert_path:
            raise GatewayConfigurationError(
                "APNS_CERT_PATH must be configured to connect to the push gateway"
            )

        context = ssl.create_default_context(ssl.Purpose.SERVER_AUTH)
        try:
            context.load_cert_chain(
                certfile=settings.apns_cert_path,
                keyfile=settings.apns_key_path,
                password=settings.apns_key_password,
            )
        except (FileNotFoundError, ssl.SSLError) as exc:
            raise GatewayConfigurationError(
                f"Unable to load the gateway certificate: {exc}"
            ) from exc

        raw = socket.create_connection(
            (settings.apns_host, settings.apns_port),
            timeout=settings.apns_connect_timeout_seconds,
        )
        try:
            sock = context.wrap_socket(raw, server_hostname=settings.apns_host)
        except Exception:
            raw.close()
            raise
        sock.settimeout(None)
        logger.info(
            "Connected to push gateway %s:%s", settings.apns_host, settings.apns_port
        )
        return cls(sock)

    def fileno(self) -> int:
        return self._sock.fileno()

    def write(self, data: bytes) -> None:
        try:
            self._sock.sendall(data)
        except _DISCONNECT_ERRORS as exc:
            raise TransportBrokenError(str(exc) or exc.__class__.__name__) from exc

    def read(self, size: int) -> bytes:
        try:
            return self._sock.recv(size)
        except _DISCONNECT_ERRORS:
            return b""

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            self._sock.close()
        except OSError:  # pragma: no cover - closing a dead socket
            logger.debug("Error while closing the gateway socket", exc_info=True)

    def __enter__(self) -> "GatewayConnection":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()


@contextmanager
def open_for_delivery(settings: Settings | None = None) -> Iterator[GatewayConnection]:
    """Open a gateway connection for one delivery pass and always close it."""

    connection = GatewayConnection.open(settings)
    try:
        yield connection
    finally:
        connection.close()


__all__ = ["GatewayConnection", "open_for_delivery"]
