"""Tests for the gateway socket wrapper and its disconnect handling."""

from __future__ import annotations

import socket

import pytest

from pushgate.config import Settings
from pushgate.domain.exceptions import GatewayConfigurationError, TransportBrokenError
from pushgate.infrastructure.gateway import GatewayConnection, open_for_delivery


@pytest.fixture()
def socket_pair():
    gateway_end, client_end = socket.socketpair()
    yield gateway_end, client_end
    gateway_end.close()
    client_end.close()


class ResettingSocket:
    """Socket stand-in whose peer resets the connection on every call."""

    def __init__(self) -> None:
        self.closed = False

    def sendall(self, data: bytes) -> None:
        raise ConnectionResetError("Connection reset by peer")

    def recv(self, size: int) -> bytes:
        raise ConnectionResetError("Connection reset by peer")

    def fileno(self) -> int:
        return -1

    def close(self) -> None:
        self.closed = True


def test_write_sends_frame_to_peer(socket_pair) -> None:
    gateway_end, client_end = socket_pair
    connection = GatewayConnection(client_end)

    connection.write(b"\x01frame")

    assert gateway_end.recv(16) == b"\x01frame"


def test_write_after_peer_closed_raises_transport_broken(socket_pair) -> None:
    gateway_end, client_end = socket_pair
    gateway_end.close()
    connection = GatewayConnection(client_end)

    with pytest.raises(TransportBrokenError) as excinfo:
        connection.write(b"x" * 10)

    assert isinstance(excinfo.value.__cause__, BrokenPipeError)


def test_write_maps_connection_reset_to_transport_broken() -> None:
    with pytest.raises(TransportBrokenError):
        GatewayConnection(ResettingSocket()).write(b"frame")


def test_other_socket_errors_propagate_unchanged(socket_pair) -> None:
    _, client_end = socket_pair
    connection = GatewayConnection(client_end)
    client_end.close()

    with pytest.raises(OSError) as excinfo:
        connection.write(b"frame")

    assert not isinstance(excinfo.value, TransportBrokenError)


def test_read_returns_empty_bytes_after_reset() -> None:
    assert GatewayConnection(ResettingSocket()).read(6) == b""


def test_read_returns_empty_bytes_after_peer_closed(socket_pair) -> None:
    gateway_end, client_end = socket_pair
    gateway_end.sendall(b"\x08\x07")
    gateway_end.close()
    connection = GatewayConnection(client_end)

    assert connection.read(6) == b"\x08\x07"
    assert connection.read(6) == b""


def test_close_is_idempotent(socket_pair) -> None:
    _, client_end = socket_pair
    connection = GatewayConnection(client_end)

    connection.close()
    connection.close()

    assert client_end.fileno() == -1


def test_open_for_delivery_closes_connection_on_error(socket_pair, monkeypatch) -> None:
    _, client_end = socket_pair
    monkeypatch.setattr(
        GatewayConnection, "open", classmethod(lambda cls, settings=None: cls(client_end))
    )

    with pytest.raises(RuntimeError):
        with open_for_delivery() as connection:
            assert connection.fileno() == client_end.fileno()
            raise RuntimeError("batch failed")

    assert client_end.fileno() == -1


def test_open_requires_certificate() -> None:
    with pytest.raises(GatewayConfigurationError, match="APNS_CERT_PATH"):
        GatewayConnection.open(Settings(apns_cert_path=None))


def test_open_reports_missing_certificate_file(tmp_path) -> None:
    settings = Settings(apns_cert_path=str(tmp_path / "missing.pem"))

    with pytest.raises(GatewayConfigurationError, match="Unable to load"):
        GatewayConnection.open(settings)
