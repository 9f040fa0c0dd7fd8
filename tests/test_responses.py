"""Unit tests for reading the gateway's asynchronous error response."""

from __future__ import annotations

import socket

import pytest

from pushgate.domain.exceptions import ShortReadError
from pushgate.infrastructure.gateway import decode_error_response, read_error


@pytest.fixture()
def socket_pair():
    gateway, client = socket.socketpair()
    yield gateway, client
    gateway.close()
    client.close()


def test_read_error_without_response_returns_none(socket_pair) -> None:
    _, client = socket_pair

    assert read_error(client, timeout=0.05) is None


def test_read_error_decodes_six_byte_frame(socket_pair) -> None:
    gateway, client = socket_pair
    gateway.sendall(bytes([8, 1, 0, 0, 0, 42]))

    response = read_error(client, timeout=1)

    assert response is not None
    assert response.command == 8
    assert response.error_code == 1
    assert response.identifier == 42
    assert response.description == "Processing error"
    error_code, identifier = response
    assert (error_code, identifier) == (1, 42)


def test_read_error_collects_a_response_split_across_packets(socket_pair) -> None:
    gateway, client = socket_pair
    gateway.sendall(bytes([8, 8, 0, 0]))
    gateway.sendall(bytes([1, 2]))

    response = read_error(client, timeout=1)

    assert response.error_code == 8
    assert response.identifier == 0x0102


def test_read_error_raises_on_short_response(socket_pair) -> None:
    gateway, client = socket_pair
    gateway.sendall(bytes([8, 7, 0]))
    gateway.close()

    with pytest.raises(ShortReadError) as excinfo:
        read_error(client, timeout=1)

    assert excinfo.value.data == bytes([8, 7, 0])


def test_decode_does_not_validate_command_byte() -> None:
    response = decode_error_response(bytes([9, 255, 255, 255, 255, 255]))

    assert response.command == 9
    assert response.identifier == 0xFFFFFFFF
    assert response.description == "None (unknown)"


def test_decode_unknown_status_code_description() -> None:
    assert decode_error_response(bytes([8, 42, 0, 0, 0, 1])).description == (
        "Unrecognised status code"
    )
