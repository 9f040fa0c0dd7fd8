"""Tests for the device and notification domain entities."""

from __future__ import annotations

import pytest

from pushgate.domain.entities import (
    ALERT_MAX_LENGTH,
    Device,
    Notification,
    normalize_device_token,
    truncate_alert,
)

TOKEN_BYTES = bytes(range(32))


def _notification(**overrides) -> Notification:
    values = {"id": 1, "device": Device(id=1, token=TOKEN_BYTES.hex())}
    values.update(overrides)
    return Notification(**values)


@pytest.mark.parametrize("length", [151, 200, 1000])
def test_long_alerts_are_truncated_to_the_limit(length: int) -> None:
    notification = _notification(alert="x" * length)

    assert len(notification.alert) == ALERT_MAX_LENGTH
    assert notification.alert.endswith("...")
    assert notification.alert.startswith("x" * 147)


@pytest.mark.parametrize("message", ["", "Hello!", "y" * 150])
def test_short_alerts_are_kept(message: str) -> None:
    assert _notification(alert=message).alert == message


def test_alert_is_truncated_on_assignment() -> None:
    notification = _notification()
    notification.alert = "z" * 300

    assert len(notification.alert) == 150


def test_truncate_alert_accepts_none() -> None:
    assert truncate_alert(None) is None


def test_device_id_defaults_to_the_device() -> None:
    notification = _notification(device=Device(id=7, token="ab"))

    assert notification.device_id == 7
    assert notification.is_sent is False


def test_device_token_is_normalized() -> None:
    raw = "<" + " ".join(TOKEN_BYTES.hex().upper()[i : i + 8] for i in range(0, 64, 8)) + ">"

    assert normalize_device_token(raw) == TOKEN_BYTES.hex()
    assert Device(id=None, token=raw).to_binary() == TOKEN_BYTES


@pytest.mark.parametrize("token", ["", "<>", "not-hex", "abc"])
def test_invalid_device_tokens_are_rejected(token: str) -> None:
    with pytest.raises(ValueError):
        normalize_device_token(token)
